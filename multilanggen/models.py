"""Site configuration, language index and language data files."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any


class LanguageDataError(Exception):
    """Raised when a configuration or language file cannot be read or parsed."""


def _reject_constant(name: str) -> Any:
    raise ValueError(f"非法的 JSON 值: {name}")


def _read_json(path: Path, what: str) -> Any:
    try:
        content = path.read_bytes()
    except OSError as exc:
        raise LanguageDataError(f"读取 {what} 失败: {exc}") from exc
    try:
        return json.loads(content, parse_constant=_reject_constant)
    except ValueError as exc:
        raise LanguageDataError(f"解析 {what} 失败: {exc}") from exc


def _string_field(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise LanguageDataError(f"字段 {key} 必须是字符串")
    return value


def _require_object(data: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise LanguageDataError(f"{what} 必须是 JSON 对象")
    return data


def _extension(filename: str) -> str:
    """Return the extension of the last path element, dot included."""
    name = filename.replace("\\", "/").rsplit("/", 1)[-1]
    dot = name.rfind(".")
    return name[dot:] if dot >= 0 else ""


@dataclass
class Language:
    """One entry of the language index, plus the fields filled in at render time."""

    code: str = ""
    name: str = ""
    display_name: str = ""
    file: str = ""
    url: str = ""
    current: bool = False

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Language:
        data = _require_object(data, "语言配置")
        return cls(
            code=_string_field(data, "code"),
            name=_string_field(data, "name"),
            display_name=_string_field(data, "displayName"),
            file=_string_field(data, "file"),
        )


@dataclass
class Manifest:
    """Site-wide settings shared by every generated page."""

    base_url: str = ""
    site_name: str = ""
    author: str = ""
    description: str = ""
    version: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Manifest:
        data = _require_object(data, "manifest.json")
        return cls(
            base_url=_string_field(data, "baseURL"),
            site_name=_string_field(data, "siteName"),
            author=_string_field(data, "author"),
            description=_string_field(data, "description"),
            version=_string_field(data, "version"),
        )

    @classmethod
    def default(cls) -> Manifest:
        """Settings used when no readable manifest is present."""
        return cls(site_name="Website", version="1.0.0")


def load_manifest(path: str | Path) -> Manifest:
    """Read the site manifest from a JSON file."""
    data = _read_json(Path(path), "manifest.json")
    if data is None:
        return Manifest()
    return Manifest.from_dict(data)


def load_language_index(lang_dir: str | Path) -> list[Language]:
    """Read ``index.json`` from the language directory."""
    data = _read_json(Path(lang_dir) / "index.json", "语言索引文件")
    if data is None:
        return []
    if not isinstance(data, list):
        raise LanguageDataError("语言索引文件必须是 JSON 数组")
    return [Language.from_dict(entry) for entry in data]


def parse_language_file(file_path: str | Path, ext: str) -> dict[str, Any]:
    """Parse a language data file; only the ``.json`` format is supported."""
    path = Path(file_path)
    try:
        content = path.read_bytes()
    except OSError as exc:
        raise LanguageDataError(str(exc)) from exc
    if ext != ".json":
        raise LanguageDataError(f"不支持的文件格式 {ext}，仅支持 .json 格式")
    try:
        data = json.loads(content, parse_constant=_reject_constant)
    except ValueError as exc:
        raise LanguageDataError(f"解析 JSON 文件失败: {exc}") from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise LanguageDataError("解析 JSON 文件失败: 语言数据必须是 JSON 对象")
    return data


def load_language_data(lang_dir: str | Path, filename: str) -> dict[str, Any]:
    """Load the data file named by a language entry."""
    return parse_language_file(Path(lang_dir) / filename, _extension(filename))