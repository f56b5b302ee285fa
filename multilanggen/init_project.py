"""Scaffolding of a new multilingual project directory."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

_SITE = dict(
    baseURL="https://example.com",
    siteName="My Website",
    author="Website Author",
    description="A multilingual website",
    version="1.0.0",
)

# (code, name shown to readers, data file)
_LANGUAGES = (
    ("zh", "中文", "zh-CN.json"),
    ("en", "English", "en-US.json"),
)

# message key, Chinese text, English text
_MESSAGES = (
    ("title", "我的网站", "My Website"),
    ("subtitle", "基于模板的多语言网站", "Template-based multilingual website"),
    ("description", "这是一个多语言网站示例", "This is a multilingual website example"),
    ("welcome", "欢迎使用", "Welcome"),
    ("language_switcher", "语言切换", "Language Switcher"),
    ("switch_to", "切换到", "Switch to"),
    ("site_info", "站点信息", "Site Information"),
    ("site_name", "站点名称", "Site Name"),
    ("version", "版本", "Version"),
    ("base_url", "基础URL", "Base URL"),
    ("author", "作者", "Author"),
    ("current_language", "当前语言", "Current Language"),
    ("language_code", "语言代码", "Language Code"),
    ("language_name", "语言名称", "Language Name"),
    ("footer_text", "页脚文本", "Footer Text"),
)


def _language_index() -> list[dict[str, str]]:
    return [
        {"code": code, "name": name, "displayName": name, "file": filename}
        for code, name, filename in _LANGUAGES
    ]


def _messages(column: int) -> dict[str, str]:
    return {row[0]: row[column] for row in _MESSAGES}


def _dump(data: Any) -> str:
    return json.dumps(data, ensure_ascii=False, sort_keys=True, indent=4)


def _write(path: Path, data: Any, what: str) -> None:
    try:
        path.write_text(_dump(data), encoding="utf-8")
    except OSError as exc:
        raise OSError(f"{what}失败: {exc}") from exc


def _make_dir(path: Path, what: str) -> None:
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise OSError(f"{what}失败: {exc}") from exc


def init_project(target_dir: str | Path = ".") -> list[Path]:
    """Write a sample manifest and language files into a directory.

    Returns the paths of the files written.
    """
    target = Path(target_dir)
    _make_dir(target, "创建目标目录")
    langs_dir = target / "langs"
    _make_dir(langs_dir, "创建语言目录")

    files = [
        (target / "manifest.json", _SITE, "导出 manifest.json "),
        (langs_dir / "index.json", _language_index(), "导出语言索引"),
        (langs_dir / "zh-CN.json", _messages(1), "导出中文语言包"),
        (langs_dir / "en-US.json", _messages(2), "导出英文语言包"),
    ]
    for path, data, what in files:
        _write(path, data, what)

    written = [path for path, _, _ in files]
    print(f"项目模板已初始化到: {target_dir}")
    print("包含文件:")
    for path in written:
        print(f"  - {path.relative_to(target).as_posix()}")
    print("\n运行 'multilang-gen gen .' 来生成多语言文件")

    return written