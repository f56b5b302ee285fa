"""Rendering one page per language from a project directory."""

from __future__ import annotations

import dataclasses
import json
from collections.abc import Iterable, Mapping, Sequence
from pathlib import Path
from typing import Any

import jinja2

from multilanggen.models import (
    Language,
    LanguageDataError,
    Manifest,
    load_language_data,
    load_language_index,
    load_manifest,
)

DEFAULT_OUTPUT_PATTERN = "{lang}.html"

_JSON_ESCAPES = str.maketrans(
    {
        "<": "\\u003c",
        ">": "\\u003e",
        "&": "\\u0026",
        "\u2028": "\\u2028",
        "\u2029": "\\u2029",
    }
)


class GenerationError(Exception):
    """Raised when the pages of a project cannot be generated."""


def output_name(pattern: str, code: str) -> str:
    """Substitute a language code for every ``{lang}`` in the pattern."""
    return pattern.replace("{lang}", code)


def _to_json(data: Any) -> str:
    text = json.dumps(
        data, ensure_ascii=False, sort_keys=True, separators=(",", ":"), allow_nan=False
    )
    return text.translate(_JSON_ESCAPES)


def parse_template(template_path: str | Path) -> jinja2.Template:
    """Read and compile an HTML template with autoescaping enabled."""
    path = Path(template_path)
    try:
        source = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise GenerationError(f"读取模板文件失败: {exc}") from exc
    environment = jinja2.Environment(autoescape=True)
    try:
        template = environment.from_string(source)
    except jinja2.TemplateSyntaxError as exc:
        raise GenerationError(f"解析模板失败: {exc}") from exc
    template.name = path.name
    return template


def language_links(languages: Iterable[Language]) -> dict[str, Language]:
    """Map each language code to its entry; a later duplicate replaces an earlier one."""
    return {lang.code: lang for lang in languages}


def filter_languages(
    languages: Sequence[Language], codes: Iterable[str]
) -> list[Language]:
    """Keep only the languages whose codes were asked for, in index order."""
    wanted = dict.fromkeys(codes)
    if not wanted:
        return list(languages)
    selected = []
    for lang in languages:
        if lang.code in wanted:
            selected.append(lang)
            del wanted[lang.code]
    if wanted:
        missing = " ".join(wanted)
        raise GenerationError(f"未找到以下语言代码的配置: [{missing}]")
    return selected


def render_language_file(
    template: jinja2.Template,
    current: Language,
    links: Mapping[str, Language],
    lang_dir: str | Path,
    output_dir: str | Path,
    manifest: Manifest,
    pattern: str = DEFAULT_OUTPUT_PATTERN,
) -> Path:
    """Render the page of one language and return the path written."""
    try:
        data = load_language_data(lang_dir, current.file)
    except LanguageDataError as exc:
        raise GenerationError(f"加载语言数据失败: {exc}") from exc

    lang = dataclasses.replace(
        current, url=output_name(pattern, current.code), current=True
    )
    all_links = [
        dataclasses.replace(
            link, url=output_name(pattern, link.code), current=link.code == current.code
        )
        for link in links.values()
    ]
    try:
        i18n_json = _to_json(data)
    except ValueError as exc:
        raise GenerationError(f"序列化语言数据失败: {exc}") from exc

    try:
        rendered = template.render(
            lang=lang,
            lang_links=all_links,
            i18n=data,
            i18n_json=i18n_json,
            base=manifest,
        )
    except jinja2.TemplateError as exc:
        raise GenerationError(f"模板渲染失败: {exc}") from exc

    output_path = Path(output_dir) / output_name(pattern, current.code)
    try:
        output_path.write_text(rendered, encoding="utf-8")
    except OSError as exc:
        raise GenerationError(f"创建输出文件失败: {exc}") from exc
    return output_path


def _describe(languages: Iterable[Language]) -> str:
    return ", ".join(f"{lang.display_name}({lang.code})" for lang in languages)


def generate(
    project_dir: str | Path = ".",
    output_pattern: str = DEFAULT_OUTPUT_PATTERN,
    lang_codes: Iterable[str] | None = None,
) -> list[Path]:
    """Generate every page of a project directory and return the paths written."""
    project = Path(project_dir)
    if not project.exists():
        raise GenerationError(f"项目目录不存在: {project}")

    template_path = project / "index.tmpl"
    lang_dir = project / "langs"
    output_dir = project / "outputs"
    manifest_path = project / "manifest.json"
    index_path = lang_dir / "index.json"

    if not template_path.exists():
        raise GenerationError(f"模板文件不存在: {template_path}")
    if not index_path.exists():
        raise GenerationError(f"语言索引文件不存在: {index_path}")

    try:
        output_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise GenerationError(f"创建输出目录失败: {exc}") from exc

    try:
        manifest = load_manifest(manifest_path)
    except LanguageDataError as exc:
        print(f"警告: 无法读取 manifest.json，将使用默认值: {exc}")
        manifest = Manifest.default()

    try:
        languages = load_language_index(lang_dir)
    except LanguageDataError as exc:
        raise GenerationError(f"读取语言索引失败: {exc}") from exc
    if not languages:
        raise GenerationError("在索引文件中未找到任何语言配置")

    codes = list(lang_codes or [])
    if codes:
        languages = filter_languages(languages, codes)
        print(f"只生成指定语言 ({len(languages)} 种): {_describe(languages)}")
    else:
        print(f"找到 {len(languages)} 种语言: {_describe(languages)}")

    template = parse_template(template_path)
    links = language_links(languages)

    written = []
    for lang in languages:
        try:
            path = render_language_file(
                template, lang, links, lang_dir, output_dir, manifest, output_pattern
            )
        except GenerationError as exc:
            raise GenerationError(f"生成语言文件 {lang.code} 失败: {exc}") from exc
        written.append(path)
        print(f"生成文件: {path} ({lang.display_name})")

    print("多语言文件生成完成!")
    return written