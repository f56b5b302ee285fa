import json

import pytest

from multilanggen.generate import generate
from multilanggen.init_project import init_project
from multilanggen.models import Manifest, load_language_data, load_language_index, load_manifest


def test_creates_expected_files(tmp_path):
    target = tmp_path / "project"
    written = init_project(target)
    assert written == [
        target / "manifest.json",
        target / "langs" / "index.json",
        target / "langs" / "zh-CN.json",
        target / "langs" / "en-US.json",
    ]
    assert all(path.is_file() for path in written)


def test_manifest_content(tmp_path):
    init_project(tmp_path)
    assert load_manifest(tmp_path / "manifest.json") == Manifest(
        base_url="https://example.com",
        site_name="My Website",
        author="Website Author",
        description="A multilingual website",
        version="1.0.0",
    )


def test_language_index(tmp_path):
    init_project(tmp_path)
    languages = load_language_index(tmp_path / "langs")
    assert [lang.code for lang in languages] == ["zh", "en"]
    assert [lang.file for lang in languages] == ["zh-CN.json", "en-US.json"]
    assert languages[0].display_name == "中文"


def test_language_packs_share_keys(tmp_path):
    init_project(tmp_path)
    zh = load_language_data(tmp_path / "langs", "zh-CN.json")
    en = load_language_data(tmp_path / "langs", "en-US.json")
    assert set(zh) == set(en)
    assert zh["title"] == "我的网站"
    assert en["title"] == "My Website"


def test_files_are_indented_with_sorted_keys(tmp_path):
    init_project(tmp_path)
    text = (tmp_path / "manifest.json").read_text(encoding="utf-8")
    assert text.startswith('{\n    "')
    assert not text.endswith("\n")
    keys = list(json.loads(text))
    assert keys == sorted(keys)


def test_non_ascii_written_unescaped(tmp_path):
    init_project(tmp_path)
    text = (tmp_path / "langs" / "zh-CN.json").read_text(encoding="utf-8")
    assert "我的网站" in text
    assert "\\u" not in text


def test_running_twice_overwrites(tmp_path):
    init_project(tmp_path)
    (tmp_path / "manifest.json").write_text("{}", encoding="utf-8")
    init_project(tmp_path)
    assert load_manifest(tmp_path / "manifest.json").site_name == "My Website"


def test_prints_summary(tmp_path, capsys):
    init_project(tmp_path)
    out = capsys.readouterr().out
    assert f"项目模板已初始化到: {tmp_path}" in out
    assert "langs/en-US.json" in out


def test_target_is_a_file(tmp_path):
    blocker = tmp_path / "file"
    blocker.write_text("x", encoding="utf-8")
    with pytest.raises(OSError):
        init_project(blocker)


def test_initialised_project_generates(tmp_path):
    init_project(tmp_path)
    (tmp_path / "index.tmpl").write_text("{{ i18n.title }}", encoding="utf-8")
    written = generate(tmp_path)
    assert [path.name for path in written] == ["zh.html", "en.html"]
    assert (tmp_path / "outputs" / "en.html").read_text(encoding="utf-8") == "My Website"