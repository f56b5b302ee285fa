import pytest

from multilanggen.cli import build_parser, main

TEMPLATE = (
    "<html lang=\"{{ lang.code }}\"><h1>{{ i18n.title }}</h1>"
    "{% for link in lang_links %}<a href=\"{{ link.url }}\">{{ link.display_name }}</a>"
    "{% endfor %}</html>"
)


@pytest.fixture
def project(tmp_path):
    assert main(["init", str(tmp_path)]) == 0
    (tmp_path / "index.tmpl").write_text(TEMPLATE, encoding="utf-8")
    return tmp_path


def test_parser_defaults():
    args = build_parser().parse_args(["gen"])
    assert args.directory == "."
    assert args.output == "{lang}.html"
    assert args.lang == []


def test_parser_lang_comma_and_repeat():
    args = build_parser().parse_args(["gen", "x", "--lang", "zh,en", "-l", "fr"])
    assert args.lang == ["zh", "en", "fr"]
    assert args.directory == "x"


def test_parser_init_target():
    args = build_parser().parse_args(["init", "site"])
    assert args.command == "init"
    assert args.target_dir == "site"


def test_init_creates_files(tmp_path):
    assert main(["init", str(tmp_path / "new")]) == 0
    assert (tmp_path / "new" / "langs" / "index.json").is_file()


def test_gen_all_languages(project):
    assert main(["gen", str(project)]) == 0
    zh = (project / "outputs" / "zh.html").read_text(encoding="utf-8")
    en = (project / "outputs" / "en.html").read_text(encoding="utf-8")
    assert "我的网站" in zh
    assert "My Website" in en
    assert 'href="en.html"' in zh


def test_gen_single_language(project):
    assert main(["gen", str(project), "--lang", "zh"]) == 0
    assert (project / "outputs" / "zh.html").exists()
    assert not (project / "outputs" / "en.html").exists()


def test_gen_output_pattern(project):
    assert main(["gen", str(project), "-o", "page-{lang}.html"]) == 0
    assert sorted(p.name for p in (project / "outputs").iterdir()) == [
        "page-en.html",
        "page-zh.html",
    ]


def test_gen_unknown_language(project, capsys):
    assert main(["gen", str(project), "--lang", "xx"]) == 1
    err = capsys.readouterr().err
    assert "xx" in err
    assert err.startswith("Error: ")


def test_gen_missing_directory(tmp_path, capsys):
    missing = tmp_path / "nope"
    assert main(["gen", str(missing)]) == 1
    assert str(missing) in capsys.readouterr().err


def test_gen_missing_template(tmp_path, capsys):
    main(["init", str(tmp_path)])
    capsys.readouterr()
    assert main(["gen", str(tmp_path)]) == 1
    assert "index.tmpl" in capsys.readouterr().err


def test_too_many_arguments(tmp_path):
    assert main(["gen", str(tmp_path), str(tmp_path)]) == 1


def test_no_command_prints_help(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "gen" in out
    assert "init" in out


def test_help_exits_cleanly(capsys):
    assert main(["--help"]) == 0
    assert "multilang-gen" in capsys.readouterr().out