"""Command line interface: the ``init`` and ``gen`` commands."""

from __future__ import annotations

import argparse
import csv
import sys
from collections.abc import Sequence

from multilanggen.generate import DEFAULT_OUTPUT_PATTERN, GenerationError, generate
from multilanggen.init_project import init_project
from multilanggen.models import LanguageDataError

_ROOT_DESCRIPTION = """多语言文件生成器 - 根据指定模板和语言文件生成对应的多语言页面。

支持功能:
- 初始化项目模板文件
- 根据模板文件生成多语言页面
- 自定义输出文件名格式
- 自动生成语言间链接
- 支持多种语言数据格式"""

_GEN_DESCRIPTION = """根据指定目录生成多语言文件。目录结构应包含：
- index.tmpl: 模板文件
- langs/index.json: 语言索引文件
- langs/*.json: 语言数据文件
- manifest.json: 站点基础配置（可选）
- outputs/: 输出目录

示例:
  multilang-gen gen .
  multilang-gen gen ./project --output "{lang}.html"
  multilang-gen gen . --lang zh
  multilang-gen gen . --lang zh,en
  multilang-gen gen . --lang zh --lang en --output "page-{lang}.html\""""

_INIT_DESCRIPTION = """初始化完整的项目模板文件到指定目录。

这个命令会创建一个完整的多语言项目模板，包括：
- manifest.json: 站点基础配置
- langs/index.json: 语言索引
- langs/zh-CN.json: 中文语言包示例
- langs/en-US.json: 英文语言包示例

示例:
  multilang-gen init ./my-project
  multilang-gen init ."""


class _SliceAction(argparse.Action):
    """Collect comma-separated values across repeated uses of an option."""

    def __call__(self, parser, namespace, values, option_string=None):
        collected = list(getattr(namespace, self.dest, None) or [])
        try:
            row = next(csv.reader([values]), [])
        except csv.Error as exc:
            parser.error(f"invalid argument {values!r} for {option_string}: {exc}")
        collected.extend(row)
        setattr(namespace, self.dest, collected)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with its subcommands."""
    parser = argparse.ArgumentParser(
        prog="multilang-gen",
        description=_ROOT_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-t", "--toggle", action="store_true", help="Help message for toggle"
    )
    commands = parser.add_subparsers(dest="command", metavar="command")

    gen = commands.add_parser(
        "gen",
        help="根据指定目录生成多语言文件",
        description=_GEN_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    gen.add_argument("directory", nargs="?", default=".")
    gen.add_argument(
        "-o",
        "--output",
        default=DEFAULT_OUTPUT_PATTERN,
        help="输出文件名模式，{lang} 为语言替代符",
    )
    gen.add_argument(
        "-l",
        "--lang",
        action=_SliceAction,
        default=[],
        help="只生成指定语言代码的文件，支持多个语言（如: zh,en 或 --lang zh --lang en）",
    )

    init = commands.add_parser(
        "init",
        help="初始化项目模板文件",
        description=_INIT_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    init.add_argument("target_dir", nargs="?", default=".")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line and return the exit status."""
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit as exc:
        return 0 if exc.code in (0, None) else 1

    try:
        if args.command == "gen":
            generate(args.directory, args.output, args.lang)
        elif args.command == "init":
            init_project(args.target_dir)
        else:
            parser.print_help()
    except (GenerationError, LanguageDataError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())