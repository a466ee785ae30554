from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from pathlib import Path
from typing import Optional

from .config import DEFAULT_CFG_FILE, load_config
from .engine import collect_variables, create_markdown, render_text
from .errors import MdVarsUserError
from .version import tool_version


def _setup_logging() -> None:
    level = logging.DEBUG if os.environ.get("MDVARS_DEBUG") else logging.WARNING
    logging.basicConfig(level=level, format="[%(levelname)s] %(name)s: %(message)s", stream=sys.stderr)


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="mdvars",
        description="Markdown renderer with named template variables",
        add_help=True,
    )
    p.add_argument("-v", "--version", action="version", version=f"%(prog)s {tool_version()}")
    sub = p.add_subparsers(dest="cmd", required=True)

    # Общие аргументы для render/vars
    def add_common(sp: argparse.ArgumentParser) -> None:
        sp.add_argument(
            "source",
            help="путь к markdown-файлу или - для чтения из stdin",
        )
        sp.add_argument(
            "--config",
            metavar="PATH",
            help=f"файл настроек (по умолчанию ./{DEFAULT_CFG_FILE}, если он есть)",
        )

    sp_render = sub.add_parser("render", help="Отрендерить документ в HTML")
    add_common(sp_render)
    sp_render.add_argument(
        "-o", "--output",
        metavar="PATH",
        help="записать HTML в файл вместо stdout",
    )

    sp_vars = sub.add_parser("vars", help="Список переменных документа (JSON)")
    add_common(sp_vars)

    return p


def _read_source(source: str) -> str:
    """
    Читает исходный документ.

    Поддерживает два формата:
    - Путь к файлу
    - `-` для чтения из stdin
    """
    if source == "-":
        return sys.stdin.read()

    path = Path(source)
    if not path.is_file():
        raise MdVarsUserError(f"Source file not found: {path}")
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise MdVarsUserError(f"Failed to read source file {path}: {e}") from e


def _config_path(arg: Optional[str]) -> Path:
    if arg:
        path = Path(arg)
        if not path.is_file():
            raise MdVarsUserError(f"Config file not found: {path}")
        return path
    return Path.cwd() / DEFAULT_CFG_FILE


def main(argv: list[str] | None = None) -> int:
    ns = _build_parser().parse_args(argv)
    _setup_logging()

    try:
        md = create_markdown(load_config(_config_path(ns.config)))
        text = _read_source(ns.source)

        if ns.cmd == "render":
            html = render_text(text, md)
            if ns.output:
                try:
                    Path(ns.output).write_text(html, encoding="utf-8")
                except OSError as e:
                    raise MdVarsUserError(f"Failed to write output {ns.output}: {e}") from e
            else:
                sys.stdout.write(html)
            return 0

        if ns.cmd == "vars":
            data = {"variables": [v.to_dict() for v in collect_variables(text, md)]}
            sys.stdout.write(json.dumps(data, ensure_ascii=False))
            return 0

    except MdVarsUserError as e:
        sys.stderr.write(str(e).rstrip() + "\n")
        return 2
    except ValueError as e:
        sys.stderr.write(str(e).rstrip() + "\n")
        return 2

    return 2


if __name__ == "__main__":
    raise SystemExit(main())
