import os
import subprocess
import sys
import textwrap
from pathlib import Path

import pytest

from mdvars import create_markdown


@pytest.fixture
def md():
    """Парсер commonmark с подключённым плагином переменных."""
    return create_markdown()


@pytest.fixture
def render(md):
    """Рендер документа со свежим env; текст автоматически разотступывается."""
    def _render(text: str) -> str:
        return md.render(textwrap.dedent(text), {})
    return _render


@pytest.fixture
def run_cli():
    def _run(root: Path, *args: str, stdin: str | None = None) -> subprocess.CompletedProcess:
        env = os.environ.copy()
        env.pop("MDVARS_DEBUG", None)
        return subprocess.run(
            [sys.executable, "-m", "mdvars.cli", *args],
            cwd=root, env=env, input=stdin, capture_output=True, text=True, encoding="utf-8"
        )
    return _run
