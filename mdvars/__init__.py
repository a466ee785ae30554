"""
Именованные переменные-шаблоны для markdown-it.

Определение `{{> name content }}` на отдельной строке и ссылки
`{{ name }}` в любом inline-тексте ниже по документу.
"""

from __future__ import annotations

from .engine import VariableInfo, collect_variables, create_markdown, render_text
from .errors import ConfigError, MdVarsUserError
from .plugin import variables_plugin
from .table import VariableEntry, VariableTable, get_table

__all__ = [
    "variables_plugin",
    "create_markdown",
    "render_text",
    "collect_variables",
    "VariableInfo",
    "VariableEntry",
    "VariableTable",
    "get_table",
    "MdVarsUserError",
    "ConfigError",
]
