"""
Рендереры маркеров переменных.

Сигнатура совпадает с правилами рендерера markdown-it-py:
`(self, tokens, idx, options, env) -> str`. Ни один из рендереров
не бросает исключений: при отсутствии таблицы или записи выводится
исходный текст определения либо пустая строка для ссылки.
"""

from __future__ import annotations

from typing import Any, MutableMapping, Optional, Sequence

from markdown_it.token import Token

from .table import get_table


def render_variable(self, tokens: Sequence[Token], idx: int, options: Any,
                    env: Optional[MutableMapping[str, Any]]) -> str:
    """Выводит сохранённое содержимое переменной, без повторного разрешения ссылок."""
    children = tokens[idx].children
    if not children:
        return ""
    return self.renderInline(children, options, env)


def render_variable_definition(self, tokens: Sequence[Token], idx: int, options: Any,
                               env: Optional[MutableMapping[str, Any]]) -> str:
    """
    Место определения.

    Если на переменную ссылались, содержимое уже выведено в местах ссылок,
    и здесь не выводится ничего. Иначе автор видит исходную разметку
    определения отдельным абзацем.
    """
    token = tokens[idx]
    name = (token.meta or {}).get("name")

    table = get_table(env)
    entry = table.get(name) if table is not None and name else None
    if entry is not None and entry.referenced:
        return ""

    return f"<p>{token.markup}</p>\n"


__all__ = ["render_variable", "render_variable_definition"]
