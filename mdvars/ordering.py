"""
Разбор inline-блоков в порядке документа.

markdown-it сначала строит все блоки и лишь потом разбирает inline, поэтому
к началу inline-фазы таблица переменных уже заполнена целиком. Чтобы ссылка
видела только определения, стоящие выше неё, перед разбором каждого
inline-блока курсор таблицы ставится на первую строку этого блока.
"""

from __future__ import annotations

from markdown_it.rules_core import StateCore

from .table import get_table


def inline_in_document_order(state: StateCore) -> None:
    """Замена core-правила `inline`, учитывающая позицию блока."""
    table = get_table(state.env)

    for token in state.tokens:
        if token.type != "inline":
            continue
        if token.children is None:
            token.children = []
        if table is not None:
            table.cursor = token.map[0] if token.map else None
        state.md.inline.parse(token.content, state.md, state.env, token.children)

    if table is not None:
        table.cursor = None


__all__ = ["inline_in_document_order"]
