"""
Блочное правило определения переменной.

Распознаёт строку вида:

    {{> name  any *inline* markdown }}

Содержимое сразу разбирается как inline-markdown и сохраняется в таблице
переменных под именем name. В поток токенов добавляется маркер
variable_definition, который рендерер позже либо скроет, либо покажет
как исходный текст.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional

from markdown_it.common.utils import escapeHtml
from markdown_it.rules_block import StateBlock
from markdown_it.token import Token

from .scan import DEFINITION_OPEN, find_closing, scan_name, skip_spaces
from .table import ensure_table, get_table

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DefinitionMatch:
    """Результат успешного распознавания определения."""
    name: str
    content: str   # содержимое без ведущих/хвостовых пробелов
    end: int       # позиция сразу за закрывающими }}


def scan_definition(src: str, start: int, max_pos: int) -> Optional[DefinitionMatch]:
    """
    Распознаёт определение в src[start:max_pos] без побочных эффектов.

    Returns:
        DefinitionMatch или None, если строка не является определением
    """
    # {{> var Test }}
    # ^^^
    if not src.startswith(DEFINITION_OPEN, start, max_pos):
        return None

    # {{> var Test }}
    #     ^^^
    name_start = skip_spaces(src, start + len(DEFINITION_OPEN), max_pos)
    name_end = scan_name(src, name_start, max_pos)
    if name_end is None or name_end == name_start or name_end >= max_pos:
        return None

    # {{> var Test }}
    #         ^^^^^
    content_start = skip_spaces(src, name_end, max_pos)
    close = find_closing(src, content_start, max_pos)
    if close <= content_start:
        return None

    content = src[content_start:close].strip()
    if not content:
        return None

    return DefinitionMatch(
        name=src[name_start:name_end],
        content=content,
        end=close + 2,
    )


def _as_plain_text(tokens: List[Token]) -> List[Token]:
    """
    Превращает text_special (экранирование) в обычный text.

    Для обычных абзацев это делает core-правило text_join, но содержимое
    переменной разбирается отдельно и через core-цепочку не проходит.
    """
    for token in tokens:
        if token.type == "text_special":
            token.type = "text"
        if token.children:
            _as_plain_text(token.children)
    return tokens


def variable_definition_rule(state: StateBlock, startLine: int, endLine: int, silent: bool) -> bool:
    # Отступ в 4+ пробела - это код
    if state.sCount[startLine] - state.blkIndent >= 4:
        return False

    start = state.bMarks[startLine] + state.tShift[startLine]
    max_pos = state.eMarks[startLine]

    match = scan_definition(state.src, start, max_pos)
    if match is None:
        return False

    table = get_table(state.env)
    if table is not None and match.name in table:
        logger.debug(f"Variable '{match.name}' already defined, line {startLine + 1} left as text")
        return False

    if silent:
        return True

    children: List[Token] = []
    state.md.inline.parse(match.content, state.md, state.env, children)

    table = ensure_table(state.env)
    table.define(match.name, _as_plain_text(children), line=startLine)
    logger.debug(f"Defined variable '{match.name}' at line {startLine + 1}")

    token = state.push("variable_definition", "", 0)
    token.meta = {"name": match.name}
    token.markup = escapeHtml(state.src[start:match.end])
    token.map = [startLine, startLine + 1]

    state.line = startLine + 1
    return True


__all__ = ["DefinitionMatch", "scan_definition", "variable_definition_rule"]
