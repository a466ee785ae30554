"""
Inline-правило ссылки на переменную: `{{ name }}` или `{{name}}`.

Ссылка подставляет уже разобранное содержимое переменной. Неизвестное
или ещё не определённое выше по документу имя оставляется как текст.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from markdown_it.rules_inline import StateInline

from .scan import CLOSE, REFERENCE_OPEN, scan_name, skip_spaces
from .table import get_table

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReferenceMatch:
    """Результат успешного распознавания ссылки."""
    name: str
    end: int   # позиция сразу за закрывающими }}


def scan_reference(src: str, pos: int, max_pos: int) -> Optional[ReferenceMatch]:
    """Распознаёт ссылку, начинающуюся ровно в pos, без побочных эффектов."""
    # {{ var }}
    # ^^
    if not src.startswith(REFERENCE_OPEN, pos, max_pos):
        return None

    # {{ var }}
    #    ^^^
    name_start = skip_spaces(src, pos + len(REFERENCE_OPEN), max_pos)
    if name_start >= max_pos:
        return None
    name_end = scan_name(src, name_start, max_pos, stop_at_closing=True)
    if name_end is None or name_end == name_start or name_end >= max_pos:
        return None

    # {{ var }}
    #        ^^
    close = skip_spaces(src, name_end, max_pos)
    if not src.startswith(CLOSE, close, max_pos):
        return None

    return ReferenceMatch(name=src[name_start:name_end], end=close + len(CLOSE))


def variable_reference_rule(state: StateInline, silent: bool) -> bool:
    table = get_table(state.env)
    if table is None:
        return False

    match = scan_reference(state.src, state.pos, state.posMax)
    if match is None:
        return False

    entry = table.lookup(match.name)
    if entry is None:
        logger.debug(f"Unresolved variable reference '{match.name}'")
        return False

    if not silent:
        table.mark_referenced(entry.name)
        token = state.push("variable", "", 0)
        token.meta = {"name": entry.name}
        # Один и тот же кортеж токенов для всех ссылок
        token.children = entry.tokens

    state.pos = match.end
    return True


__all__ = ["ReferenceMatch", "scan_reference", "variable_reference_rule"]
