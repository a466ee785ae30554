"""
Низкоуровневые помощники сканирования для правил переменных.

Работают с исходной строкой и позициями курсора так же, как правила
markdown-it: позиции абсолютные, правая граница не включается.
"""

from __future__ import annotations

import string
from typing import Optional

DEFINITION_OPEN = "{{>"
REFERENCE_OPEN = "{{"
CLOSE = "}}"

# Только ASCII: str.isalnum() пропустил бы юникодные буквы и цифры
_NAME_CHARS = frozenset(string.ascii_letters + string.digits)


def is_space(ch: str) -> bool:
    """Пробел или табуляция (как isSpace в markdown-it)."""
    return ch == " " or ch == "\t"


def is_alnum(ch: str) -> bool:
    return ch in _NAME_CHARS


def skip_spaces(src: str, pos: int, max_pos: int) -> int:
    """Возвращает первую позицию >= pos, не являющуюся пробелом (или max_pos)."""
    while pos < max_pos and is_space(src[pos]):
        pos += 1
    return pos


def find_closing(src: str, pos: int, max_pos: int) -> int:
    """Позиция первого `}}` целиком внутри [pos, max_pos) либо -1."""
    return src.find(CLOSE, pos, max_pos)


def scan_name(src: str, pos: int, max_pos: int, stop_at_closing: bool = False) -> Optional[int]:
    """
    Сканирует имя переменной начиная с pos.

    Останавливается на пробеле, на границе max_pos и, если stop_at_closing,
    на закрывающих `}}`. Любой другой не буквенно-цифровой символ делает
    имя недопустимым.

    Returns:
        Позицию сразу за именем (может совпадать с pos для пустого имени)
        или None, если встретился недопустимый символ
    """
    while pos < max_pos:
        ch = src[pos]
        if is_space(ch):
            break
        if stop_at_closing and src.startswith(CLOSE, pos, max_pos):
            break
        if not is_alnum(ch):
            return None
        pos += 1
    return pos


__all__ = [
    "DEFINITION_OPEN",
    "REFERENCE_OPEN",
    "CLOSE",
    "is_space",
    "is_alnum",
    "skip_spaces",
    "find_closing",
    "scan_name",
]
