"""
Ссылки на переменные внутри alt-текста картинок.

Рендерер картинки собирает alt через renderInlineAsText, который понимает
только text-токены. Токен `variable` там был бы пропущен, хотя ссылка уже
засчитана и определение скрыто. Поэтому после inline-фазы такие ссылки
заменяются текстом их содержимого.
"""

from __future__ import annotations

from typing import List, Sequence

from markdown_it.rules_core import StateCore
from markdown_it.token import Token


def plain_text(tokens: Sequence[Token]) -> str:
    """Текстовое представление inline-токенов (как alt у картинки)."""
    parts: List[str] = []
    for token in tokens:
        if token.type in ("text", "text_special", "code_inline"):
            parts.append(token.content)
        elif token.type in ("softbreak", "hardbreak"):
            parts.append("\n")
        elif token.children:
            parts.append(plain_text(token.children))
    return "".join(parts)


def _flatten(children: List[Token]) -> None:
    for i, child in enumerate(children):
        if child.type == "variable":
            text = Token("text", "", 0)
            text.content = plain_text(child.children or ())
            text.level = child.level
            children[i] = text
        elif child.type == "image" and child.children:
            _flatten(child.children)


def variables_in_image_alt(state: StateCore) -> None:
    for token in state.tokens:
        if token.type != "inline" or not token.children:
            continue
        for child in token.children:
            if child.type == "image" and child.children:
                _flatten(child.children)


__all__ = ["plain_text", "variables_in_image_alt"]
