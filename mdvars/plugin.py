"""
Плагин markdown-it для именованных переменных.

    md = MarkdownIt("commonmark").use(variables_plugin)

Регистрирует:
- блочное правило variables_def перед `reference` (может прерывать абзац);
- inline-правило variables_ref после `image`;
- рендереры для токенов `variable` и `variable_definition`;
- замену core-правила `inline`, разбирающую блоки с учётом их позиции;
- core-правило variables_alt, подставляющее текст переменных в alt картинок.
"""

from __future__ import annotations

import logging

from markdown_it import MarkdownIt

from .alt_text import variables_in_image_alt
from .definition import variable_definition_rule
from .ordering import inline_in_document_order
from .reference import variable_reference_rule
from .render import render_variable, render_variable_definition

logger = logging.getLogger(__name__)


def variables_plugin(md: MarkdownIt) -> None:
    md.add_render_rule("variable", render_variable)
    md.add_render_rule("variable_definition", render_variable_definition)

    md.block.ruler.before(
        "reference",
        "variables_def",
        variable_definition_rule,
        {"alt": ["paragraph", "reference"]},
    )
    md.inline.ruler.after("image", "variables_ref", variable_reference_rule)
    md.core.ruler.at("inline", inline_in_document_order)
    md.core.ruler.after("inline", "variables_alt", variables_in_image_alt)

    logger.debug("Registered variables plugin rules: variables_def, variables_ref")


__all__ = ["variables_plugin"]
