"""
Сборка парсера и прогон документов.

Каждый вызов получает свежий env, поэтому таблица переменных
одного документа никогда не видна другому.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from markdown_it import MarkdownIt

from .config import RenderConfig
from .plugin import variables_plugin
from .table import get_table

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class VariableInfo:
    """Сводка по переменной для отчётов (строки нумеруются с единицы)."""
    name: str
    line: Optional[int]
    referenced: bool

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "line": self.line, "referenced": self.referenced}


def create_markdown(config: Optional[RenderConfig] = None) -> MarkdownIt:
    cfg = config or RenderConfig()
    md = MarkdownIt(cfg.preset, {
        "html": cfg.html,
        "typographer": cfg.typographer,
        "breaks": cfg.breaks,
    })
    if cfg.typographer:
        md.enable(["replacements", "smartquotes"])
    md.use(variables_plugin)
    logger.debug(f"Created markdown parser: {cfg.to_dict()}")
    return md


def render_text(text: str, md: Optional[MarkdownIt] = None) -> str:
    """Рендерит документ в HTML."""
    md = md or create_markdown()
    return md.render(text, {})


def collect_variables(text: str, md: Optional[MarkdownIt] = None) -> List[VariableInfo]:
    """Разбирает документ и возвращает его переменные в порядке определения."""
    md = md or create_markdown()
    env: Dict[str, Any] = {}
    md.parse(text, env)

    table = get_table(env)
    if table is None:
        return []
    return [
        VariableInfo(
            name=entry.name,
            line=entry.line + 1 if entry.line is not None else None,
            referenced=entry.referenced,
        )
        for entry in table
    ]


__all__ = ["VariableInfo", "create_markdown", "render_text", "collect_variables"]
