"""
Таблица переменных документа.

Живёт в env, который markdown-it передаёт во все правила и рендереры
одного прохода. Создаётся лениво при первом успешном определении
и исчезает вместе с env, поэтому документы не видят переменные друг друга.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterator, MutableMapping, Optional, Sequence, Tuple

from markdown_it.token import Token

# Поле env, в котором хранится таблица
ENV_KEY = "variables"


class DuplicateVariableError(KeyError):
    """Повторное определение уже существующей переменной."""
    pass


@dataclass
class VariableEntry:
    """
    Запись таблицы переменных.

    Attributes:
        name: Имя переменной (регистрозависимое, только [A-Za-z0-9])
        tokens: Inline-токены разобранного содержимого; общий кортеж
                для всех ссылок на переменную, после создания не меняется
        line: Строка (с нуля), на которой стоит определение
        referenced: Была ли создана хотя бы одна ссылка на переменную
    """
    name: str
    tokens: Tuple[Token, ...]
    line: Optional[int] = None
    referenced: bool = False


class VariableTable:
    """
    Отображение имя → VariableEntry в порядке определения.

    Помимо записей хранит курсор - номер строки inline-блока, который
    сейчас разбирается. Ссылка видит только определения, стоящие выше курсора.
    """

    def __init__(self) -> None:
        self._entries: Dict[str, VariableEntry] = {}
        self.cursor: Optional[int] = None

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[VariableEntry]:
        return iter(self._entries.values())

    def get(self, name: str) -> Optional[VariableEntry]:
        return self._entries.get(name)

    def define(self, name: str, tokens: Sequence[Token], line: Optional[int] = None) -> VariableEntry:
        """
        Добавляет новую переменную.

        Raises:
            DuplicateVariableError: Если имя уже определено
        """
        if name in self._entries:
            raise DuplicateVariableError(name)
        entry = VariableEntry(name=name, tokens=tuple(tokens), line=line)
        self._entries[name] = entry
        return entry

    def is_visible(self, entry: VariableEntry) -> bool:
        """Видно ли определение с текущей позиции курсора."""
        if self.cursor is None or entry.line is None:
            return True
        return entry.line < self.cursor

    def lookup(self, name: str) -> Optional[VariableEntry]:
        """Возвращает запись, если она определена и видна с позиции курсора."""
        entry = self._entries.get(name)
        if entry is None or not self.is_visible(entry):
            return None
        return entry

    def mark_referenced(self, name: str) -> VariableEntry:
        entry = self._entries[name]
        entry.referenced = True
        return entry


def get_table(env: Optional[MutableMapping[str, Any]]) -> Optional[VariableTable]:
    """Таблица из env или None, если в документе ещё нет определений."""
    if env is None:
        return None
    table = env.get(ENV_KEY)
    return table if isinstance(table, VariableTable) else None


def ensure_table(env: MutableMapping[str, Any]) -> VariableTable:
    table = get_table(env)
    if table is None:
        table = VariableTable()
        env[ENV_KEY] = table
    return table


__all__ = [
    "ENV_KEY",
    "DuplicateVariableError",
    "VariableEntry",
    "VariableTable",
    "get_table",
    "ensure_table",
]
