"""
Base exception for user-facing errors.

All expected errors that should be displayed to the user
as clean messages (without stack traces) must inherit from MdVarsUserError.

Malformed variable syntax is never an error: parsing rules simply decline
the match and the text falls through to ordinary markdown.
"""

from __future__ import annotations


class MdVarsUserError(Exception):
    """
    Base class for all user-facing errors in mdvars.

    These errors indicate problems that the user can fix:
    configuration issues, unreadable input files, etc.
    """
    pass


class ConfigError(MdVarsUserError):
    """Ошибка загрузки конфигурации с указанием файла и поля."""
    pass


__all__ = ["MdVarsUserError", "ConfigError"]
