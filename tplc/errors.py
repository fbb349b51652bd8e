"""
Base exceptions for user-facing errors.

All expected errors that should be displayed to the user
as clean messages (without stack traces) must inherit from TplcUserError.

Programming errors and bugs should NOT inherit from TplcUserError:
they will propagate with full tracebacks.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional


class TplcUserError(Exception):
    """
    Base class for all user-facing errors in tplc.

    These errors indicate problems that the user can fix:
    broken templates, unreadable files, invalid configuration.
    """
    pass


class TemplateSyntaxError(TplcUserError):
    """Шаблон не соответствует грамматике в указанной позиции."""

    kind = "error"

    def __init__(self, expected: str, position: int, line: int, column: int):
        super().__init__(self._describe(expected, position, line, column))
        self.expected = expected
        self.position = position
        self.line = line
        self.column = column

    @staticmethod
    def _describe(expected: str, position: int, line: int, column: int) -> str:
        return f"expected {expected} at {line}:{column} (offset {position})"


class TemplateIncompleteError(TemplateSyntaxError):
    """Входной текст закончился раньше, чем завершилась конструкция."""

    kind = "incomplete"

    @staticmethod
    def _describe(expected: str, position: int, line: int, column: int) -> str:
        return f"input ended at {line}:{column} (offset {position}), {expected} needed"


class TemplateFileError(TplcUserError):
    """Raised when a template cannot be read or the output cannot be written."""

    def __init__(self, path: Path, os_error: Optional[OSError] = None):
        self.path = path
        self.os_error = os_error
        reason = os_error.strerror if os_error is not None and os_error.strerror else str(os_error)
        super().__init__(f"I/O error on '{path}': {reason}")


class TemplateNameError(TplcUserError):
    """Имя шаблона не превращается в допустимое имя Python-функции."""

    kind = "name"

    def __init__(self, name: str, function_name: str):
        self.name = name
        self.function_name = function_name
        super().__init__(f"template name {name!r} gives invalid function name {function_name!r}")


class ConfigLoadError(TplcUserError):
    """Ошибка загрузки tplc.yaml с указанием поля."""
    pass


__all__ = [
    "TplcUserError",
    "TemplateSyntaxError",
    "TemplateIncompleteError",
    "TemplateFileError",
    "TemplateNameError",
    "ConfigLoadError",
]
