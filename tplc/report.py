"""
Модели отчёта о пакетной компиляции шаблонов.

Используются CLI для JSON-вывода (model_dump) и тестами для проверки
результатов без разбора логов.
"""

from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, Field

from .errors import TemplateSyntaxError, TplcUserError


class TemplateFailure(BaseModel):
    """Шаблон, пропущенный из-за ошибки разбора или недопустимого имени."""
    name: str
    path: str
    kind: Literal["error", "incomplete", "name"]
    message: str
    # позиционные поля есть только у ошибок разбора
    expected: Optional[str] = None
    position: Optional[int] = None
    line: Optional[int] = None
    column: Optional[int] = None

    @classmethod
    def from_error(cls, name: str, path: str, err: TplcUserError) -> "TemplateFailure":
        if isinstance(err, TemplateSyntaxError):
            return cls(
                name=name,
                path=path,
                kind=err.kind,
                message=str(err),
                expected=err.expected,
                position=err.position,
                line=err.line,
                column=err.column,
            )
        return cls(name=name, path=path, kind=getattr(err, "kind", "error"), message=str(err))


class CompileReport(BaseModel):
    """Итог одного запуска compile_templates."""
    output: Optional[str] = None
    compiled: List[str] = Field(default_factory=list)
    failures: List[TemplateFailure] = Field(default_factory=list)
    sources: List[str] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures


__all__ = ["TemplateFailure", "CompileReport"]
