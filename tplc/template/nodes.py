"""
AST-узлы шаблона.

Определяет неизменяемые классы для представления разобранного файла
шаблона: преамбула, список аргументов и тело из текста, выражений
и комментариев.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List


@dataclass(frozen=True)
class BodyNode:
    """Базовый класс для всех узлов тела шаблона."""
    pass


@dataclass(frozen=True)
class CommentNode(BodyNode):
    """
    Комментарий @* ... *@.

    Содержимое не сохраняется: при генерации кода узел стирается.
    """
    pass


@dataclass(frozen=True)
class TextNode(BodyNode):
    """
    Обычный текст между тегами.

    Выводится в результат как есть, без экранирования.
    """
    text: str


@dataclass(frozen=True)
class ExpressionNode(BodyNode):
    """
    Выражение @foo.bar.baz.

    Цепочка идентификаторов через точку; значение выводится
    после HTML-экранирования.
    """
    expr: str


@dataclass(frozen=True)
class Template:
    """
    Полностью разобранный файл шаблона.

    Строки преамбулы и объявления аргументов хранятся в сыром виде:
    они переносятся в сгенерированный код без разбора.
    """
    preamble: List[str] = field(default_factory=list)
    args: List[str] = field(default_factory=list)
    body: List[BodyNode] = field(default_factory=list)


__all__ = ["BodyNode", "CommentNode", "TextNode", "ExpressionNode", "Template"]
