"""
Грамматика шаблонов tplc.

Превращает текст файла шаблона в неизменяемое дерево Template,
которое затем передаётся генератору кода.
"""

from __future__ import annotations

from .comments import parse_comment, skip_space
from .expressions import parse_expression, parse_identifier
from .nodes import BodyNode, CommentNode, ExpressionNode, Template, TextNode
from .parser import TemplateParser, parse_template
from .scanner import Scanner, attempt

__all__ = [
    "Scanner",
    "attempt",
    "parse_comment",
    "skip_space",
    "parse_identifier",
    "parse_expression",
    "TemplateParser",
    "parse_template",
    "Template",
    "BodyNode",
    "CommentNode",
    "TextNode",
    "ExpressionNode",
]
