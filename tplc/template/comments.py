"""
Комментарии @* ... *@ и пропуск пробельных символов.

Внутри комментария допускаются одиночные '*' и '@'. Звёздочка,
за которой следует не '@', поглощается вместе со следующим символом,
поэтому '***@' внутри комментария читается как '**' и терминатор '*@'.
"""

from __future__ import annotations

from .nodes import CommentNode
from .scanner import Scanner, WHITESPACE, attempt

COMMENT_OPEN = "@*"
COMMENT_CLOSE = "*@"


def parse_comment(scanner: Scanner) -> CommentNode:
    """
    Разбирает один комментарий, начинающийся ровно в текущей позиции.

    Ведущие пробелы не пропускаются: это работа skip_space.

    Raises:
        TemplateSyntaxError: Если в позиции нет открывающего '@*'
            или комментарий не закрыт.
    """
    scanner.expect(COMMENT_OPEN, "comment opening '@*'")

    while True:
        if scanner.take_while_not("*"):
            continue
        mark = scanner.mark()
        if scanner.match("*") and not scanner.at_end() and scanner.peek() != "@":
            scanner.advance()
            continue
        scanner.reset(mark)
        break

    scanner.expect(COMMENT_CLOSE, "comment terminator '*@'")
    return CommentNode()


def skip_space(scanner: Scanner) -> None:
    """Пропускает любую последовательность комментариев и пробельных символов."""
    while True:
        if attempt(scanner, parse_comment) is not None:
            continue
        if scanner.match_pattern(WHITESPACE) is not None:
            continue
        return


__all__ = ["parse_comment", "skip_space", "COMMENT_OPEN", "COMMENT_CLOSE"]
