"""
Выражения в теле шаблона: идентификаторы и цепочки через точку.

Идентификатор начинается с ASCII-буквы, далее идут ASCII-буквы и цифры.
Подчёркивания не допускаются: шаблоны, написанные под эту грамматику,
зависят от того, где именно заканчивается выражение.
"""

from __future__ import annotations

import re

from .scanner import Scanner, attempt

_IDENTIFIER = re.compile(r"[A-Za-z][A-Za-z0-9]*")


def parse_identifier(scanner: Scanner) -> str:
    value = scanner.match_pattern(_IDENTIFIER)
    if value is None:
        raise scanner.error("identifier")
    return value


def parse_expression(scanner: Scanner) -> str:
    """
    Разбирает цепочку identifier ("." identifier)*.

    Жадно продлевает цепочку, пока за точкой следует идентификатор.
    Точка без идентификатора после неё остаётся неразобранной:
    для "foo. " результатом будет "foo", а остатком ". ".

    Raises:
        TemplateSyntaxError: Если в текущей позиции нет идентификатора.
    """
    parts = [parse_identifier(scanner)]
    while True:
        mark = scanner.mark()
        if not scanner.match("."):
            break
        name = attempt(scanner, parse_identifier)
        if name is None:
            scanner.reset(mark)
            break
        parts.append(name)
    return ".".join(parts)


__all__ = ["parse_identifier", "parse_expression"]
