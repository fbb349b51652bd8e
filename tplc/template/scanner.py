"""
Примитивы посимвольного разбора шаблона.

Scanner хранит исходный текст и текущую позицию. Правила грамматики
продвигают позицию при успехе и бросают TemplateSyntaxError при неудаче;
откат к сохранённой позиции выполняет вызывающая сторона (см. attempt).
"""

from __future__ import annotations

import re
from typing import Callable, Optional, Pattern, Tuple, TypeVar

from ..errors import TemplateIncompleteError, TemplateSyntaxError

T = TypeVar("T")


class Scanner:
    """Курсор по тексту шаблона с позиционной диагностикой."""

    def __init__(self, text: str):
        self.text = text
        self.position = 0
        self.length = len(text)

    def __repr__(self) -> str:
        return f"Scanner(position={self.position}, rest={self.rest()[:20]!r})"

    def at_end(self) -> bool:
        return self.position >= self.length

    def rest(self) -> str:
        """Ещё не разобранная часть текста."""
        return self.text[self.position:]

    def peek(self) -> str:
        """Текущий символ или пустая строка в конце ввода."""
        if self.at_end():
            return ""
        return self.text[self.position]

    def mark(self) -> int:
        return self.position

    def reset(self, mark: int) -> None:
        self.position = mark

    def advance(self, count: int = 1) -> str:
        value = self.text[self.position:self.position + count]
        self.position += len(value)
        return value

    def match(self, tag: str) -> bool:
        """Поглощает литерал tag, если текст продолжается им."""
        if self.text.startswith(tag, self.position):
            self.position += len(tag)
            return True
        return False

    def expect(self, tag: str, expected: str) -> None:
        """Как match, но отсутствие литерала считается ошибкой разбора."""
        if not self.match(tag):
            raise self.error(expected)

    def match_pattern(self, pattern: Pattern[str]) -> Optional[str]:
        m = pattern.match(self.text, self.position)
        if m is None or not m.group(0):
            return None
        self.position = m.end()
        return m.group(0)

    def take_while_not(self, stop: str) -> str:
        """
        Поглощает максимальную (возможно пустую) серию символов,
        не входящих в stop.
        """
        end = self.position
        while end < self.length and self.text[end] not in stop:
            end += 1
        value = self.text[self.position:end]
        self.position = end
        return value

    def take_until(self, stop: str, expected: str) -> str:
        """
        Сырой текст до первого символа из stop (не включая его).

        Пустой результат считается неудачей: правило требует хотя бы
        один символ.
        """
        value = self.take_while_not(stop)
        if not value:
            raise self.error(expected)
        return value

    def line_col(self, position: int) -> Tuple[int, int]:
        """Номер строки и колонки (с 1) для смещения в тексте."""
        line = self.text.count("\n", 0, position) + 1
        line_start = self.text.rfind("\n", 0, position) + 1
        return line, position - line_start + 1

    def error(self, expected: str, position: Optional[int] = None) -> TemplateSyntaxError:
        """
        Создаёт (но не бросает) ошибку разбора в текущей позиции.

        Если позиция совпадает с концом ввода, для решения не хватило
        текста: возвращается TemplateIncompleteError.
        """
        if position is None:
            position = self.position
        line, column = self.line_col(position)
        if position >= self.length:
            return TemplateIncompleteError(expected, position, line, column)
        return TemplateSyntaxError(expected, position, line, column)


def attempt(scanner: Scanner, rule: Callable[[Scanner], T]) -> Optional[T]:
    """
    Пробует правило как одну из упорядоченных альтернатив.

    При неудаче позиция возвращается туда, где была до попытки,
    и возвращается None.
    """
    mark = scanner.mark()
    try:
        return rule(scanner)
    except TemplateSyntaxError:
        scanner.reset(mark)
        return None


WHITESPACE = re.compile(r"[ \t\r\n]+")


__all__ = ["Scanner", "attempt", "WHITESPACE"]
