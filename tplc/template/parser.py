"""
Парсер файлов шаблонов.

Рекурсивный спуск по грамматике:

    document  := skip preamble* "@(" arglist ")" skip bodynode* EOF
    preamble  := "@" RAW-UNTIL(";()") ";" skip
    arglist   := (arg (", " arg)*)?
    arg       := RAW-UNTIL(",)")
    bodynode  := comment | text | "@" expression

Альтернативы перебираются в указанном порядке, побеждает первая
успешная; поиска самого длинного совпадения нет.
"""

from __future__ import annotations

from typing import List, Optional, Union

from .comments import parse_comment, skip_space
from .expressions import parse_expression
from .nodes import BodyNode, ExpressionNode, Template, TextNode
from .scanner import Scanner, attempt
from ..errors import TemplateSyntaxError

ARGS_OPEN = "@("
ARGS_CLOSE = ")"
ARGS_SEPARATOR = ", "
TAG = "@"


class TemplateParser:
    """
    Парсер одного файла шаблона.

    Разбор выполняется целиком или не выполняется вовсе: при любой
    ошибке бросается TemplateSyntaxError и частичный Template не создаётся.
    """

    def __init__(self, text: str):
        self.scanner = Scanner(text)

    def parse(self) -> Template:
        s = self.scanner
        skip_space(s)

        preamble: List[str] = []
        while True:
            statement = attempt(s, self._parse_preamble_statement)
            if statement is None:
                break
            preamble.append(statement)

        s.expect(ARGS_OPEN, "'@(' argument list")
        args = self._parse_arguments()
        s.expect(ARGS_CLOSE, "')' closing the argument list")
        skip_space(s)

        body: List[BodyNode] = []
        while not s.at_end():
            node = self._parse_body_node()
            if node is None:
                raise s.error("comment, text or expression")
            body.append(node)

        return Template(preamble=preamble, args=args, body=body)

    def _parse_preamble_statement(self, s: Scanner) -> str:
        s.expect(TAG, "'@' starting a preamble statement")
        code = s.take_until(";()", "preamble statement")
        s.expect(";", "';' ending a preamble statement")
        skip_space(s)
        return code

    def _parse_argument(self, s: Scanner) -> str:
        return s.take_until(",)", "argument declaration")

    def _parse_arguments(self) -> List[str]:
        s = self.scanner
        first = attempt(s, self._parse_argument)
        if first is None:
            return []

        args = [first]
        while True:
            mark = s.mark()
            if not s.match(ARGS_SEPARATOR):
                break
            arg = attempt(s, self._parse_argument)
            if arg is None:
                s.reset(mark)
                break
            args.append(arg)
        return args

    def _parse_body_node(self) -> Optional[BodyNode]:
        """
        Узел тела: комментарий, текст или выражение.

        Возвращает None, если ни одна альтернатива не подошла
        (позиция при этом не меняется).
        """
        s = self.scanner

        comment = attempt(s, parse_comment)
        if comment is not None:
            return comment

        text = s.take_while_not(TAG)
        if text:
            return TextNode(text)

        mark = s.mark()
        if s.match(TAG):
            if s.at_end():
                raise s.error("expression after '@'")
            expr = attempt(s, parse_expression)
            if expr is not None:
                return ExpressionNode(expr)
        s.reset(mark)
        return None


def parse_template(source: Union[bytes, str]) -> Template:
    """
    Разбирает содержимое файла шаблона.

    Args:
        source: Содержимое файла; байты декодируются как UTF-8

    Returns:
        Разобранный шаблон

    Raises:
        TemplateSyntaxError: При несоответствии грамматике или
            некорректной кодировке
    """
    if isinstance(source, bytes):
        try:
            source = source.decode("utf-8")
        except UnicodeDecodeError as e:
            prefix = source[:e.start].decode("utf-8")
            raise Scanner(prefix + "\ufffd").error("valid UTF-8 text", position=len(prefix)) from e
    return TemplateParser(source).parse()


__all__ = ["TemplateParser", "parse_template", "TemplateSyntaxError"]
