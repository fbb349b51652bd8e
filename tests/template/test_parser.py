"""Тесты для парсера шаблонов TemplateParser."""

import textwrap

import pytest

from tplc.errors import TemplateIncompleteError, TemplateSyntaxError
from tplc.template.nodes import CommentNode, ExpressionNode, Template, TextNode
from tplc.template.parser import TemplateParser, parse_template


def _parse(text: str) -> Template:
    return parse_template(textwrap.dedent(text))


class TestTemplateParser:
    """Основные тесты для TemplateParser."""

    def test_minimal_template(self):
        """Только пустой список аргументов."""
        assert parse_template("@()") == Template(preamble=[], args=[], body=[])

    def test_arguments_are_raw_text(self):
        tpl = parse_template("@(name: str, items: List[int], x)")
        assert tpl.args == ["name: str", "items: List[int]", "x"]

    def test_duplicate_arguments_are_accepted(self):
        assert parse_template("@(a, a)").args == ["a", "a"]

    def test_body_nodes_in_source_order(self):
        tpl = parse_template("@(name)\nHello, @name! @* note *@Bye @user.name.")
        assert tpl.body == [
            TextNode("Hello, "),
            ExpressionNode("name"),
            TextNode("! "),
            CommentNode(),
            TextNode("Bye "),
            ExpressionNode("user.name"),
            TextNode("."),
        ]

    def test_whitespace_after_arguments_is_skipped(self):
        tpl = parse_template("@(x)\n\n  @* c *@\n<p>@x</p>\n")
        assert tpl.body == [TextNode("<p>"), ExpressionNode("x"), TextNode("</p>\n")]

    def test_preamble_statements(self):
        tpl = _parse("""\
            @* шапка *@
            @import math;
            @from decimal import Decimal;
            @(price: Decimal)
            @price
            """)
        assert tpl.preamble == ["import math", "from decimal import Decimal"]
        assert tpl.args == ["price: Decimal"]
        assert tpl.body == [ExpressionNode("price"), TextNode("\n")]

    def test_comment_only_body(self):
        tpl = parse_template("@(x)\n@* nothing to see *@")
        assert tpl.body == []

    def test_comment_in_body_after_text(self):
        tpl = parse_template("@()a@* c *@b")
        assert tpl.body == [TextNode("a"), CommentNode(), TextNode("b")]

    def test_expression_stops_at_underscore(self):
        tpl = parse_template("@(user)@user_name")
        assert tpl.body == [ExpressionNode("user"), TextNode("_name")]

    def test_parser_class_directly(self):
        tpl = TemplateParser("@(a)@a").parse()
        assert tpl.body == [ExpressionNode("a")]

    def test_bytes_are_decoded_as_utf8(self):
        tpl = parse_template("@()Привет".encode("utf-8"))
        assert tpl.body == [TextNode("Привет")]


class TestParserErrors:

    def test_missing_argument_list(self):
        with pytest.raises(TemplateSyntaxError) as exc:
            parse_template("Hello")
        assert exc.value.expected == "'@(' argument list"
        assert exc.value.position == 0

    def test_separator_must_be_comma_space(self):
        with pytest.raises(TemplateSyntaxError) as exc:
            parse_template("@(x: int,y: int)\n@x")
        assert exc.value.expected == "')' closing the argument list"
        assert (exc.value.line, exc.value.column) == (1, 9)

    def test_nested_parentheses_in_arguments(self):
        """Аргумент заканчивается на первой ')', остаток уходит в тело."""
        tpl = parse_template("@(x=f(1))")
        assert tpl.args == ["x=f(1"]
        assert tpl.body == [TextNode(")")]

    def test_preamble_with_call_is_rejected(self):
        with pytest.raises(TemplateSyntaxError) as exc:
            parse_template("@print(1);\n@()")
        assert exc.value.expected == "'@(' argument list"

    def test_at_without_expression(self):
        with pytest.raises(TemplateSyntaxError) as exc:
            parse_template("@()\nmail me @ home")
        assert exc.value.expected == "comment, text or expression"
        assert (exc.value.line, exc.value.column) == (2, 9)

    def test_unterminated_comment_in_body(self):
        with pytest.raises(TemplateSyntaxError):
            parse_template("@()text @* open")

    def test_unclosed_argument_list_is_incomplete(self):
        with pytest.raises(TemplateIncompleteError):
            parse_template("@(name: str")

    def test_dangling_at_is_incomplete(self):
        with pytest.raises(TemplateIncompleteError) as exc:
            parse_template("@()price: @")
        assert exc.value.expected == "expression after '@'"

    def test_empty_input_is_incomplete(self):
        with pytest.raises(TemplateIncompleteError):
            parse_template("")

    def test_invalid_utf8(self):
        with pytest.raises(TemplateSyntaxError) as exc:
            parse_template(b"@()ok\xff")
        assert exc.value.expected == "valid UTF-8 text"
        assert exc.value.position == 5
        assert not isinstance(exc.value, TemplateIncompleteError)
