"""
Генерация Python-кода из разобранных шаблонов.

Каждый шаблон превращается в функцию верхнего уровня:

    <строки преамбулы>
    def <name>(out: TextIO, <аргументы>) -> None:
        out.write(\"\"\"<текст>\"\"\")
        to_html(<выражение>, out)
        return None

Записи выполняются строго по порядку; исключение при записи прерывает
функцию и становится её результатом.

Текст, преамбула, аргументы и имя функции вставляются в исходник как есть.
Текст, содержащий тройные кавычки, завершающую кавычку или обратную косую
черту, изменит или сломает сгенерированный код.
"""

from __future__ import annotations

import functools
from importlib import resources
from typing import Iterable

from .template.nodes import BodyNode, CommentNode, ExpressionNode, Template, TextNode

INDENT = "    "
SINK_PARAM = "out: TextIO"
MODULE_HEADER = (
    '"""Render functions generated by tplc. Do not edit."""\n'
    "\n"
    "from typing import TextIO\n"
)


def node_code(node: BodyNode) -> str:
    """Строка (или пустая строка) тела функции для одного узла."""
    if isinstance(node, CommentNode):
        return ""
    if isinstance(node, TextNode):
        return f'{INDENT}out.write("""{node.text}""")\n'
    if isinstance(node, ExpressionNode):
        return f"{INDENT}to_html({node.expr}, out)\n"
    raise TypeError(f"Unknown body node: {type(node).__name__}")


def generate_function(template: Template, name: str) -> str:
    """
    Исходный текст функции отрисовки шаблона.

    Args:
        template: Разобранный шаблон
        name: Имя генерируемой функции

    Returns:
        Преамбула и определение функции, завершённые переводом строки
    """
    preamble = "".join(f"{line}\n" for line in template.preamble)
    params = ", ".join([SINK_PARAM, *template.args])
    body = "".join(node_code(node) for node in template.body)
    return (
        f"{preamble}"
        f"def {name}({params}) -> None:\n"
        f"{body}"
        f"{INDENT}return None\n"
    )


@functools.lru_cache(maxsize=None)
def support_source() -> str:
    """Текст модуля tplc.runtime, который добавляется в каждый сгенерированный модуль."""
    return resources.files("tplc").joinpath("runtime.py").read_text(encoding="utf-8")


def generate_module(functions: Iterable[str]) -> str:
    """
    Собирает итоговый модуль: заголовок, функции в переданном порядке
    и ровно один блок поддержки.
    """
    parts = [MODULE_HEADER, *functions, support_source()]
    return "\n\n".join(parts)


__all__ = ["node_code", "generate_function", "generate_module", "support_source", "MODULE_HEADER"]
