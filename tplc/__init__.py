"""
tplc: компилятор HTML-шаблонов в Python-функции отрисовки.

Шаблоны разбираются и превращаются в исходный код на этапе сборки;
во время выполнения нужен только сгенерированный модуль.
"""

from __future__ import annotations

from .codegen import generate_function, generate_module
from .compiler import check_templates, compile_template, compile_templates, function_name
from .errors import (
    ConfigLoadError,
    TemplateFileError,
    TemplateIncompleteError,
    TemplateNameError,
    TemplateSyntaxError,
    TplcUserError,
)
from .report import CompileReport, TemplateFailure
from .template import Template, parse_template

__all__ = [
    "compile_template",
    "compile_templates",
    "function_name",
    "check_templates",
    "parse_template",
    "generate_function",
    "generate_module",
    "Template",
    "CompileReport",
    "TemplateFailure",
    "TplcUserError",
    "TemplateSyntaxError",
    "TemplateIncompleteError",
    "TemplateFileError",
    "TemplateNameError",
    "ConfigLoadError",
]
