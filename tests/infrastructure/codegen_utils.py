"""
Исполнение сгенерированного кода в тестах.
"""

import importlib.util
import io
import sys
import types
from pathlib import Path
from typing import Any, Callable, Dict

from tplc.codegen import generate_module

_MODULE_NAME = "tplc_generated"


def load_generated(source: str) -> Dict[str, Any]:
    """
    Исполняет сгенерированный модуль и возвращает его пространство имён.

    Одиночная функция из generate_function предварительно
    оборачивается в модуль через generate_module. Код исполняется
    в настоящем объекте модуля, зарегистрированном в sys.modules,
    и не наследует future-импорты этого файла.
    """
    if "def to_html(" not in source:
        source = generate_module([source])
    module = types.ModuleType(_MODULE_NAME)
    sys.modules[_MODULE_NAME] = module
    try:
        exec(compile(source, "<tplc-generated>", "exec", dont_inherit=True), module.__dict__)
    finally:
        sys.modules.pop(_MODULE_NAME, None)
    return module.__dict__


def import_generated(path: Path, name: str = _MODULE_NAME) -> types.ModuleType:
    """Импортирует записанный на диск модуль так же, как это сделал бы пользователь."""
    spec = importlib.util.spec_from_file_location(name, path)
    module = importlib.util.module_from_spec(spec)
    sys.modules[name] = module
    try:
        spec.loader.exec_module(module)
    finally:
        sys.modules.pop(name, None)
    return module


def render(func: Callable[..., Any], *args: Any, **kwargs: Any) -> str:
    """Вызывает функцию шаблона с StringIO и возвращает записанный текст."""
    out = io.StringIO()
    func(out, *args, **kwargs)
    return out.getvalue()


__all__ = ["load_generated", "import_generated", "render"]
