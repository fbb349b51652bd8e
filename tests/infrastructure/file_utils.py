"""
Утилиты для создания файлов шаблонов в тестах.
"""

from __future__ import annotations

import textwrap
from pathlib import Path
from typing import Mapping


def write(p: Path, text: str) -> Path:
    """
    Записывает текст в файл, создавая родительские директории при необходимости.

    Args:
        p: Путь к файлу
        text: Содержимое для записи

    Returns:
        Путь к созданному файлу
    """
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(text, encoding="utf-8")
    return p


def write_templates(root: Path, templates: Mapping[str, str], extension: str = ".py.html") -> Path:
    """
    Создает набор шаблонов <name><extension> в каталоге root.

    Текст каждого шаблона проходит через textwrap.dedent, поэтому
    в тестах его удобно писать с отступом.
    """
    for name, text in templates.items():
        write(root / f"{name}{extension}", textwrap.dedent(text))
    return root


__all__ = ["write", "write_templates"]
