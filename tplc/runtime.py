# Support code for generated template modules.
#
# The text of this file is appended once to every generated templates.py,
# so it must stay self-contained: standard library imports only, nothing
# taken from __future__.

import functools
from dataclasses import dataclass

_HTML_ESCAPES = str.maketrans({
    "<": "&lt;",
    ">": "&gt;",
    "&": "&amp;",
    '"': "&quot;",
    "'": "&#39;",
})


def escape_html(text):
    """Заменяет <, >, &, " и ' на HTML-сущности, остальное не трогает."""
    return text.translate(_HTML_ESCAPES)


@dataclass(frozen=True)
class Html:
    """
    Заранее подготовленный HTML.

    Оборачивает строку, которой доверяют: to_html выводит её без экранирования.
    Брать нужно класс из сгенерированного модуля (templates.Html).
    """
    text: str

    def __str__(self):
        return self.text


@functools.singledispatch
def to_html(value, out):
    """
    Пишет в out экранированное текстовое представление значения.

    Реализации для собственных типов регистрируются через to_html.register
    сгенерированного модуля (например, templates.to_html.register):
    у каждого сгенерированного модуля своя копия этой функции.
    """
    out.write(escape_html(str(value)))


@to_html.register(Html)
def _html_to_html(value, out):
    out.write(value.text)
