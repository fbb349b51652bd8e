"""
Пакетная компиляция шаблонов в один Python-модуль.

Читает файлы шаблонов по логическим именам, компилирует каждый
независимо и записывает итоговый модуль единожды, когда готовы
результаты по всем файлам.

Ошибки разбора отдельного шаблона не фатальны: шаблон пропускается,
в лог пишется предупреждение. Ошибки файловой системы прерывают пакет
целиком (TemplateFileError).
"""

from __future__ import annotations

import keyword
import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence, Union

from .codegen import generate_function, generate_module
from .errors import (
    TemplateFileError,
    TemplateIncompleteError,
    TemplateNameError,
    TemplateSyntaxError,
    TplcUserError,
)
from .report import CompileReport, TemplateFailure
from .template.parser import parse_template

logger = logging.getLogger(__name__)

DEFAULT_EXTENSION = ".py.html"
DEFAULT_OUTPUT_NAME = "templates.py"

PathLike = Union[str, Path]


@dataclass(frozen=True)
class TemplateSource:
    """Прочитанный файл шаблона."""
    name: str
    path: Path
    data: bytes


@dataclass(frozen=True)
class TemplateOutcome:
    """Результат компиляции одного шаблона: код либо ошибка."""
    source: TemplateSource
    code: Optional[str] = None
    error: Optional[TplcUserError] = None


def template_path(input_dir: PathLike, name: str, extension: str = DEFAULT_EXTENSION) -> Path:
    return Path(input_dir) / f"{name}{extension}"


def function_name(name: str) -> str:
    """
    Имя функции отрисовки для логического имени шаблона.

    Разделители каталогов заменяются на '_': "mail/welcome" -> "mail_welcome".

    Raises:
        TemplateNameError: Если результат не является идентификатором Python
            или совпадает с ключевым словом
    """
    result = name.replace("/", "_")
    if not result.isidentifier() or keyword.iskeyword(result):
        raise TemplateNameError(name, result)
    return result


def compile_template(source: Union[bytes, str], name: str) -> str:
    """
    Разбирает один шаблон и генерирует для него функцию.

    Не обращается к файловой системе.

    Raises:
        TemplateSyntaxError: Если шаблон не соответствует грамматике
    """
    return generate_function(parse_template(source), name)


def read_sources(input_dir: PathLike, names: Sequence[str], extension: str = DEFAULT_EXTENSION) -> List[TemplateSource]:
    """
    Читает файлы шаблонов в порядке переданных имён.

    Raises:
        TemplateFileError: Если какой-либо файл не удаётся прочитать
    """
    sources: List[TemplateSource] = []
    for name in names:
        path = template_path(input_dir, name, extension)
        logger.debug("watching %s", path)
        try:
            data = path.read_bytes()
        except OSError as e:
            raise TemplateFileError(path, e) from e
        sources.append(TemplateSource(name=name, path=path, data=data))
    return sources


def _compile_source(source: TemplateSource) -> TemplateOutcome:
    try:
        code = compile_template(source.data, function_name(source.name))
    except (TemplateNameError, TemplateSyntaxError) as e:
        return TemplateOutcome(source=source, error=e)
    return TemplateOutcome(source=source, code=code)


def _compile_all(sources: List[TemplateSource], jobs: int) -> List[TemplateOutcome]:
    if jobs < 1:
        raise ValueError(f"jobs must be positive, got {jobs}")
    if jobs == 1 or len(sources) < 2:
        return [_compile_source(s) for s in sources]
    # map сохраняет порядок входных данных
    with ThreadPoolExecutor(max_workers=jobs) as pool:
        return list(pool.map(_compile_source, sources))


def _warn(outcome: TemplateOutcome) -> None:
    err = outcome.error
    if isinstance(err, TemplateNameError):
        logger.warning("Skipping template %s: %s", outcome.source.path, err)
    elif isinstance(err, TemplateIncompleteError):
        logger.warning("Failed to parse template %s: %s", outcome.source.path, err)
    else:
        logger.warning("Template parse error in %s: %s", outcome.source.path, err)


def check_templates(
        input_dir: PathLike,
        names: Sequence[str],
        *,
        extension: str = DEFAULT_EXTENSION,
        jobs: int = 1,
) -> List[TemplateFailure]:
    """
    Только разбор: возвращает ошибки по шаблонам, ничего не записывая.

    Raises:
        TemplateFileError: Если какой-либо файл не удаётся прочитать
    """
    failures: List[TemplateFailure] = []
    for outcome in _compile_all(read_sources(input_dir, names, extension), jobs):
        if outcome.error is not None:
            _warn(outcome)
            failures.append(TemplateFailure.from_error(
                outcome.source.name, str(outcome.source.path), outcome.error))
    return failures


def compile_templates(
        input_dir: PathLike,
        output_dir: PathLike,
        names: Sequence[str],
        *,
        extension: str = DEFAULT_EXTENSION,
        output_name: str = DEFAULT_OUTPUT_NAME,
        jobs: int = 1,
) -> CompileReport:
    """
    Компилирует шаблоны в один модуль output_dir/output_name.

    Функции идут в порядке имён в names. Блок поддержки (tplc.runtime)
    добавляется ровно один раз, даже если ни один шаблон не скомпилирован.

    Args:
        input_dir: Каталог с файлами шаблонов
        output_dir: Каталог для итогового модуля (создаётся при необходимости)
        names: Логические имена шаблонов; файл ищется как <name><extension>
        extension: Расширение файлов шаблонов
        output_name: Имя итогового модуля
        jobs: Число потоков для компиляции

    Returns:
        Отчёт о скомпилированных и пропущенных шаблонах

    Raises:
        TemplateFileError: При ошибке чтения шаблонов или записи модуля
    """
    sources = read_sources(input_dir, names, extension)
    report = CompileReport(sources=[str(s.path) for s in sources])

    functions: List[str] = []
    for outcome in _compile_all(sources, jobs):
        if outcome.error is None:
            functions.append(outcome.code)
            report.compiled.append(outcome.source.name)
        else:
            _warn(outcome)
            report.failures.append(TemplateFailure.from_error(
                outcome.source.name, str(outcome.source.path), outcome.error))

    out_path = Path(output_dir) / output_name
    try:
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(generate_module(functions), encoding="utf-8")
    except OSError as e:
        raise TemplateFileError(out_path, e) from e

    report.output = str(out_path)
    logger.info("Compiled %d of %d templates into %s", len(report.compiled), len(sources), out_path)
    return report


__all__ = [
    "DEFAULT_EXTENSION",
    "DEFAULT_OUTPUT_NAME",
    "TemplateSource",
    "TemplateOutcome",
    "template_path",
    "function_name",
    "compile_template",
    "read_sources",
    "check_templates",
    "compile_templates",
]
