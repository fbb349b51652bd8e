"""
Конфигурация сборки шаблонов (tplc.yaml).

Файл необязателен: всё, что в нём задаётся, можно передать флагами CLI
или параметрами compile_templates. Относительные пути считаются
от каталога, в котором лежит сам tplc.yaml.
"""

from __future__ import annotations

import errno
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from .compiler import DEFAULT_EXTENSION, DEFAULT_OUTPUT_NAME
from .errors import ConfigLoadError, TemplateFileError

CONFIG_FILE = "tplc.yaml"

_yaml = YAML(typ="safe")

_KNOWN_KEYS = {"input_dir", "output_dir", "extension", "output_name", "jobs", "templates"}


def _err(path: Path, key: str, msg: str) -> ConfigLoadError:
    return ConfigLoadError(f"{path}: {key}: {msg}")


def _expect_str(path: Path, data: Dict[str, Any], key: str, default: str) -> str:
    value = data.get(key, default)
    if not isinstance(value, str) or not value:
        raise _err(path, key, f"expected non-empty string, got {value!r}")
    return value


@dataclass
class BuildConfig:
    """Параметры одного запуска компиляции."""
    input_dir: Path = Path("templates")
    output_dir: Path = Path("build")
    extension: str = DEFAULT_EXTENSION
    output_name: str = DEFAULT_OUTPUT_NAME
    jobs: int = 1
    # None: взять все шаблоны из input_dir
    templates: Optional[List[str]] = field(default=None)

    @classmethod
    def from_dict(cls, data: Dict[str, Any], base: Path, path: Path = Path(CONFIG_FILE)) -> "BuildConfig":
        """Создание экземпляра из словаря (из YAML) с проверкой типов."""
        unknown = sorted(set(data) - _KNOWN_KEYS)
        if unknown:
            raise _err(path, unknown[0], "unknown key")

        jobs = data.get("jobs", 1)
        if isinstance(jobs, bool) or not isinstance(jobs, int) or jobs < 1:
            raise _err(path, "jobs", f"expected positive integer, got {jobs!r}")

        templates = data.get("templates")
        if templates is not None:
            if not isinstance(templates, list) or not all(isinstance(t, str) and t for t in templates):
                raise _err(path, "templates", "expected a list of template names")
            templates = list(templates)

        return cls(
            input_dir=base / _expect_str(path, data, "input_dir", "templates"),
            output_dir=base / _expect_str(path, data, "output_dir", "build"),
            extension=_expect_str(path, data, "extension", DEFAULT_EXTENSION),
            output_name=_expect_str(path, data, "output_name", DEFAULT_OUTPUT_NAME),
            jobs=jobs,
            templates=templates,
        )

    def template_names(self) -> List[str]:
        """Явный список шаблонов или все найденные в input_dir."""
        if self.templates is not None:
            return list(self.templates)
        return discover_templates(self.input_dir, self.extension)


def load_config(path: Path) -> BuildConfig:
    """
    Загружает tplc.yaml.

    Raises:
        ConfigLoadError: Некорректный YAML или недопустимые значения
        TemplateFileError: Файл не удаётся прочитать
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise TemplateFileError(path, e) from e
    try:
        raw = _yaml.load(text) or {}
    except YAMLError as e:
        raise ConfigLoadError(f"{path}: invalid YAML: {e}") from e
    if not isinstance(raw, dict):
        raise ConfigLoadError(f"{path}: YAML must be a mapping")
    return BuildConfig.from_dict(raw, base=path.parent, path=path)


def find_config(root: Path) -> Optional[Path]:
    """Путь к tplc.yaml в каталоге root, если он есть."""
    candidate = root / CONFIG_FILE
    return candidate if candidate.is_file() else None


def discover_templates(input_dir: Path, extension: str = DEFAULT_EXTENSION) -> List[str]:
    """
    Логические имена всех шаблонов в каталоге (рекурсивно).

    Имена отсортированы и записаны через '/', без расширения:
    pages/index.py.html -> "pages/index" (функция pages_index, см.
    compiler.function_name).
    """
    if not input_dir.is_dir():
        raise TemplateFileError(
            input_dir, FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(input_dir)))
    names = []
    for path in input_dir.rglob(f"*{extension}"):
        if path.is_file():
            rel = path.relative_to(input_dir).as_posix()
            names.append(rel[:-len(extension)])
    return sorted(names)


__all__ = ["CONFIG_FILE", "BuildConfig", "load_config", "find_config", "discover_templates"]
