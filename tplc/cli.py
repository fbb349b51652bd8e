from __future__ import annotations

import argparse
import logging
import os
import sys
from dataclasses import replace
from pathlib import Path
from typing import List, Optional

from .compiler import check_templates, compile_templates
from .config import BuildConfig, find_config, load_config
from .errors import TplcUserError
from .jsonic import dumps as jdumps
from .version import tool_version


def _setup_logging() -> None:
    log = logging.getLogger("tplc")
    if getattr(_setup_logging, "_inited", False):
        return
    _setup_logging._inited = True  # type: ignore[attr-defined]
    log.setLevel(logging.DEBUG if os.environ.get("TPLC_DEBUG") else logging.INFO)
    if not log.handlers:
        h = logging.StreamHandler()
        h.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
        log.addHandler(h)


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="tplc",
        description="Compile HTML templates into Python render functions",
        add_help=True,
    )
    p.add_argument("-v", "--version", action="version", version=f"%(prog)s {tool_version()}")
    sub = p.add_subparsers(dest="cmd", required=True)

    # Общие аргументы для всех подкоманд
    def add_common(sp: argparse.ArgumentParser) -> None:
        sp.add_argument(
            "--config",
            type=Path,
            help="путь к tplc.yaml (по умолчанию ./tplc.yaml, если есть)",
        )
        sp.add_argument("--input-dir", type=Path, help="каталог с шаблонами")
        sp.add_argument("--extension", help="расширение файлов шаблонов (по умолчанию .py.html)")
        sp.add_argument("--jobs", type=int, help="число потоков компиляции")

    sp_compile = sub.add_parser("compile", help="Скомпилировать шаблоны в модуль")
    add_common(sp_compile)
    sp_compile.add_argument("names", nargs="*", metavar="NAME", help="логические имена шаблонов")
    sp_compile.add_argument("--output-dir", type=Path, help="каталог для сгенерированного модуля")
    sp_compile.add_argument("--output-name", help="имя сгенерированного модуля (по умолчанию templates.py)")
    sp_compile.add_argument("--json", action="store_true", help="вывести отчёт в JSON")

    sp_check = sub.add_parser("check", help="Только разбор шаблонов, ошибки в JSON")
    add_common(sp_check)
    sp_check.add_argument("names", nargs="*", metavar="NAME", help="логические имена шаблонов")

    sp_list = sub.add_parser("list", help="Найденные шаблоны (JSON)")
    add_common(sp_list)

    return p


def _config(ns: argparse.Namespace) -> BuildConfig:
    """Конфиг из файла, поверх которого применяются флаги командной строки."""
    cfg_path: Optional[Path] = ns.config or find_config(Path.cwd())
    cfg = load_config(cfg_path) if cfg_path is not None else BuildConfig()

    overrides = {}
    for key in ("input_dir", "output_dir", "extension", "output_name", "jobs"):
        value = getattr(ns, key, None)
        if value is not None:
            overrides[key] = value
    names: List[str] = getattr(ns, "names", None) or []
    if names:
        overrides["templates"] = names
    return replace(cfg, **overrides)


def main(argv: list[str] | None = None) -> int:
    ns = _build_parser().parse_args(argv)
    _setup_logging()

    try:
        cfg = _config(ns)

        if ns.cmd == "compile":
            report = compile_templates(
                cfg.input_dir,
                cfg.output_dir,
                cfg.template_names(),
                extension=cfg.extension,
                output_name=cfg.output_name,
                jobs=cfg.jobs,
            )
            if ns.json:
                sys.stdout.write(jdumps(report.model_dump(mode="json")) + "\n")
            return 0

        if ns.cmd == "check":
            failures = check_templates(
                cfg.input_dir,
                cfg.template_names(),
                extension=cfg.extension,
                jobs=cfg.jobs,
            )
            sys.stdout.write(jdumps([f.model_dump(mode="json") for f in failures]) + "\n")
            return 1 if failures else 0

        if ns.cmd == "list":
            sys.stdout.write(jdumps({"templates": cfg.template_names()}) + "\n")
            return 0

    except TplcUserError as e:
        sys.stderr.write(str(e).rstrip() + "\n")
        return 2
    except ValueError as e:
        sys.stderr.write(str(e).rstrip() + "\n")
        return 2

    return 2


if __name__ == "__main__":
    raise SystemExit(main())
