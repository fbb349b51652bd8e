"""
Unified test infrastructure for tplc.

Modules:
- file_utils: creating template files and directories
- cli_utils: running the CLI in a subprocess
- codegen_utils: executing generated code
"""

from .file_utils import write, write_templates
from .cli_utils import run_cli, jload
from .codegen_utils import load_generated, import_generated, render

__all__ = [
    "write",
    "write_templates",
    "run_cli",
    "jload",
    "load_generated",
    "import_generated",
    "render",
]
