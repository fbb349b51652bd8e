from pathlib import Path

import pytest

from tests.infrastructure.file_utils import write_templates


@pytest.fixture
def tplproj(tmp_path: Path) -> Path:
    """
    Минимальный проект: templates/ с двумя корректными шаблонами
    и одним сломанным, build/ ещё не существует.
    """
    root = tmp_path
    write_templates(root / "templates", {
        "hello": """\
            @(name: str)
            Hello, @name!
            """,
        "page": """\
            @* страница целиком *@
            @import math;
            @(title, user)
            <h1>@title</h1>
            <p>@user.name, pi=@math.pi</p>
            """,
        "broken": """\
            @(x: int,y: int)
            @x
            """,
    })
    return root


@pytest.fixture
def templates_dir(tplproj: Path) -> Path:
    return tplproj / "templates"
