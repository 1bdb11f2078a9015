"""Shared pytest fixtures for renparse tests."""

import textwrap
from collections.abc import Callable
from pathlib import Path

import pytest

from renparse.core import ir
from renparse.core.parser import parse_source


@pytest.fixture
def corpora_dir() -> Path:
    """Return path to the script corpora directory."""
    return Path(__file__).parent / "corpora"


@pytest.fixture
def parse() -> Callable[[str], ir.SourceFile]:
    """Parse a dedented script snippet."""

    def _parse(text: str) -> ir.SourceFile:
        return parse_source(textwrap.dedent(text))

    return _parse


@pytest.fixture
def script_project(tmp_path: Path) -> Path:
    """Create a temporary project with renparse.toml and two valid scripts."""
    game = tmp_path / "game"
    game.mkdir()

    (game / "script.rpy").write_text(
        textwrap.dedent("""\
            define e = Character("Eileen")

            label start:
                scene bg room
                show eileen happy
                e "You've created a new Ren'Py game."
                jump ending
        """),
        encoding="utf-8",
    )
    (game / "ending.rpy").write_text(
        textwrap.dedent("""\
            label ending:
                "The end."
                return
        """),
        encoding="utf-8",
    )
    (tmp_path / "renparse.toml").write_text(
        textwrap.dedent("""\
            [project]
            paths = ["game/"]
        """),
        encoding="utf-8",
    )
    return tmp_path
