"""Pytest configuration for parser corpus tests."""

from pathlib import Path

import pytest

# Corpus directories
CORPORA_DIR = Path(__file__).parent.parent / "corpora"
RENPY_CORPUS_DIR = CORPORA_DIR / "renpy"


@pytest.fixture
def renpy_corpus_dir() -> Path:
    """Return path to the Ren'Py script corpus directory."""
    return RENPY_CORPUS_DIR
