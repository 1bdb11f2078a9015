"""
Ren'Py script corpus tests.

Valid files must parse cleanly and reproducibly; invalid files must fail
with the error class and position declared in their ``# expect:`` header.
"""

from pathlib import Path

import pytest

from .harness import parse_corpus_file, read_expectation

# Corpus directory
RENPY_CORPUS_DIR = Path(__file__).parent.parent / "corpora" / "renpy"


def get_valid_files() -> list[Path]:
    """Get all valid script corpus files."""
    valid_dir = RENPY_CORPUS_DIR / "valid"
    if not valid_dir.exists():
        return []
    return sorted(valid_dir.glob("*.rpy"))


def get_invalid_files() -> list[Path]:
    """Get all invalid script corpus files."""
    invalid_dir = RENPY_CORPUS_DIR / "invalid"
    if not invalid_dir.exists():
        return []
    return sorted(invalid_dir.glob("*.rpy"))


class TestValidScripts:
    """Tests for valid corpus files."""

    @pytest.mark.parser_corpus
    @pytest.mark.parametrize("script", get_valid_files(), ids=lambda p: p.stem)
    def test_valid_script_parses_without_errors(self, script: Path):
        """Valid files must parse without errors."""
        result = parse_corpus_file(script)
        assert result["diagnostics"] == [], (
            f"Expected no diagnostics for valid file {script.name}, "
            f"got: {result['diagnostics']}"
        )
        assert result["result"] is not None
        assert result["result"]["statements"], f"Expected statements in {script.name}"

    @pytest.mark.parser_corpus
    @pytest.mark.parametrize("script", get_valid_files(), ids=lambda p: p.stem)
    def test_parsing_is_deterministic(self, script: Path):
        """Parsing the same file twice must produce identical output."""
        assert parse_corpus_file(script) == parse_corpus_file(script)


class TestInvalidScripts:
    """Tests for invalid corpus files."""

    @pytest.mark.parser_corpus
    @pytest.mark.parametrize("script", get_invalid_files(), ids=lambda p: p.stem)
    def test_invalid_script_reports_expected_error(self, script: Path):
        """Invalid files must fail with the declared error at the declared position."""
        expected = read_expectation(script)
        result = parse_corpus_file(script)

        assert result["result"] is None
        (diagnostic,) = result["diagnostics"]
        assert diagnostic["error_type"] == expected.error_type, diagnostic
        assert (diagnostic["line"], diagnostic["column"]) == (expected.line, expected.column), (
            diagnostic
        )


class TestCorpusLayout:
    def test_corpus_is_not_empty(self):
        assert get_valid_files(), "No valid corpus files found"
        assert get_invalid_files(), "No invalid corpus files found"
