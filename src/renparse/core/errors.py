"""
Error types for renparse scanning, lexing, and parsing.
"""

from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path
from typing import Optional


class ErrorReason(StrEnum):
    """Discriminated reason attached to every parse failure."""

    UNTERMINATED_STRING = "unterminated string"
    UNTERMINATED_FRAGMENT = "unterminated fragment"
    INCONSISTENT_DEDENT = "inconsistent dedent"
    MIXED_INDENTATION = "mixed indentation"
    UNEXPECTED_TOKEN = "unexpected token"
    UNEXPECTED_EOF = "unexpected end of input"
    INVALID_ENCODING = "invalid encoding"


class RenparseError(Exception):
    """Base exception for all renparse errors."""

    def __init__(self, message: str, context: Optional["ErrorContext"] = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.context.format()}\n{self.message}"
        return self.message


class ParseError(RenparseError):
    """
    Raised when a script cannot be turned into a syntax tree.

    Every parse error carries a ``reason`` so callers can branch on the
    failure kind without matching message text.
    """

    default_reason = ErrorReason.UNEXPECTED_TOKEN

    def __init__(
        self,
        message: str,
        context: Optional["ErrorContext"] = None,
        reason: ErrorReason | None = None,
    ):
        self.reason = reason or self.default_reason
        super().__init__(message, context)


class LexError(ParseError):
    """
    Raised when a line contains a token that cannot be recognized.

    Examples:
    - Unterminated string literal
    - Unbalanced parenthesized fragment
    - Input that is not valid UTF-8
    """

    default_reason = ErrorReason.UNTERMINATED_STRING


class IndentError(ParseError):
    """
    Raised when leading whitespace does not describe a valid block structure.

    Examples:
    - Dedent to a column that was never pushed
    - Tabs and spaces mixed in one indentation run
    """

    default_reason = ErrorReason.INCONSISTENT_DEDENT


class GrammarError(ParseError):
    """
    Raised when the token stream matches no grammar alternative.

    Examples:
    - Missing ``:`` after a label name
    - A bare identifier where a statement was expected
    - Simple statement not followed by a line break
    """

    default_reason = ErrorReason.UNEXPECTED_TOKEN


class UnexpectedEofError(GrammarError):
    """Raised when input ends while a statement or block is still open."""

    default_reason = ErrorReason.UNEXPECTED_EOF


class ConfigError(RenparseError):
    """Raised when renparse.toml cannot be read or has invalid values."""

    pass


@dataclass
class ErrorContext:
    """
    Context information for an error, including source location.

    Attributes:
        file: Path to the source file where error occurred (None for in-memory text)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
        offset: Character offset into the source text
        end_line: Line where the offending span ends
        end_column: Column where the offending span ends (exclusive)
        snippet: Optional code snippet showing the error location
    """

    file: Path | None
    line: int
    column: int
    offset: int | None = None
    end_line: int | None = None
    end_column: int | None = None
    snippet: str | None = None

    def format(self) -> str:
        """
        Format error context as a human-readable string.

        Returns:
            Formatted string like: "script.rpy:10:5"
        """
        location = f"{self.file or '<string>'}:{self.line}:{self.column}"

        if self.snippet:
            return f"{location}\n{self._format_snippet()}"
        return location

    def _format_snippet(self) -> str:
        """Format code snippet with line numbers and error marker."""
        if not self.snippet:
            return ""

        lines = self.snippet.split("\n")
        formatted = []

        # Snippets start at most SNIPPET_CONTEXT lines before the error
        start_line = max(1, self.line - SNIPPET_CONTEXT)

        for i, line in enumerate(lines):
            line_num = start_line + i
            prefix = f"{line_num:4d} | "
            formatted.append(prefix + line)

            if line_num == self.line:
                marker_pos = len(prefix) + self.column - 1
                formatted.append(" " * marker_pos + "^^^")

        return "\n".join(formatted)


SNIPPET_CONTEXT = 2


def extract_snippet(source: str, line: int) -> str:
    """Return the source lines surrounding ``line`` for error display."""
    lines = source.splitlines()
    if not lines:
        return ""
    start = max(1, line - SNIPPET_CONTEXT)
    end = min(len(lines), line + SNIPPET_CONTEXT)
    return "\n".join(lines[start - 1 : end])


def make_parse_error(
    message: str,
    file: Path | None,
    line: int,
    column: int,
    *,
    error_class: type[ParseError] = GrammarError,
    reason: ErrorReason | None = None,
    offset: int | None = None,
    end_line: int | None = None,
    end_column: int | None = None,
    source: str | None = None,
) -> ParseError:
    """
    Helper to create a located ParseError.

    Args:
        message: Error description
        file: Source file path
        line: Line number (1-indexed)
        column: Column number (1-indexed)
        error_class: Concrete ParseError subclass to raise
        reason: Discriminated failure reason (defaults per class)
        offset: Character offset of the offending span
        end_line: End line of the offending span
        end_column: End column of the offending span
        source: Full source text, used to attach a snippet

    Returns:
        ParseError subclass instance with context attached
    """
    snippet = extract_snippet(source, line) if source else None
    context = ErrorContext(
        file=file,
        line=line,
        column=column,
        offset=offset,
        end_line=end_line,
        end_column=end_column,
        snippet=snippet,
    )
    return error_class(message, context, reason)
