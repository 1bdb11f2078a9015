"""
Token types shared by the indentation scanner and the lexical layer.
"""

from dataclasses import dataclass
from enum import Enum

from .errors import ErrorReason


class TokenType(Enum):
    """Token types in a Ren'Py script."""

    # Structural tokens, produced by the indentation scanner
    INDENT = "INDENT"
    DEDENT = "DEDENT"
    NEWLINE = "NEWLINE"
    ERROR = "ERROR"
    TEXT = "TEXT"  # Content of one source line, re-lexed by LineLexer
    EOF = "EOF"

    # Lexical tokens, produced by LineLexer on demand
    NAME = "NAME"
    STRING = "STRING"
    KEYWORD = "KEYWORD"
    PUNCT = "PUNCT"
    EXPR_FRAGMENT = "EXPR_FRAGMENT"


STRUCTURAL_TOKEN_TYPES = frozenset(
    {
        TokenType.INDENT,
        TokenType.DEDENT,
        TokenType.NEWLINE,
        TokenType.ERROR,
        TokenType.TEXT,
        TokenType.EOF,
    }
)


@dataclass
class Token:
    """
    A single token in a script.

    Attributes:
        type: Type of token
        value: Identifier, keyword or punctuation literal, resolved string
            value, raw fragment text, raw line text (TEXT), or error message (ERROR)
        line: Line number (1-indexed)
        column: Column number (1-indexed, in characters)
        start: Character offset of the first character
        end: Character offset one past the last character
        reason: Failure reason, set on ERROR tokens only
        raw: Verbatim source of a STRING token, quotes included
    """

    type: TokenType
    value: str
    line: int
    column: int
    start: int
    end: int
    reason: ErrorReason | None = None
    raw: str | None = None

    @property
    def end_column(self) -> int:
        """Column one past the token's last character (tokens never span lines)."""
        return self.column + (self.end - self.start)

    def __repr__(self) -> str:
        return f"Token({self.type.value}, {self.value!r}, {self.line}:{self.column})"
