"""
Lexical layer for Ren'Py scripts.

Recognizes identifiers, keywords, punctuation, quoted strings, and opaque
Python expression fragments inside a single TEXT span produced by the
indentation scanner. Recognizers are invoked on demand by the parser, so
the same characters can be read as a keyword in one position and as a
name or Python fragment in another.
"""

import re
from pathlib import Path

from .errors import ErrorReason, LexError, ParseError, make_parse_error
from .tokens import Token, TokenType

NAME_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")
NUMBER_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?![A-Za-z0-9_])")

QUOTES = ("'", '"')
WHITESPACE = (" ", "\t", "\r", "\f")
CLOSERS = {"(": ")", "[": "]", "{": "}"}

# Escapes resolved inside string literals; any other escaped char stands for itself
ESCAPES = {"n": "\n", "t": "\t", "\\": "\\"}


def quote_string(value: str, quote: str = '"') -> str:
    """
    Re-quote a resolved string value, escaping as read_string unescapes.

    Pass the quote character the literal was written with
    (``StringLiteral.quote``); a single-quoted literal re-quoted with the
    default double quote is equivalent but not identical to its source.
    """
    escaped = (
        value.replace("\\", "\\\\")
        .replace(quote, "\\" + quote)
        .replace("\n", "\\n")
        .replace("\t", "\\t")
    )
    return f"{quote}{escaped}{quote}"


class LineLexer:
    """
    Cursor over the text of one source line.

    Each ``read_*`` method skips leading whitespace, then either consumes
    and returns a token or returns None without moving. Malformed strings
    and fragments raise LexError.
    """

    def __init__(self, line: Token, file: Path | None = None, source: str | None = None):
        """
        Initialize lexer.

        Args:
            line: TEXT token from the indentation scanner
            file: Source file path (for error reporting)
            source: Full source text (for error snippets)
        """
        self.text = line.value
        self.line = line.line
        self.column = line.column
        self.offset = line.start
        self.file = file
        self.source = source
        self.pos = 0
        self.last: Token | None = None  # Most recently consumed token

    # ------------------------------------------------------------------
    # Cursor helpers
    # ------------------------------------------------------------------

    def current_char(self) -> str | None:
        """Get current character or None if at end of line."""
        if self.pos >= len(self.text):
            return None
        return self.text[self.pos]

    def skip_whitespace(self) -> None:
        """Skip horizontal whitespace."""
        while self.current_char() in WHITESPACE:
            self.pos += 1

    def at_end(self) -> bool:
        """True when only whitespace or a trailing comment remains."""
        self.skip_whitespace()
        return self.current_char() in (None, "#")

    def mark(self) -> int:
        """Remember the current position for backtracking."""
        return self.pos

    def reset(self, mark: int) -> None:
        """Return to a position saved with mark()."""
        self.pos = mark

    def make_token(self, type_: TokenType, value: str, start: int, end: int) -> Token:
        """Build a token for text[start:end] with absolute offsets and record it as consumed."""
        self.last = Token(
            type_,
            value,
            self.line,
            self.column + start,
            self.offset + start,
            self.offset + end,
        )
        return self.last

    def error(self, message: str, pos: int, reason: ErrorReason) -> ParseError:
        """Create a located LexError at a position within this line."""
        return make_parse_error(
            message,
            self.file,
            self.line,
            self.column + pos,
            error_class=LexError,
            reason=reason,
            offset=self.offset + pos,
            source=self.source,
        )

    # ------------------------------------------------------------------
    # Recognizers
    # ------------------------------------------------------------------

    def peek_name(self) -> str | None:
        """Return the identifier at the cursor without consuming it."""
        self.skip_whitespace()
        match = NAME_RE.match(self.text, self.pos)
        return match.group() if match else None

    def read_name(self) -> Token | None:
        """Read an identifier (keywords included; the parser decides)."""
        self.skip_whitespace()
        match = NAME_RE.match(self.text, self.pos)
        if not match:
            return None
        start = self.pos
        self.pos = match.end()
        return self.make_token(TokenType.NAME, match.group(), start, self.pos)

    def read_keyword(self, keyword: str) -> Token | None:
        """Read ``keyword`` if the identifier at the cursor spells it exactly."""
        if self.peek_name() != keyword:
            return None
        start = self.pos
        self.pos += len(keyword)
        return self.make_token(TokenType.KEYWORD, keyword, start, self.pos)

    def peek_punct(self, literal: str) -> bool:
        """Check whether punctuation ``literal`` is at the cursor."""
        self.skip_whitespace()
        if not self.text.startswith(literal, self.pos):
            return False
        # "=" must not be read out of "=="
        if literal == "=" and self.text.startswith("==", self.pos):
            return False
        return True

    def read_punct(self, literal: str) -> Token | None:
        """Read punctuation ``literal``."""
        if not self.peek_punct(literal):
            return None
        start = self.pos
        self.pos += len(literal)
        return self.make_token(TokenType.PUNCT, literal, start, self.pos)

    def read_string(self) -> Token | None:
        """Read a quoted string, resolving backslash escapes."""
        self.skip_whitespace()
        quote = self.current_char()
        if quote not in QUOTES:
            return None

        start = self.pos
        chars = []
        i = start + 1
        while i < len(self.text) and self.text[i] != quote:
            current = self.text[i]
            if current == "\\" and i + 1 < len(self.text):
                escape_char = self.text[i + 1]
                chars.append(ESCAPES.get(escape_char, escape_char))
                i += 2
            else:
                chars.append(current)
                i += 1

        if i >= len(self.text):
            raise self.error("Unterminated string literal", start, ErrorReason.UNTERMINATED_STRING)

        self.pos = i + 1
        token = self.make_token(TokenType.STRING, "".join(chars), start, self.pos)
        token.raw = self.text[start : self.pos]
        return token

    def read_number(self) -> Token | None:
        """Read a numeric literal as an expression fragment."""
        self.skip_whitespace()
        match = NUMBER_RE.match(self.text, self.pos)
        if not match:
            return None
        start = self.pos
        self.pos = match.end()
        return self.make_token(TokenType.EXPR_FRAGMENT, match.group(), start, self.pos)

    def read_group(self) -> Token | None:
        """
        Read one balanced (), [] or {} group as an expression fragment.

        Quoted strings inside the group are skipped, so brackets within
        them do not count. The group must close on the same line.
        """
        self.skip_whitespace()
        if self.current_char() not in CLOSERS:
            return None

        start = self.pos
        expected: list[str] = []
        i = start
        while i < len(self.text):
            ch = self.text[i]
            if ch in QUOTES:
                i = self._skip_string(i)
                continue
            if ch in CLOSERS:
                expected.append(CLOSERS[ch])
            elif ch in CLOSERS.values():
                if ch != expected[-1]:
                    raise self.error(
                        f"Mismatched {ch!r} in expression, expected {expected[-1]!r}",
                        i,
                        ErrorReason.UNTERMINATED_FRAGMENT,
                    )
                expected.pop()
                if not expected:
                    self.pos = i + 1
                    return self.make_token(
                        TokenType.EXPR_FRAGMENT, self.text[start : self.pos], start, self.pos
                    )
            i += 1

        raise self.error(
            f"Unterminated expression, missing {expected[-1]!r}",
            start,
            ErrorReason.UNTERMINATED_FRAGMENT,
        )

    def read_rest(self) -> Token | None:
        """
        Read a Python fragment up to the structural colon or end of line.

        A colon inside a string literal or a bracket group is part of the
        fragment. A ``#`` outside strings starts a comment and ends the
        fragment. Trailing whitespace is not included.
        """
        self.skip_whitespace()
        start = self.pos
        depth = 0
        i = start
        while i < len(self.text):
            ch = self.text[i]
            if ch in QUOTES:
                i = self._skip_string(i)
                continue
            if ch == "#":
                break
            if ch in CLOSERS:
                depth += 1
            elif ch in CLOSERS.values():
                depth = max(depth - 1, 0)
            elif ch == ":" and depth == 0:
                break
            i += 1

        raw = self.text[start:i].rstrip()
        if not raw:
            return None
        self.pos = start + len(raw)
        return self.make_token(TokenType.EXPR_FRAGMENT, raw, start, self.pos)

    def _skip_string(self, start: int) -> int:
        """Return the index just past the string literal opening at ``start``."""
        quote = self.text[start]
        i = start + 1
        while i < len(self.text):
            ch = self.text[i]
            if ch == "\\":
                i += 2
                continue
            if ch == quote:
                return i + 1
            i += 1
        raise self.error("Unterminated string literal", start, ErrorReason.UNTERMINATED_STRING)
