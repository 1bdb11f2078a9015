"""
Indentation scanner for Ren'Py scripts.

Converts raw script text into a stream of structural tokens
(INDENT/DEDENT/NEWLINE/ERROR) interleaved with one TEXT token per
content line. The scanner knows nothing about the grammar; the parser
re-lexes each TEXT span with LineLexer.
"""

import logging
from pathlib import Path

from .config import ParserConfig
from .errors import ErrorReason, IndentError, make_parse_error
from .tokens import Token, TokenType

logger = logging.getLogger(__name__)


class IndentScanner:
    """
    Line-level tokenizer that tracks block structure through leading whitespace.

    Blank and comment-only lines are ignored. A line deeper than the current
    block opens a new one (INDENT); a line at the same depth separates
    statements (NEWLINE); a shallower line closes blocks (one DEDENT each),
    and the closing DEDENTs stand in for the separator. Dedenting to a
    width that was never pushed yields an ERROR sentinel.
    """

    def __init__(self, text: str, file: Path | None = None, config: ParserConfig | None = None):
        """
        Initialize scanner.

        Args:
            text: Source text to scan
            file: Source file path (for error reporting)
            config: Tab width and mixed-indentation policy
        """
        self.text = text
        self.file = file
        self.config = config or ParserConfig()
        self.tokens: list[Token] = []
        self.indent_stack = [0]  # Stack of indentation widths, base level 0
        self.seen_content = False

    def measure_indent(self, prefix: str) -> tuple[int, bool]:
        """
        Compute the width of a run of leading whitespace.

        Returns:
            Tuple of (width, mixed) where mixed is True when the run
            contains both tabs and spaces
        """
        tab_width = self.config.tab_width
        width = 0
        has_tab = has_space = False
        for ch in prefix:
            if ch == " ":
                width += 1
                has_space = True
            elif ch == "\t":
                width = (width // tab_width + 1) * tab_width
                has_tab = True
            # Form feeds occupy no columns
        return width, has_tab and has_space

    def handle_indentation(self, width: int, line: int, column: int, offset: int) -> None:
        """Generate INDENT/NEWLINE/DEDENT/ERROR tokens for a line of the given width."""
        current_indent = self.indent_stack[-1]

        if width > current_indent:
            self.indent_stack.append(width)
            self.tokens.append(Token(TokenType.INDENT, "", line, column, offset, offset))
        elif width == current_indent:
            if self.seen_content:
                self.tokens.append(Token(TokenType.NEWLINE, "\\n", line, column, offset, offset))
        else:
            while self.indent_stack[-1] > width:
                self.indent_stack.pop()
                self.tokens.append(Token(TokenType.DEDENT, "", line, column, offset, offset))
            if self.indent_stack[-1] != width:
                self.tokens.append(
                    Token(
                        TokenType.ERROR,
                        f"Inconsistent indentation (expected {self.indent_stack[-1]} "
                        f"columns, got {width})",
                        line,
                        column,
                        offset,
                        offset,
                        reason=ErrorReason.INCONSISTENT_DEDENT,
                    )
                )

    def scan(self) -> list[Token]:
        """
        Scan the entire source text.

        Returns:
            List of structural and TEXT tokens ending with EOF. ERROR
            sentinels are left in the stream.
        """
        offset = 0
        line_no = 0

        for line_no, physical in enumerate(self.text.split("\n"), start=1):
            line_start = offset
            offset += len(physical) + 1

            content = physical[:-1] if physical.endswith("\r") else physical
            stripped = content.lstrip(" \t\f")

            # Skip blank lines and comment-only lines
            if not stripped.strip() or stripped.startswith("#"):
                continue

            prefix_len = len(content) - len(stripped)
            width, mixed = self.measure_indent(content[:prefix_len])
            column = prefix_len + 1
            start = line_start + prefix_len

            if mixed and not self.config.allow_mixed_indentation:
                self.tokens.append(
                    Token(
                        TokenType.ERROR,
                        "Indentation mixes tabs and spaces",
                        line_no,
                        1,
                        line_start,
                        start,
                        reason=ErrorReason.MIXED_INDENTATION,
                    )
                )

            self.handle_indentation(width, line_no, column, start)
            self.seen_content = True

            self.tokens.append(
                Token(TokenType.TEXT, stripped, line_no, column, start, line_start + len(content))
            )

        self._finish(line_no)
        logger.debug(
            "Scanned %d tokens from %d lines of %s",
            len(self.tokens),
            line_no,
            self.file or "<string>",
        )
        return self.tokens

    def _finish(self, last_line: int) -> None:
        """Close open blocks at end of input and append EOF."""
        end = len(self.text)
        last_newline = self.text.rfind("\n")
        line = max(last_line, 1)
        column = end - last_newline

        # End of input acts like a line at column 0
        if len(self.indent_stack) > 1:
            while len(self.indent_stack) > 1:
                self.indent_stack.pop()
                self.tokens.append(Token(TokenType.DEDENT, "", line, column, end, end))
        elif self.seen_content:
            self.tokens.append(Token(TokenType.NEWLINE, "\\n", line, column, end, end))

        self.tokens.append(Token(TokenType.EOF, "", line, column, end, end))


def tokenize(text: str, file: Path | None = None, config: ParserConfig | None = None) -> list[Token]:
    """
    Convenience function to scan script text.

    Args:
        text: Source text
        file: Source file path
        config: Scanner settings

    Returns:
        List of tokens

    Raises:
        IndentError: If the scanner emitted an ERROR sentinel
    """
    tokens = IndentScanner(text, file, config).scan()
    for token in tokens:
        if token.type == TokenType.ERROR:
            raise make_parse_error(
                token.value,
                file,
                token.line,
                token.column,
                error_class=IndentError,
                reason=token.reason,
                offset=token.start,
                source=text,
            )
    return tokens
