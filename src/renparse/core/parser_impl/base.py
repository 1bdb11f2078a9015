"""
Base parser class for Ren'Py scripts.

Provides structural-token navigation, per-line lexing, span construction,
and the small sub-rules (label names, simple expressions, Python
fragments) shared by all parser mixins.
"""

from pathlib import Path
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from .. import ir
from ..errors import (
    ErrorReason,
    GrammarError,
    IndentError,
    ParseError,
    UnexpectedEofError,
    make_parse_error,
)
from ..lexer import CLOSERS, NAME_RE, LineLexer
from ..tokens import Token, TokenType

if TYPE_CHECKING:
    from ..config import ParserConfig


@runtime_checkable
class ParserProtocol(Protocol):
    """
    Protocol defining the interface available to parser mixins.

    This allows mypy to understand that mixins will have access to
    BaseParser methods when combined in the final Parser class.
    """

    tokens: list[Token]
    file: Path | None
    pos: int
    lexer: LineLexer | None

    def current_token(self) -> Token: ...
    def advance(self) -> Token: ...
    def expect(self, token_type: TokenType) -> Token: ...
    def match(self, *token_types: TokenType) -> bool: ...
    def begin_line(self) -> LineLexer: ...
    def end_line(self, construct: str) -> None: ...
    def peek_line(self) -> LineLexer | None: ...

    # Methods from other mixins that may be called cross-mixin
    def parse_block(self) -> ir.Block: ...
    def try_parse_say(self, lexer: LineLexer) -> ir.SayStatement | None: ...


STRUCTURAL_NAMES = {
    TokenType.INDENT: "indent",
    TokenType.DEDENT: "dedent",
    TokenType.NEWLINE: "newline",
    TokenType.EOF: "end of input",
}


class BaseParser:
    """
    Base parser class with token manipulation utilities.

    The parser walks two levels at once: the structural token list from
    the indentation scanner, and a LineLexer over the TEXT token of the
    line currently being parsed.
    """

    def __init__(
        self,
        tokens: list[Token],
        file: Path | None = None,
        source: str | None = None,
        config: "ParserConfig | None" = None,
    ):
        """
        Initialize parser.

        Args:
            tokens: Token list from the indentation scanner
            file: Source file path (for error reporting)
            source: Full source text (for error snippets)
            config: Parser settings
        """
        self.tokens = tokens
        self.file = file
        self.source = source
        self.config = config
        self.pos = 0
        self.lexer: LineLexer | None = None

    # ------------------------------------------------------------------
    # Structural stream
    # ------------------------------------------------------------------

    def current_token(self) -> Token:
        """
        Get current token.

        Raises:
            IndentError: If the scanner left an ERROR sentinel here
        """
        if self.pos >= len(self.tokens):
            token = self.tokens[-1]  # Return EOF
        else:
            token = self.tokens[self.pos]
        if token.type == TokenType.ERROR:
            raise self.error(
                token.value,
                token,
                error_class=IndentError,
                reason=token.reason or ErrorReason.INCONSISTENT_DEDENT,
            )
        return token

    def advance(self) -> Token:
        """Consume and return current token."""
        token = self.current_token()
        if token.type != TokenType.EOF:
            self.pos += 1
        return token

    def expect(self, token_type: TokenType) -> Token:
        """
        Expect a specific structural token type and consume it.

        Raises:
            GrammarError: If token doesn't match
        """
        token = self.current_token()
        if token.type != token_type:
            raise self.unexpected(token, STRUCTURAL_NAMES.get(token_type, token_type.value))
        return self.advance()

    def match(self, *token_types: TokenType) -> bool:
        """Check if current token matches any of the given types."""
        return self.current_token().type in token_types

    # ------------------------------------------------------------------
    # Errors
    # ------------------------------------------------------------------

    def error(
        self,
        message: str,
        token: Token,
        error_class: type[ParseError] = GrammarError,
        reason: ErrorReason | None = None,
    ) -> ParseError:
        """Create a located parse error at ``token``."""
        return make_parse_error(
            message,
            self.file,
            token.line,
            token.column,
            error_class=error_class,
            reason=reason,
            offset=token.start,
            end_line=token.line,
            end_column=token.end_column,
            source=self.source,
        )

    def unexpected(self, token: Token, expected: str) -> ParseError:
        """Error for a structural token that does not fit the grammar."""
        if self._input_ended():
            return self.error(
                f"Unexpected end of input, expected {expected}",
                token,
                error_class=UnexpectedEofError,
            )
        return self.error(f"Expected {expected}, got {self.describe(token)}", token)

    def _input_ended(self) -> bool:
        """True when only the closing NEWLINE/DEDENTs and EOF remain."""
        return all(
            token.type in (TokenType.NEWLINE, TokenType.DEDENT, TokenType.EOF)
            for token in self.tokens[self.pos :]
        )

    def describe(self, token: Token) -> str:
        """Short human-readable description of a token for error messages."""
        if token.type in STRUCTURAL_NAMES:
            return STRUCTURAL_NAMES[token.type]
        words = token.value.split()
        return repr(words[0]) if words else repr(token.value)

    def line_error(self, expected: str) -> ParseError:
        """Error at the current position of the line being parsed."""
        lexer = self._require_lexer()
        at_end = lexer.at_end()
        rest = lexer.text[lexer.pos :].split()
        found = "end of line" if at_end or not rest else repr(rest[0])
        position = lexer.offset + lexer.pos
        token = Token(
            TokenType.PUNCT, "", lexer.line, lexer.column + lexer.pos, position, position
        )
        return self.error(f"Expected {expected}, got {found}", token)

    # ------------------------------------------------------------------
    # Lines
    # ------------------------------------------------------------------

    def begin_line(self) -> LineLexer:
        """Consume the next TEXT token and start lexing it."""
        token = self.current_token()
        if token.type != TokenType.TEXT:
            raise self.unexpected(token, "a statement")
        self.advance()
        self.lexer = LineLexer(token, self.file, self.source)
        return self.lexer

    def end_line(self, construct: str) -> None:
        """Require that nothing but a comment remains on the current line."""
        lexer = self._require_lexer()
        if not lexer.at_end():
            raise self.line_error(f"end of {construct}")
        self.lexer = None

    def peek_line(self) -> LineLexer | None:
        """A fresh lexer over the next TEXT token, without consuming it."""
        token = self.current_token()
        if token.type != TokenType.TEXT:
            return None
        return LineLexer(token, self.file, self.source)

    def _require_lexer(self) -> LineLexer:
        if self.lexer is None:
            raise RuntimeError("No line is being parsed")
        return self.lexer

    # ------------------------------------------------------------------
    # Line-level token helpers
    # ------------------------------------------------------------------

    def expect_keyword(self, keyword: str) -> Token:
        token = self._require_lexer().read_keyword(keyword)
        if token is None:
            raise self.line_error(f"'{keyword}'")
        return token

    def expect_punct(self, literal: str) -> Token:
        token = self._require_lexer().read_punct(literal)
        if token is None:
            raise self.line_error(f"'{literal}'")
        return token

    def expect_name(self, what: str = "identifier") -> Token:
        token = self._require_lexer().read_name()
        if token is None:
            raise self.line_error(what)
        return token

    def expect_string(self, what: str = "string") -> Token:
        token = self._require_lexer().read_string()
        if token is None:
            raise self.line_error(what)
        return token

    def last_token(self) -> Token:
        """Most recent token consumed from the current line."""
        lexer = self._require_lexer()
        if lexer.last is None:
            raise RuntimeError("No token consumed on this line")
        return lexer.last

    # ------------------------------------------------------------------
    # Spans
    # ------------------------------------------------------------------

    def span_of(self, first: Token | ir.SourceSpan, last: Token | ir.SourceSpan) -> ir.SourceSpan:
        """Span from the start of ``first`` to the end of ``last``."""
        return self._as_span(first).cover(self._as_span(last))

    def _as_span(self, item: Token | ir.SourceSpan) -> ir.SourceSpan:
        if isinstance(item, ir.SourceSpan):
            return item
        return ir.SourceSpan(
            start=item.start,
            end=item.end,
            line=item.line,
            column=item.column,
            end_line=item.line,
            end_column=item.end_column,
        )

    # ------------------------------------------------------------------
    # Shared sub-rules
    # ------------------------------------------------------------------

    def string_literal(self, token: Token) -> ir.StringLiteral:
        raw = token.raw or ""
        return ir.StringLiteral(
            value=token.value,
            quote=raw[:1] or '"',
            raw=raw,
            span=self._as_span(token),
        )

    def parse_label_name(self) -> ir.LabelName:
        """
        Parse a label name: ``name``, ``.name`` or ``scope.name``.
        """
        lexer = self._require_lexer()

        dot = lexer.read_punct(".")
        if dot is not None:
            name = self.expect_name("label name")
            return ir.LabelName(name=name.value, is_local=True, span=self.span_of(dot, name))

        first = self.expect_name("label name")
        # The qualifying dot must follow the scope name directly
        if lexer.current_char() == ".":
            lexer.read_punct(".")
            name = self.expect_name("label name")
            return ir.LabelName(scope=first.value, name=name.value, span=self.span_of(first, name))

        return ir.LabelName(name=first.value, span=self._as_span(first))

    def parse_dotted_name(self, what: str = "name") -> tuple[str, ir.SourceSpan]:
        """Parse ``name`` or ``store.name.attr``."""
        lexer = self._require_lexer()
        first = self.expect_name(what)
        last = first
        parts = [first.value]
        while lexer.current_char() == "." and NAME_RE.match(lexer.text, lexer.pos + 1):
            lexer.read_punct(".")
            last = self.expect_name(what)
            parts.append(last.value)
        return ".".join(parts), self.span_of(first, last)

    def parse_simple_expr(self) -> ir.Expression | None:
        """
        Parse a simple expression: name, string, number, bracket group,
        or a call such as ``Dissolve(0.5)``.

        Returns:
            Expression, or None if nothing expression-like is at the cursor
        """
        lexer = self._require_lexer()

        token = lexer.read_string()
        if token is not None:
            return ir.Expression(
                text=token.raw or "", kind=ir.ExpressionKind.STRING, span=self._as_span(token)
            )

        token = lexer.read_group()
        if token is not None:
            return ir.Expression(
                text=token.value, kind=ir.ExpressionKind.GROUP, span=self._as_span(token)
            )

        token = lexer.read_number()
        if token is not None:
            return ir.Expression(
                text=token.value, kind=ir.ExpressionKind.NUMBER, span=self._as_span(token)
            )

        first = lexer.read_name()
        if first is None:
            return None

        last = first
        while lexer.current_char() == "." and NAME_RE.match(lexer.text, lexer.pos + 1):
            lexer.read_punct(".")
            last = self.expect_name()

        kind = ir.ExpressionKind.NAME
        # A group directly after the name makes it a call
        group = lexer.read_group() if lexer.current_char() in CLOSERS else None
        if group is not None:
            last = group
            kind = ir.ExpressionKind.CALL

        text = lexer.text[first.start - lexer.offset : last.end - lexer.offset]
        return ir.Expression(text=text, kind=kind, span=self.span_of(first, last))

    def expect_simple_expr(self, what: str = "expression") -> ir.Expression:
        expr = self.parse_simple_expr()
        if expr is None:
            raise self.line_error(what)
        return expr

    def parse_python_rest(self) -> ir.Expression | None:
        """Parse a Python fragment running to the structural colon or end of line."""
        token = self._require_lexer().read_rest()
        if token is None:
            return None
        return ir.Expression(
            text=token.value, kind=ir.ExpressionKind.PYTHON, span=self._as_span(token)
        )

    def expect_python_rest(self, what: str = "expression") -> ir.Expression:
        expr = self.parse_python_rest()
        if expr is None:
            raise self.line_error(what)
        return expr
