"""
Ren'Py script parser package.

This package provides a modular parser for Ren'Py scripts.
The parser is built using mixins to separate parsing logic by statement
family, making it easier to maintain and extend.

The main exports are:
- Parser: The complete parser class
- parse_script: Convenience function to tokenize and parse script text

Usage:
    from renparse.core.parser_impl import parse_script

    source_file = parse_script(text, file)
"""

import logging
from pathlib import Path

from .. import ir
from ..config import ParserConfig
from ..scanner import tokenize
from ..tokens import TokenType
from .base import BaseParser, ParserProtocol
from .control import ControlParserMixin
from .definitions import DefinitionParserMixin
from .dialogue import SayParserMixin
from .images import ImageParserMixin
from .menu import MenuParserMixin
from .statements import StatementParserMixin

logger = logging.getLogger(__name__)


class Parser(
    BaseParser,
    StatementParserMixin,
    SayParserMixin,
    ControlParserMixin,
    MenuParserMixin,
    ImageParserMixin,
    DefinitionParserMixin,
):
    """
    Complete Ren'Py script parser.

    This class composes all parser mixins to provide full script parsing.
    Each mixin provides parsing for one statement family:

    - StatementParserMixin: Statement dispatch and blocks
    - SayParserMixin: Dialogue and narration
    - ControlParserMixin: label, if/elif/else, while, jump, call, return, pass
    - MenuParserMixin: Menus and their choices
    - ImageParserMixin: show, hide, scene, with, and image specifications
    - DefinitionParserMixin: define, default, image definitions
    """

    def parse(self) -> ir.SourceFile:
        """
        Parse the entire token stream.

        Returns:
            SourceFile with all top-level statements

        Raises:
            UnexpectedEofError: If the script contains no statements
            GrammarError: If a line matches no statement form
            IndentError: If the scanner flagged the indentation
            LexError: If a line holds a malformed string or fragment
        """
        if self.match(TokenType.EOF):
            raise self.unexpected(self.current_token(), "at least one statement")

        statements: list[ir.Statement] = []
        while not self.match(TokenType.EOF):
            statement = self.parse_statement()
            statements.append(statement)
            self.finish_statement(statement, TokenType.EOF)

        logger.debug(
            "Parsed %d top-level statements from %s",
            len(statements),
            self.file or "<string>",
        )

        return ir.SourceFile(
            statements=statements,
            file=str(self.file) if self.file else None,
            span=self.span_of(statements[0].span, statements[-1].span),
        )


def parse_script(
    text: str, file: Path | None = None, config: ParserConfig | None = None
) -> ir.SourceFile:
    """
    Tokenize and parse script text.

    Args:
        text: Script source text
        file: Source file path (for error reporting)
        config: Scanner and parser settings

    Returns:
        SourceFile syntax tree
    """
    tokens = tokenize(text, file, config)
    parser = Parser(tokens, file, source=text, config=config)
    return parser.parse()


__all__ = [
    "Parser",
    "parse_script",
    "BaseParser",
    "ParserProtocol",
    "StatementParserMixin",
    "SayParserMixin",
    "ControlParserMixin",
    "MenuParserMixin",
    "ImageParserMixin",
    "DefinitionParserMixin",
]
