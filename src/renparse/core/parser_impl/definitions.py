"""
Definition parsing for Ren'Py scripts.

Handles define, default and image statements. The right-hand side of
each is an opaque Python fragment.
"""

from typing import TYPE_CHECKING, Any

from .. import ir


class DefinitionParserMixin:
    """
    Mixin providing define/default/image parsing.

    Note: This mixin expects to be combined with BaseParser via multiple inheritance.
    """

    if TYPE_CHECKING:
        end_line: Any
        expect_keyword: Any
        expect_name: Any
        expect_punct: Any
        expect_python_rest: Any
        parse_dotted_name: Any
        span_of: Any
        _require_lexer: Any

    def parse_define(self) -> ir.DefineStatement:
        """
        Parse define statement.

        Syntax:
            define e = Character("Eileen")
            define config.rollback_enabled = False
        """
        keyword = self.expect_keyword("define")
        name, value = self._parse_assignment("define statement")
        return ir.DefineStatement(name=name, value=value, span=self.span_of(keyword, value.span))

    def parse_default(self) -> ir.DefaultStatement:
        keyword = self.expect_keyword("default")
        name, value = self._parse_assignment("default statement")
        return ir.DefaultStatement(name=name, value=value, span=self.span_of(keyword, value.span))

    def _parse_assignment(self, construct: str) -> tuple[str, ir.Expression]:
        """Parse ``name = value`` through to the end of the line."""
        name, _ = self.parse_dotted_name("variable name")
        self.expect_punct("=")
        value = self.expect_python_rest("value")
        self.end_line(construct)
        return name, value

    def parse_image(self) -> ir.ImageStatement:
        """
        Parse image definition.

        Syntax:
            image eileen happy = "eileen_happy.png"
        """
        keyword = self.expect_keyword("image")
        lexer = self._require_lexer()

        names = [self.expect_name("image name").value]
        while lexer.peek_name() is not None:
            names.append(self.expect_name("image name").value)

        self.expect_punct("=")
        value = self.expect_python_rest("value")
        self.end_line("image statement")
        return ir.ImageStatement(names=names, value=value, span=self.span_of(keyword, value.span))
