"""
Statement dispatch and block parsing for Ren'Py scripts.

A block is ``INDENT statement* end_statement DEDENT``. Simple statements
in the middle of a block are followed by NEWLINE; the last one is
followed directly by the block's DEDENT. Compound statements (label,
if, while, menu) close with their own DEDENT and need no separator.
"""

from typing import TYPE_CHECKING, Any

from .. import ir
from ..tokens import TokenType


class StatementParserMixin:
    """
    Mixin providing statement dispatch and block parsing.

    Note: This mixin expects to be combined with BaseParser via multiple inheritance.
    """

    if TYPE_CHECKING:
        begin_line: Any
        end_line: Any
        line_error: Any
        expect: Any
        match: Any
        span_of: Any
        try_parse_say: Any
        parse_label: Any
        parse_if: Any
        parse_while: Any
        parse_menu: Any
        parse_jump: Any
        parse_call: Any
        parse_return: Any
        parse_pass: Any
        parse_show: Any
        parse_hide: Any
        parse_scene: Any
        parse_with: Any
        parse_define: Any
        parse_default: Any
        parse_image: Any

    def parse_statement(self) -> ir.Statement:
        """
        Parse one statement starting at the next TEXT line.

        Dialogue is tried first, so a statement keyword in speaker
        position is read as a character name.
        """
        lexer = self.begin_line()

        say = self.try_parse_say(lexer)
        if say is not None:
            self.end_line("say statement")
            return say

        keyword = lexer.peek_name()

        if keyword == "label":
            return self.parse_label()
        elif keyword == "if":
            return self.parse_if()
        elif keyword == "while":
            return self.parse_while()
        elif keyword == "menu":
            return self.parse_menu()
        elif keyword == "jump":
            return self.parse_jump()
        elif keyword == "call":
            return self.parse_call()
        elif keyword == "return":
            return self.parse_return()
        elif keyword == "pass":
            return self.parse_pass()
        elif keyword == "show":
            return self.parse_show()
        elif keyword == "hide":
            return self.parse_hide()
        elif keyword == "scene":
            return self.parse_scene()
        elif keyword == "with":
            return self.parse_with()
        elif keyword == "define":
            return self.parse_define()
        elif keyword == "default":
            return self.parse_default()
        elif keyword == "image":
            return self.parse_image()

        raise self.line_error("a statement")

    def finish_statement(self, statement: ir.Statement, closer: TokenType) -> bool:
        """
        Consume the separator that follows a statement.

        Args:
            statement: The statement just parsed
            closer: Token that ends the enclosing sequence (DEDENT or EOF)

        Returns:
            True if the statement was the last one before ``closer``
        """
        if self.match(closer):
            return True
        if statement.kind in ir.COMPOUND_KINDS:
            return False
        self.expect(TokenType.NEWLINE)
        return False

    def parse_block(self) -> ir.Block:
        """
        Parse an indented block.

        Returns:
            Block with at least one statement
        """
        self.expect(TokenType.INDENT)

        statements: list[ir.Statement] = []
        while True:
            statement = self.parse_statement()
            statements.append(statement)
            if self.finish_statement(statement, TokenType.DEDENT):
                break

        self.expect(TokenType.DEDENT)

        return ir.Block(
            statements=statements,
            span=self.span_of(statements[0].span, statements[-1].span),
        )
