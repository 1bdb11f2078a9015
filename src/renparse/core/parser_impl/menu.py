"""
Menu parsing for Ren'Py scripts.

A menu body holds an optional say statement used as the caption,
followed by one or more choices. Each choice is a string, an optional
``if`` condition, a colon, and an indented block.
"""

from typing import TYPE_CHECKING, Any

from .. import ir
from ..tokens import TokenType


class MenuParserMixin:
    """
    Mixin providing menu parsing.

    Note: This mixin expects to be combined with BaseParser via multiple inheritance.
    """

    if TYPE_CHECKING:
        begin_line: Any
        end_line: Any
        peek_line: Any
        expect: Any
        match: Any
        current_token: Any
        unexpected: Any
        expect_keyword: Any
        expect_punct: Any
        expect_string: Any
        expect_python_rest: Any
        parse_label_name: Any
        parse_block: Any
        try_parse_say: Any
        string_literal: Any
        span_of: Any
        _require_lexer: Any

    def parse_menu(self) -> ir.MenuStatement:
        """
        Parse menu statement.

        Syntax:
            menu optional_name:
                "What should I do?"
                "Go left":
                    jump left
                "Go right" if has_map:
                    jump right
        """
        keyword = self.expect_keyword("menu")
        lexer = self._require_lexer()

        name = None
        if not lexer.peek_punct(":"):
            name = self.parse_label_name()
        self.expect_punct(":")
        self.end_line("menu statement")

        self.expect(TokenType.INDENT)

        caption = self._parse_menu_caption()

        choices: list[ir.MenuChoice] = []
        while True:
            choices.append(self.parse_menu_choice())
            if self.match(TokenType.DEDENT):
                break

        self.expect(TokenType.DEDENT)

        return ir.MenuStatement(
            name=name,
            caption=caption,
            choices=choices,
            span=self.span_of(keyword, choices[-1].span),
        )

    def _parse_menu_caption(self) -> ir.SayStatement | None:
        """Parse the say statement that may open a menu body."""
        peeked = self.peek_line()
        if peeked is None or self.try_parse_say(peeked) is None:
            return None

        caption = self.try_parse_say(self.begin_line())
        self.end_line("menu caption")

        # The caption is never the last line of the menu
        if self.match(TokenType.DEDENT):
            raise self.unexpected(self.current_token(), "a menu choice")
        self.expect(TokenType.NEWLINE)
        return caption

    def parse_menu_choice(self) -> ir.MenuChoice:
        """Parse ``"text" [if condition]:`` and the choice's block."""
        self.begin_line()
        text = self.expect_string("menu choice")

        condition = None
        if self._require_lexer().read_keyword("if") is not None:
            condition = self.expect_python_rest("condition")

        self.expect_punct(":")
        self.end_line("menu choice")

        block = self.parse_block()
        return ir.MenuChoice(
            text=self.string_literal(text),
            condition=condition,
            block=block,
            span=self.span_of(text, block.span),
        )
