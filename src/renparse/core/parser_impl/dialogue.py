"""
Dialogue parsing for Ren'Py scripts.

Handles say statements: narration (a bare string) and dialogue
(speaker, optional image attributes, optional ``@`` temporary
attributes, then the string).
"""

from typing import TYPE_CHECKING, Any

from .. import ir
from ..lexer import LineLexer


class SayParserMixin:
    """
    Mixin providing say statement parsing.

    Note: This mixin expects to be combined with BaseParser via multiple inheritance.
    """

    if TYPE_CHECKING:
        span_of: Any
        string_literal: Any
        _as_span: Any

    def try_parse_say(self, lexer: LineLexer) -> ir.SayStatement | None:
        """
        Parse the whole line as a say statement if it has that shape.

        The speaker position outranks every statement keyword: a line like
        ``show "Hi"`` is the character ``show`` saying "Hi". If the line is
        not say-shaped the lexer is reset and None is returned.
        """
        mark = lexer.mark()

        what = lexer.read_string()
        if what is not None:
            if lexer.at_end():
                narration = ir.Narration(what=self.string_literal(what), span=self._as_span(what))
                return ir.SayStatement(content=narration, span=narration.span)
            lexer.reset(mark)
            return None

        who = lexer.read_name()
        if who is None:
            return None

        attributes = self._read_say_attributes(lexer)
        temporary: list[ir.SayAttribute] = []
        at_mark = lexer.mark()
        if lexer.read_punct("@") is not None:
            temporary = self._read_say_attributes(lexer)
            if not temporary:
                lexer.reset(at_mark)

        what = lexer.read_string()
        if what is None or not lexer.at_end():
            lexer.reset(mark)
            return None

        span = self.span_of(who, what)
        dialogue = ir.Dialogue(
            who=who.value,
            attributes=attributes,
            temporary_attributes=temporary,
            what=self.string_literal(what),
            span=span,
        )
        return ir.SayStatement(content=dialogue, span=span)

    def _read_say_attributes(self, lexer: LineLexer) -> list[ir.SayAttribute]:
        """Read zero or more ``name`` / ``-name`` attributes."""
        attributes = []
        while True:
            mark = lexer.mark()
            minus = lexer.read_punct("-")
            name = lexer.read_name()
            if name is None:
                lexer.reset(mark)
                return attributes
            first = minus if minus is not None else name
            attributes.append(
                ir.SayAttribute(
                    name=name.value,
                    negated=minus is not None,
                    span=self.span_of(first, name),
                )
            )
