"""
Scene direction parsing for Ren'Py scripts.

Handles show, hide, scene and with statements, the image specification
they share, and the trailing ``with`` transition clause.
"""

from typing import TYPE_CHECKING, Any

from .. import ir
from ..tokens import Token

# Words that end an image name and start a clause
MODIFIER_KEYWORDS = frozenset(kind.value for kind in ir.ModifierKind)
IMAGE_NAME_STOP_WORDS = MODIFIER_KEYWORDS | {"with"}


class ImageParserMixin:
    """
    Mixin providing scene direction parsing.

    Note: This mixin expects to be combined with BaseParser via multiple inheritance.
    """

    if TYPE_CHECKING:
        end_line: Any
        line_error: Any
        expect_keyword: Any
        expect_name: Any
        expect_simple_expr: Any
        last_token: Any
        span_of: Any
        _require_lexer: Any

    def parse_show(self) -> ir.ShowStatement:
        """
        Parse show statement.

        Syntax:
            show eileen happy at left with dissolve
        """
        keyword = self.expect_keyword("show")
        image = self.parse_image_spec()
        transition = self.parse_with_clause()
        end = self.last_token()
        self.end_line("show statement")
        return ir.ShowStatement(
            image=image,
            transition=transition,
            span=self.span_of(keyword, end),
        )

    def parse_hide(self) -> ir.HideStatement:
        keyword = self.expect_keyword("hide")
        image = self.parse_image_spec()
        transition = self.parse_with_clause()
        end = self.last_token()
        self.end_line("hide statement")
        return ir.HideStatement(
            image=image,
            transition=transition,
            span=self.span_of(keyword, end),
        )

    def parse_scene(self) -> ir.SceneStatement:
        """
        Parse scene statement; the image is optional.

        Syntax:
            scene
            scene bg room
            scene with fade
        """
        keyword = self.expect_keyword("scene")
        lexer = self._require_lexer()

        image = None
        if not lexer.at_end() and lexer.peek_name() != "with":
            image = self.parse_image_spec()

        transition = self.parse_with_clause()
        end = self.last_token()
        self.end_line("scene statement")
        return ir.SceneStatement(
            image=image,
            transition=transition,
            span=self.span_of(keyword, end),
        )

    def parse_with(self) -> ir.WithStatement:
        keyword = self.expect_keyword("with")
        transition = self.expect_simple_expr("transition")
        self.end_line("with statement")
        return ir.WithStatement(
            transition=transition, span=self.span_of(keyword, transition.span)
        )

    def parse_with_clause(self) -> ir.Expression | None:
        """Parse an optional trailing ``with transition``."""
        if self._require_lexer().read_keyword("with") is None:
            return None
        return self.expect_simple_expr("transition")

    def parse_image_spec(self) -> ir.ImageSpec:
        """
        Parse image name components followed by modifier clauses.

        Modifiers may appear in any order and may repeat; they are kept in
        source order.
        """
        first = self._read_image_word()
        if first is None:
            raise self.line_error("image name")

        names = [first.value]
        last: Token | ir.SourceSpan = first
        word = self._read_image_word()
        while word is not None:
            names.append(word.value)
            last = word
            word = self._read_image_word()

        modifiers: list[ir.ImageModifier] = []
        modifier = self._parse_image_modifier()
        while modifier is not None:
            modifiers.append(modifier)
            last = modifier.span
            modifier = self._parse_image_modifier()

        return ir.ImageSpec(names=names, modifiers=modifiers, span=self.span_of(first, last))

    def _read_image_word(self) -> Token | None:
        """Read a NAME that is not a clause keyword, or return None."""
        lexer = self._require_lexer()
        name = lexer.peek_name()
        if name is None or name in IMAGE_NAME_STOP_WORDS:
            return None
        return lexer.read_name()

    def _parse_image_modifier(self) -> ir.ImageModifier | None:
        """Parse one modifier clause, or return None if none starts here."""
        lexer = self._require_lexer()
        keyword = lexer.peek_name()

        if keyword == "at":
            start = self.expect_keyword("at")
            transform = self.expect_simple_expr("transform")
            return ir.AtClause(transform=transform, span=self.span_of(start, transform.span))

        elif keyword == "onlayer":
            start = self.expect_keyword("onlayer")
            layer = self.expect_name("layer name")
            return ir.OnlayerClause(layer=layer.value, span=self.span_of(start, layer))

        elif keyword == "as":
            start = self.expect_keyword("as")
            tag = self.expect_name("image tag")
            return ir.AsClause(tag=tag.value, span=self.span_of(start, tag))

        elif keyword == "zorder":
            start = self.expect_keyword("zorder")
            order = self.expect_simple_expr("zorder expression")
            return ir.ZorderClause(order=order, span=self.span_of(start, order.span))

        elif keyword == "behind":
            start = self.expect_keyword("behind")
            first = self._read_image_word()
            if first is None:
                raise self.line_error("image tag")
            tags = [first.value]
            last = first
            word = self._read_image_word()
            while word is not None:
                tags.append(word.value)
                last = word
                word = self._read_image_word()
            return ir.BehindClause(tags=tags, span=self.span_of(start, last))

        return None
