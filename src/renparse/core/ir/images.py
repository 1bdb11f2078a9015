"""
Image specification types for show, hide and scene statements.

An image spec is an image name (one or more components, e.g.
``eileen happy``) followed by any number of placement modifiers in any
order. Duplicate modifiers are kept in source order; deciding which one
wins is left to downstream tools.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Annotated, Literal

from pydantic import Field

from .expressions import Expression
from .location import Node


class ModifierKind(StrEnum):
    """Image modifier clauses."""

    AT = "at"
    ONLAYER = "onlayer"
    AS = "as"
    ZORDER = "zorder"
    BEHIND = "behind"


class AtClause(Node):
    """``at`` transform, e.g. ``at left`` or ``at Position(xpos=0.5)``."""

    kind: Literal[ModifierKind.AT] = ModifierKind.AT
    transform: Expression


class OnlayerClause(Node):
    """``onlayer`` layer name."""

    kind: Literal[ModifierKind.ONLAYER] = ModifierKind.ONLAYER
    layer: str


class AsClause(Node):
    """``as`` tag override."""

    kind: Literal[ModifierKind.AS] = ModifierKind.AS
    tag: str


class ZorderClause(Node):
    """``zorder`` stacking order expression."""

    kind: Literal[ModifierKind.ZORDER] = ModifierKind.ZORDER
    order: Expression


class BehindClause(Node):
    """``behind`` one or more image tags."""

    kind: Literal[ModifierKind.BEHIND] = ModifierKind.BEHIND
    tags: list[str] = Field(min_length=1)


ImageModifier = Annotated[
    AtClause | OnlayerClause | AsClause | ZorderClause | BehindClause,
    Field(discriminator="kind"),
]


class ImageSpec(Node):
    """
    Image name plus modifiers.

    Examples:
        - ``eileen happy``                 names=["eileen", "happy"]
        - ``eileen happy at left``         modifiers=[AtClause(left)]
        - ``bg room onlayer master zorder 1``
    """

    names: list[str] = Field(min_length=1, description="Image name components")
    modifiers: list[ImageModifier] = Field(default_factory=list)

    @property
    def tag(self) -> str:
        """Image tag: the first name component."""
        return self.names[0]

    @property
    def name(self) -> str:
        """Image name as written, components joined by spaces."""
        return " ".join(self.names)

    def modifiers_of(self, kind: ModifierKind) -> list[ImageModifier]:
        """All modifiers of one kind, in source order."""
        return [m for m in self.modifiers if m.kind == kind]
