"""
Statement and block types for the Ren'Py syntax tree.

Every statement carries a ``kind`` tag (a StatementKind) used as the
pydantic discriminator, a source span, and its children by value.
Compound statements (label, if, while, menu) own nested Blocks.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Annotated, Literal

from pydantic import Field

from .expressions import Expression, LabelName, StringLiteral
from .images import ImageSpec
from .location import Node


class StatementKind(StrEnum):
    """Statement kinds."""

    LABEL = "label"
    SAY = "say"
    SHOW = "show"
    HIDE = "hide"
    SCENE = "scene"
    WITH = "with"
    IF = "if"
    WHILE = "while"
    MENU = "menu"
    JUMP = "jump"
    CALL = "call"
    RETURN = "return"
    PASS = "pass"
    DEFINE = "define"
    DEFAULT = "default"
    IMAGE = "image"


COMPOUND_KINDS = frozenset(
    {StatementKind.LABEL, StatementKind.IF, StatementKind.WHILE, StatementKind.MENU}
)


class Block(Node):
    """Non-empty sequence of statements opened by INDENT and closed by DEDENT."""

    statements: list[Statement] = Field(min_length=1)


# =============================================================================
# Dialogue
# =============================================================================


class SayAttribute(Node):
    """Image attribute on a dialogue line; ``-happy`` removes the attribute."""

    name: str
    negated: bool = False

    def __str__(self) -> str:
        return f"-{self.name}" if self.negated else self.name


class Dialogue(Node):
    """
    A character speaking: ``e happy @ vhappy "Hello!"``.

    Attributes:
        who: Speaker identifier (usually a Character defined elsewhere)
        attributes: Attributes applied to the speaker's image
        temporary_attributes: Attributes after ``@``, applied for this line only
        what: The line spoken
    """

    kind: Literal["dialogue"] = "dialogue"
    who: str
    attributes: list[SayAttribute] = Field(default_factory=list)
    temporary_attributes: list[SayAttribute] = Field(default_factory=list)
    what: StringLiteral


class Narration(Node):
    """A line with no speaker: ``"It was a dark and stormy night."``."""

    kind: Literal["narration"] = "narration"
    what: StringLiteral


class SayStatement(Node):
    kind: Literal[StatementKind.SAY] = StatementKind.SAY
    content: Annotated[Dialogue | Narration, Field(discriminator="kind")]

    @property
    def who(self) -> str | None:
        """Speaker, or None for narration."""
        return self.content.who if isinstance(self.content, Dialogue) else None

    @property
    def what(self) -> str:
        return self.content.what.value


# =============================================================================
# Scene direction
# =============================================================================


class ShowStatement(Node):
    kind: Literal[StatementKind.SHOW] = StatementKind.SHOW
    image: ImageSpec
    transition: Expression | None = None


class HideStatement(Node):
    kind: Literal[StatementKind.HIDE] = StatementKind.HIDE
    image: ImageSpec
    transition: Expression | None = None


class SceneStatement(Node):
    """``scene`` clears a layer; the image is optional."""

    kind: Literal[StatementKind.SCENE] = StatementKind.SCENE
    image: ImageSpec | None = None
    transition: Expression | None = None


class WithStatement(Node):
    kind: Literal[StatementKind.WITH] = StatementKind.WITH
    transition: Expression


# =============================================================================
# Control flow
# =============================================================================


class LabelStatement(Node):
    kind: Literal[StatementKind.LABEL] = StatementKind.LABEL
    name: LabelName
    block: Block


class ElifClause(Node):
    condition: Expression
    block: Block


class IfStatement(Node):
    """
    Conditional with optional elif chain and else block.

    The condition fragments are verbatim Python, e.g. ``x == 1``.
    """

    kind: Literal[StatementKind.IF] = StatementKind.IF
    condition: Expression
    block: Block
    elifs: list[ElifClause] = Field(default_factory=list)
    else_block: Block | None = None


class WhileStatement(Node):
    kind: Literal[StatementKind.WHILE] = StatementKind.WHILE
    condition: Expression
    block: Block


class MenuChoice(Node):
    """
    One menu option: ``"Go left" if has_map:`` followed by a block.

    Attributes:
        text: Caption shown to the player
        condition: Optional Python condition controlling availability
        block: Statements run when the choice is picked
    """

    text: StringLiteral
    condition: Expression | None = None
    block: Block


class MenuStatement(Node):
    """
    Player choice menu.

    Attributes:
        name: Optional label name making the menu a jump target
        caption: Optional say statement shown with the menu
        choices: One or more choices
    """

    kind: Literal[StatementKind.MENU] = StatementKind.MENU
    name: LabelName | None = None
    caption: SayStatement | None = None
    choices: list[MenuChoice] = Field(min_length=1)


class JumpStatement(Node):
    kind: Literal[StatementKind.JUMP] = StatementKind.JUMP
    target: LabelName


class CallStatement(Node):
    """``call target [from return_site]``."""

    kind: Literal[StatementKind.CALL] = StatementKind.CALL
    target: LabelName
    from_label: LabelName | None = None


class ReturnStatement(Node):
    kind: Literal[StatementKind.RETURN] = StatementKind.RETURN
    value: Expression | None = None


class PassStatement(Node):
    kind: Literal[StatementKind.PASS] = StatementKind.PASS


# =============================================================================
# Definitions
# =============================================================================


class DefineStatement(Node):
    """``define name = expr``; name may be dotted (``config.rollback_enabled``)."""

    kind: Literal[StatementKind.DEFINE] = StatementKind.DEFINE
    name: str
    value: Expression


class DefaultStatement(Node):
    """``default name = expr``; like define but saved with the game state."""

    kind: Literal[StatementKind.DEFAULT] = StatementKind.DEFAULT
    name: str
    value: Expression


class ImageStatement(Node):
    """``image eileen happy = "eileen_happy.png"``."""

    kind: Literal[StatementKind.IMAGE] = StatementKind.IMAGE
    names: list[str] = Field(min_length=1)
    value: Expression


# =============================================================================
# Union type and root
# =============================================================================

Statement = Annotated[
    LabelStatement
    | SayStatement
    | ShowStatement
    | HideStatement
    | SceneStatement
    | WithStatement
    | IfStatement
    | WhileStatement
    | MenuStatement
    | JumpStatement
    | CallStatement
    | ReturnStatement
    | PassStatement
    | DefineStatement
    | DefaultStatement
    | ImageStatement,
    Field(discriminator="kind"),
]


class SourceFile(Node):
    """Root of the tree for one script file."""

    statements: list[Statement] = Field(min_length=1)
    file: str | None = None


# Rebuild models for recursive forward references
Block.model_rebuild()
LabelStatement.model_rebuild()
ElifClause.model_rebuild()
IfStatement.model_rebuild()
WhileStatement.model_rebuild()
MenuChoice.model_rebuild()
MenuStatement.model_rebuild()
SourceFile.model_rebuild()
