"""
Leaf value nodes: embedded Python fragments, string literals, label names.

Python fragments are kept as verbatim source text. The parser only finds
where they start and end; interpreting them is left to a Python parser.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import Field

from .location import Node


class ExpressionKind(StrEnum):
    """How an expression fragment was delimited."""

    NAME = "name"  # Bare identifier: left, dissolve
    STRING = "string"  # Quoted literal, quotes kept in text
    NUMBER = "number"  # Numeric literal: 10, -1, 0.5
    GROUP = "group"  # Balanced (...), [...] or {...}
    CALL = "call"  # Identifier followed by a group: Dissolve(0.5)
    PYTHON = "python"  # Rest of line up to the structural colon


class Expression(Node):
    """
    Opaque Python expression fragment.

    Examples:
        - Expression(text="left", kind=NAME)
        - Expression(text="x == 1", kind=PYTHON)
        - Expression(text="Dissolve(0.5)", kind=CALL)
    """

    text: str = Field(description="Verbatim source text of the fragment")
    kind: ExpressionKind = Field(default=ExpressionKind.PYTHON)

    def __str__(self) -> str:
        return self.text


class StringLiteral(Node):
    """A quoted string with escapes resolved."""

    value: str = Field(description="String value with escapes resolved")
    quote: str = Field(default='"', description="Quote character used in the source")
    raw: str = Field(description="Verbatim literal, quotes included")

    def __str__(self) -> str:
        return self.value


class LabelName(Node):
    """
    Reference to or definition of a label.

    Forms:
        - ``start``          scope=None, name="start", is_local=False
        - ``.branch``        scope=None, name="branch", is_local=True
        - ``chapter1.branch`` scope="chapter1", name="branch", is_local=False
    """

    scope: str | None = None
    name: str
    is_local: bool = False

    def __str__(self) -> str:
        if self.scope:
            return f"{self.scope}.{self.name}"
        if self.is_local:
            return f".{self.name}"
        return self.name

    @property
    def is_qualified(self) -> bool:
        """True when written with an explicit scope."""
        return self.scope is not None
