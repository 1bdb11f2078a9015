"""Source span tracking for syntax tree nodes.

Records where a script construct starts and ends, enabling source-mapped
error messages and editor navigation.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class SourceSpan(BaseModel):
    """Region of the source text covered by a node.

    Attributes:
        start: Character offset of the first character
        end: Character offset one past the last character
        line: 1-indexed line of the first character
        column: 1-indexed column of the first character
        end_line: 1-indexed line of the last character
        end_column: Column one past the last character on end_line
    """

    start: int
    end: int
    line: int
    column: int
    end_line: int
    end_column: int

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"{self.line}:{self.column}-{self.end_line}:{self.end_column}"

    def cover(self, other: SourceSpan) -> SourceSpan:
        """Return the smallest span containing both spans."""
        first, last = (self, other) if self.start <= other.start else (other, self)
        tail = last if last.end >= first.end else first
        return SourceSpan(
            start=first.start,
            end=tail.end,
            line=first.line,
            column=first.column,
            end_line=tail.end_line,
            end_column=tail.end_column,
        )


class Node(BaseModel):
    """Base class for all syntax tree nodes."""

    span: SourceSpan

    model_config = ConfigDict(frozen=True)
