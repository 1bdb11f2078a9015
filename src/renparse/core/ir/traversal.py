"""Depth-first traversal helpers for syntax trees."""

from __future__ import annotations

from collections.abc import Iterator

from .statements import (
    Block,
    IfStatement,
    LabelStatement,
    MenuStatement,
    SourceFile,
    Statement,
    WhileStatement,
)


def child_blocks(statement: Statement) -> list[Block]:
    """Blocks owned directly by a statement, in source order."""
    if isinstance(statement, LabelStatement | WhileStatement):
        return [statement.block]
    if isinstance(statement, IfStatement):
        blocks = [statement.block]
        blocks.extend(clause.block for clause in statement.elifs)
        if statement.else_block is not None:
            blocks.append(statement.else_block)
        return blocks
    if isinstance(statement, MenuStatement):
        return [choice.block for choice in statement.choices]
    return []


def walk(node: SourceFile | Block | Statement) -> Iterator[Statement]:
    """
    Yield every statement under ``node`` in source order, parents first.

    A menu's caption is yielded before its choices' statements.
    """
    if isinstance(node, SourceFile | Block):
        for statement in node.statements:
            yield from walk(statement)
        return

    yield node
    if isinstance(node, MenuStatement) and node.caption is not None:
        yield node.caption
    for block in child_blocks(node):
        yield from walk(block)
