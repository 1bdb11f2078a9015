"""
renparse syntax tree types.

Types are organized into submodules; everything is re-exported here.
"""

from .expressions import (
    Expression,
    ExpressionKind,
    LabelName,
    StringLiteral,
)
from .images import (
    AsClause,
    AtClause,
    BehindClause,
    ImageModifier,
    ImageSpec,
    ModifierKind,
    OnlayerClause,
    ZorderClause,
)
from .location import Node, SourceSpan
from .statements import (
    COMPOUND_KINDS,
    Block,
    CallStatement,
    DefaultStatement,
    DefineStatement,
    Dialogue,
    ElifClause,
    HideStatement,
    IfStatement,
    ImageStatement,
    JumpStatement,
    LabelStatement,
    MenuChoice,
    MenuStatement,
    Narration,
    PassStatement,
    ReturnStatement,
    SayAttribute,
    SayStatement,
    SceneStatement,
    ShowStatement,
    SourceFile,
    Statement,
    StatementKind,
    WhileStatement,
    WithStatement,
)
from .traversal import child_blocks, walk

__all__ = [
    # Location
    "Node",
    "SourceSpan",
    # Expressions
    "Expression",
    "ExpressionKind",
    "LabelName",
    "StringLiteral",
    # Images
    "AsClause",
    "AtClause",
    "BehindClause",
    "ImageModifier",
    "ImageSpec",
    "ModifierKind",
    "OnlayerClause",
    "ZorderClause",
    # Statements
    "COMPOUND_KINDS",
    "Block",
    "CallStatement",
    "DefaultStatement",
    "DefineStatement",
    "Dialogue",
    "ElifClause",
    "HideStatement",
    "IfStatement",
    "ImageStatement",
    "JumpStatement",
    "LabelStatement",
    "MenuChoice",
    "MenuStatement",
    "Narration",
    "PassStatement",
    "ReturnStatement",
    "SayAttribute",
    "SayStatement",
    "SceneStatement",
    "ShowStatement",
    "SourceFile",
    "Statement",
    "StatementKind",
    "WhileStatement",
    "WithStatement",
    # Traversal
    "child_blocks",
    "walk",
]
