"""
renparse - Parser for Ren'Py visual-novel scripts.

Turns indentation-structured scripts (dialogue, scene direction,
menus, labels and jumps) into an immutable concrete syntax tree.
"""

from ._version import get_version
from .core import ir
from .core.config import ParserConfig, RenparseConfig, load_config
from .core.errors import (
    ConfigError,
    ErrorContext,
    ErrorReason,
    GrammarError,
    IndentError,
    LexError,
    ParseError,
    RenparseError,
    UnexpectedEofError,
)
from .core.ir import walk
from .core.parser import parse_bytes, parse_file, parse_source
from .core.scanner import tokenize
from .core.tokens import Token, TokenType

__version__ = get_version()

__all__ = [
    "__version__",
    "ir",
    "parse_source",
    "parse_bytes",
    "parse_file",
    "tokenize",
    "walk",
    "Token",
    "TokenType",
    "ParserConfig",
    "RenparseConfig",
    "load_config",
    "RenparseError",
    "ParseError",
    "LexError",
    "IndentError",
    "GrammarError",
    "UnexpectedEofError",
    "ConfigError",
    "ErrorContext",
    "ErrorReason",
]
