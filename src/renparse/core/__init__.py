"""Core renparse functionality: scanner, lexer, parser, syntax tree, configuration."""

from . import ir
from .config import ParserConfig, ProjectConfig, RenparseConfig, load_config
from .errors import (
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
from .fileset import discover_script_files
from .parser import parse_bytes, parse_file, parse_source
from .scanner import IndentScanner, tokenize
from .tokens import Token, TokenType

__all__ = [
    "ir",
    "RenparseError",
    "ParseError",
    "LexError",
    "IndentError",
    "GrammarError",
    "UnexpectedEofError",
    "ConfigError",
    "ErrorContext",
    "ErrorReason",
    "ParserConfig",
    "ProjectConfig",
    "RenparseConfig",
    "load_config",
    "discover_script_files",
    "parse_source",
    "parse_bytes",
    "parse_file",
    "IndentScanner",
    "tokenize",
    "Token",
    "TokenType",
]
