import codecs
import logging
from pathlib import Path

from . import ir
from .config import ParserConfig
from .errors import ErrorReason, LexError, ParseError, make_parse_error
from .parser_impl import parse_script

logger = logging.getLogger(__name__)


def parse_source(
    text: str, file: Path | None = None, config: ParserConfig | None = None
) -> ir.SourceFile:
    """
    Parse script text into a syntax tree.

    Args:
        text: Script source text
        file: Source file path, used only for error reporting
        config: Scanner and parser settings (defaults when omitted)

    Returns:
        SourceFile syntax tree

    Raises:
        ParseError: On the first lexical, indentation or grammar error
    """
    return parse_script(text, file, config)


def parse_bytes(
    data: bytes, file: Path | None = None, config: ParserConfig | None = None
) -> ir.SourceFile:
    """
    Decode UTF-8 script bytes and parse them.

    A leading byte order mark is ignored.

    Raises:
        LexError: If the bytes are not valid UTF-8
    """
    if data.startswith(codecs.BOM_UTF8):
        data = data[len(codecs.BOM_UTF8) :]

    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise _encoding_error(data, e, file) from e

    return parse_script(text, file, config)


def parse_file(path: Path, config: ParserConfig | None = None) -> ir.SourceFile:
    """
    Read and parse one script file.

    Args:
        path: Path to a .rpy file
        config: Scanner and parser settings

    Returns:
        SourceFile syntax tree with ``file`` set to the path
    """
    logger.debug("Parsing %s", path)
    return parse_bytes(path.read_bytes(), path, config)


def _encoding_error(data: bytes, error: UnicodeDecodeError, file: Path | None) -> ParseError:
    """Locate an undecodable byte by line and column of the decodable prefix."""
    prefix = data[: error.start].decode("utf-8", errors="replace")
    line = prefix.count("\n") + 1
    column = len(prefix) - (prefix.rfind("\n") + 1) + 1
    return make_parse_error(
        f"Invalid UTF-8 byte 0x{data[error.start]:02x}",
        file,
        line,
        column,
        error_class=LexError,
        reason=ErrorReason.INVALID_ENCODING,
        offset=len(prefix),
    )
