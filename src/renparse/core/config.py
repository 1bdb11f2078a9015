import logging
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .errors import ConfigError

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "renparse.toml"


@dataclass(frozen=True)
class ParserConfig:
    """Scanner and parser settings."""

    tab_width: int = 4  # A tab advances to the next multiple of this width
    allow_mixed_indentation: bool = False


@dataclass(frozen=True)
class ProjectConfig:
    """Where script files live, relative to the config file."""

    paths: list[str] = field(default_factory=lambda: ["game/"])
    extensions: list[str] = field(default_factory=lambda: [".rpy"])


@dataclass(frozen=True)
class RenparseConfig:
    """Top-level renparse.toml contents.

    Example renparse.toml:

        [parser]
        tab_width = 4
        allow_mixed_indentation = false

        [project]
        paths = ["game/"]
        extensions = [".rpy"]
    """

    parser: ParserConfig = field(default_factory=ParserConfig)
    project: ProjectConfig = field(default_factory=ProjectConfig)
    root: Path = field(default_factory=Path.cwd)


def load_config(path: Path) -> RenparseConfig:
    """Load renparse.toml, falling back to defaults when the file is absent."""
    if not path.exists():
        logger.debug("No config at %s, using defaults", path)
        return RenparseConfig(root=path.parent)

    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    parser_data = data.get("parser", {})
    project_data = data.get("project", {})

    tab_width = _get_typed(parser_data, "tab_width", int, 4, path)
    if tab_width < 1:
        raise ConfigError(f"{path}: parser.tab_width must be at least 1, got {tab_width}")

    parser_config = ParserConfig(
        tab_width=tab_width,
        allow_mixed_indentation=_get_typed(
            parser_data, "allow_mixed_indentation", bool, False, path
        ),
    )

    project_config = ProjectConfig(
        paths=_get_str_list(project_data, "paths", ["game/"], path),
        extensions=_get_str_list(project_data, "extensions", [".rpy"], path),
    )

    return RenparseConfig(parser=parser_config, project=project_config, root=path.parent)


def _get_typed(section: dict[str, Any], key: str, kind: type, default: Any, path: Path) -> Any:
    value = section.get(key, default)
    # bool is a subclass of int; reject it where an int is required
    if not isinstance(value, kind) or (kind is int and isinstance(value, bool)):
        raise ConfigError(f"{path}: '{key}' must be {kind.__name__}, got {value!r}")
    return value


def _get_str_list(section: dict[str, Any], key: str, default: list[str], path: Path) -> list[str]:
    value = section.get(key, default)
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ConfigError(f"{path}: '{key}' must be a list of strings, got {value!r}")
    return list(value)
