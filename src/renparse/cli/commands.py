"""
Script commands for the renparse CLI: parse, check, tokens.
"""

import json
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table
from rich.text import Text

from renparse.cli.render import build_tree
from renparse.core.config import CONFIG_FILENAME, ProjectConfig, RenparseConfig, load_config
from renparse.core.errors import ConfigError, ParseError
from renparse.core.fileset import discover_script_files
from renparse.core.parser import parse_file
from renparse.core.scanner import IndentScanner
from renparse.core.tokens import TokenType

console = Console()

PARSE_FORMATS = ("tree", "json")
CHECK_FORMATS = ("human", "vscode")


def _load_config_or_exit(config: str) -> RenparseConfig:
    try:
        return load_config(Path(config).resolve())
    except ConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)


def _require_format(format: str, allowed: tuple[str, ...]) -> None:
    if format not in allowed:
        typer.echo(
            f"Unknown format '{format}', expected one of: {', '.join(allowed)}", err=True
        )
        raise typer.Exit(code=2)


def _print_vscode_parse_error(error: ParseError, root: Path) -> None:
    """Print parse error in VS Code format with location info."""
    if error.context:
        file_path = error.context.file
        if file_path:
            try:
                rel_path = Path(file_path).relative_to(root)
            except ValueError:
                rel_path = Path(file_path)

            line = error.context.line or 1
            col = error.context.column or 1
            typer.echo(f"{rel_path}:{line}:{col}: error: {error.message}", err=True)
        else:
            typer.echo(f"::error: {error.message}", err=True)
    else:
        typer.echo(f"::error: {error.message}", err=True)


def parse_command(
    file: Path = typer.Argument(..., help="Script file to parse"),
    format: str = typer.Option("tree", "--format", "-f", help="Output format: 'tree' or 'json'"),
    config: str = typer.Option(CONFIG_FILENAME, "--config", "-c", help="Path to renparse.toml"),
) -> None:
    """
    Parse one script and print its syntax tree.
    """
    _require_format(format, PARSE_FORMATS)
    cfg = _load_config_or_exit(config)

    try:
        source_file = parse_file(file, cfg.parser)
    except ParseError as e:
        typer.echo(f"Parse error: {e}", err=True)
        raise typer.Exit(code=1)
    except OSError as e:
        typer.echo(f"Error: cannot read {file}: {e}", err=True)
        raise typer.Exit(code=1)

    if format == "json":
        typer.echo(json.dumps(source_file.model_dump(mode="json"), indent=2))
    else:
        console.print(build_tree(source_file))


def check_command(
    paths: list[Path] | None = typer.Argument(
        None, help="Files or directories to check (default: project paths from config)"
    ),
    config: str = typer.Option(CONFIG_FILENAME, "--config", "-c", help="Path to renparse.toml"),
    format: str = typer.Option(
        "human", "--format", "-f", help="Output format: 'human' or 'vscode'"
    ),
) -> None:
    """
    Parse every script and report the first error in each file.

    Without PATHS, scripts are discovered under the [project] paths of
    renparse.toml (or game/ when there is no config file).
    """
    _require_format(format, CHECK_FORMATS)
    cfg = _load_config_or_exit(config)
    root = cfg.root

    files: list[Path] = []
    if paths:
        for path in paths:
            if path.is_dir():
                scoped = ProjectConfig(paths=["."], extensions=cfg.project.extensions)
                files.extend(discover_script_files(path, scoped))
            else:
                files.append(path.resolve())
    else:
        files = discover_script_files(root, cfg.project)

    if not files:
        typer.echo("No script files found", err=True)
        raise typer.Exit(code=1)

    failed = 0
    for f in files:
        try:
            parse_file(f, cfg.parser)
        except ParseError as e:
            failed += 1
            if format == "vscode":
                _print_vscode_parse_error(e, root)
            else:
                typer.echo(f"Parse error: {e}", err=True)
        except OSError as e:
            failed += 1
            typer.echo(f"Error: cannot read {f}: {e}", err=True)

    if format == "human":
        if failed:
            typer.echo(f"✗ {failed} of {len(files)} file(s) failed to parse")
        else:
            typer.echo(f"✓ {len(files)} file(s) parsed")

    if failed:
        raise typer.Exit(code=1)


def tokens_command(
    file: Path = typer.Argument(..., help="Script file to scan"),
    config: str = typer.Option(CONFIG_FILENAME, "--config", "-c", help="Path to renparse.toml"),
) -> None:
    """
    Print the structural token stream of a script.

    ERROR sentinels are listed in place rather than raised.
    """
    cfg = _load_config_or_exit(config)

    try:
        text = file.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as e:
        typer.echo(f"Error: cannot read {file}: {e}", err=True)
        raise typer.Exit(code=1)

    tokens = IndentScanner(text, file, cfg.parser).scan()

    table = Table(title=str(file))
    table.add_column("Position", justify="right")
    table.add_column("Type", style="cyan")
    table.add_column("Value")

    for token in tokens:
        style = "red" if token.type == TokenType.ERROR else None
        value = token.value if token.type in (TokenType.TEXT, TokenType.ERROR) else ""
        table.add_row(f"{token.line}:{token.column}", token.type.value, Text(value), style=style)

    console.print(table)
