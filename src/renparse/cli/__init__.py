"""
renparse CLI Package.

- commands.py: parse, check and tokens commands
- render.py: rich tree rendering of syntax trees
"""

import logging
import os
import platform

import typer

from renparse._version import get_version
from renparse.cli.commands import check_command, parse_command, tokens_command

__version__ = get_version()


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        typer.echo(f"renparse {__version__}")
        typer.echo(f"Python {platform.python_version()} ({platform.python_implementation()})")
        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    """Log to stderr; --verbose wins over the LOG_LEVEL environment variable."""
    if verbose:
        level = logging.DEBUG
    else:
        log_level = os.getenv("LOG_LEVEL", "WARNING").upper()
        level = getattr(logging, log_level, logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logging.getLogger("renparse").setLevel(level)


app = typer.Typer(
    help="""renparse – parser for Ren'Py visual-novel scripts

Commands:
  • parse   Print the syntax tree of one script
  • check   Parse every script in a project and report errors
  • tokens  Print the indentation token stream of one script
""",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and environment information",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """renparse CLI main callback for global options."""
    configure_logging(verbose)


app.command(name="parse")(parse_command)
app.command(name="check")(check_command)
app.command(name="tokens")(tokens_command)


def main(argv: list[str] | None = None) -> None:
    app(args=argv, standalone_mode=True)


__all__ = [
    "__version__",
    "app",
    "main",
    "version_callback",
    "configure_logging",
]
