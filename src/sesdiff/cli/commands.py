"""CLI command implementations"""

import logging
import os
import sys
from typing import Annotated, Optional

import typer
from pydantic import ValidationError

from sesdiff.config import Settings, load_config
from sesdiff.core.pipeline import run_diff


EXIT_SAME = 0
EXIT_DIFFERENT = 1
EXIT_TROUBLE = 2


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 2."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(EXIT_TROUBLE)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling."""
    try:
        return load_config(overrides=overrides)
    except ValidationError as e:
        fields = "; ".join(
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()
        )
        _fail(f"Invalid configuration ({fields})")
    except ValueError as e:
        _fail("Invalid configuration", e)


def _use_color(requested: Optional[bool]) -> bool:
    """Resolve the color setting; auto means a TTY on stdout and no NO_COLOR."""
    if requested is not None:
        return requested
    return sys.stdout.isatty() and "NO_COLOR" not in os.environ


def diff_cmd(
    old: Annotated[str, typer.Argument(help="Original file")],
    new: Annotated[str, typer.Argument(help="Changed file")],
    context: Annotated[Optional[int], typer.Option("-U", "--unified", help="Lines of unified context")] = None,
    gutter: Annotated[Optional[bool], typer.Option("--gutter/--no-gutter", help="Show line numbers and visible whitespace")] = None,
    color: Annotated[Optional[bool], typer.Option("--color/--no-color", help="Colorize changed lines")] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log debug output to stderr")] = False,
    ):
    """Print the differences between OLD and NEW. Exit 0 if same, 1 if different, 2 on trouble."""
    settings = _settings(overrides={
        "context": context, "gutter": gutter, "color": color,
        "log_level": "DEBUG" if verbose else None,
    })
    logging.basicConfig(
        level=settings.log_level,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    logging.getLogger("sesdiff").setLevel(settings.log_level)

    options = settings.diff_options(color=_use_color(settings.color))
    try:
        different = run_diff(sys.stdout, old, new, options)
    except (OSError, UnicodeDecodeError) as e:
        _fail(f"Cannot diff {old} and {new}", e)
    raise typer.Exit(EXIT_DIFFERENT if different else EXIT_SAME)
