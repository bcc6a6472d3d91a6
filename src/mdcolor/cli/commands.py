"""CLI command implementations"""

import re
import sys
from pathlib import Path
from typing import Annotated, Optional

import typer

from mdcolor.config import Settings, list_profiles, load_config
from mdcolor.core.pipeline import render_file
from mdcolor.logging_utils import configure_logging
from mdcolor.util.fs import find_readme


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling."""
    try:
        return load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))


def _locate_readme(settings: Settings) -> Path:
    """Find a README in the working directory or exit with an explanation."""
    if not settings.no_readme:
        try:
            found = find_readme(Path.cwd(), settings.readme_pattern)
        except re.error as e:
            _fail(f"Invalid readme pattern: {settings.readme_pattern}", e)
        if found is not None:
            return found
    _fail(f"No README file was located. Please specify a file. (Readme pattern: {settings.readme_pattern})")


def render_cmd(
    file: Annotated[Optional[Path], typer.Argument(
        help="The file to read. If unspecified, a README file in the current directory is read.",
        exists=True, dir_okay=False, readable=True,
    )] = None,
    html: Annotated[bool, typer.Option("--html", "-H", help="Render as HTML")] = False,
    markdown: Annotated[bool, typer.Option(
        "--markdown", "--md", "-m", help="Render colorized text *with* markdown syntax (env MD_MARKDOWN or MD_MD)",
    )] = False,
    profile: Annotated[Optional[str], typer.Option(
        "--profile", "-P", help="Color profile, e.g. light or dark (env MD_PROFILE)",
    )] = None,
    no_readme: Annotated[bool, typer.Option("--no-readme", "-n", help="Disable automatic README discovery")] = False,
    readme_pattern: Annotated[Optional[str], typer.Option(
        "--readme-pattern", "-r", help="README file name regex (env MD_README_PATTERN or MD_README)",
    )] = None,
    show_profiles: Annotated[bool, typer.Option("--list-profiles", help="List color profiles and exit")] = False,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log debug output to stderr")] = False,
    ):
    """ANSI colorized text rendering of Markdown files."""
    configure_logging(verbose)
    settings = _settings(overrides={
        "html": html or None, "markdown": markdown or None, "profile": profile,
        "no_readme": no_readme or None, "readme_pattern": readme_pattern,
    })

    if show_profiles:
        for name in list_profiles():
            typer.echo(name)
        return

    path = file if file is not None else _locate_readme(settings)
    try:
        render_file(path, settings, sys.stdout)
    except ValueError as e:
        _fail(str(e))
    except OSError as e:
        _fail(f"Cannot render {path}", e)
