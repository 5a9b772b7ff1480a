"""
Displays a GEDCOM file with syntax highlighting and level indentation.
Lines that break the ``level tag value`` layout are highlighted in red.
"""

from __future__ import annotations

import sys
from pathlib import Path

import click
from .config import ConfigError, build_config
from .display import display_lines
from .models import DisplaySummary
from .streams import get_indentation, get_max_indentation, iter_lines

__all__ = ["cli"]


@click.command()
@click.version_option()
@click.option("--indentation", type=int, help="Indent characters per level")
@click.option("--max-indentation", type=int, help="Maximum indent characters per line")
@click.option(
    "--color/--no-color",
    default=True,
    help="Emit terminal colour codes (on by default, even when piped)",
)
@click.option("--summary", is_flag=True, help="Print line statistics to stderr")
@click.option("--verbose", is_flag=True, help="Report each highlighted line on stderr")
@click.argument("source", type=click.File("r", encoding="utf-8", errors="replace"), default="-")
def cli(
    source,
    indentation: int | None = None,
    max_indentation: int | None = None,
    color: bool = True,
    summary: bool = False,
    verbose: bool = False,
):
    """
    Entry point for displaying a GEDCOM file.

    Args:
        source: Open UTF-8 text stream; standard input when ``-`` or omitted.
            Undecodable bytes are replaced with U+FFFD.
        indentation: Override for the indent characters per level.
        max_indentation: Override for the indentation ceiling.
        color: Whether to keep ANSI escape sequences in the output.
        summary: Print line statistics to stderr after the output.
        verbose: Report every highlighted line on stderr.

    Returns:
        None.

    Raises:
        click.BadParameter: If the configuration or environment overrides are
            invalid.

    Examples:
        gedcom-display-raw < tree.ged
        gedcom-display-raw --indentation 2 tree.ged | less -R
    """
    try:
        if indentation is None:
            indentation = get_indentation()
        if max_indentation is None:
            max_indentation = get_max_indentation()
    except ValueError as error:
        raise click.BadParameter(str(error)) from error

    try:
        config = build_config(
            Path.cwd(),
            indentation=indentation,
            max_indentation=max_indentation,
        )
    except ConfigError as error:
        raise click.BadParameter(str(error)) from error

    stats = DisplaySummary() if summary else None
    warn = (lambda message: click.echo(message, err=True)) if verbose else None

    try:
        for text in display_lines(iter_lines(source), config, summary=stats, warn=warn):
            click.echo(text, color=color)
    finally:
        sys.stdout.flush()
        sys.stderr.flush()

    if stats is not None:
        click.echo(stats.format(), err=True)


if __name__ == "__main__":
    cli()
