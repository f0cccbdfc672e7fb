"""deptracker CLI entry point.

Exit codes: 0 = no violations, 1 = violations,
2 = configuration or I/O error.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from deptracker import __version__
from deptracker.application.formatters import formatter_by_name, formatter_names
from deptracker.application.services import Analyzer
from deptracker.domain.exceptions import ConfigurationError
from deptracker.infrastructure import DEFAULT_DEPFILE_NAME, ConfigurationLoader, load_class_map

EXIT_OK = 0
EXIT_VIOLATIONS = 1
EXIT_ERROR = 2

_LOG_LEVELS = (logging.WARNING, logging.INFO, logging.DEBUG)


@click.group()
@click.version_option(version=__version__, prog_name="deptracker")
@click.option("--verbose", "-v", count=True, help="Verbose output (-vv for debug).")
def main(*, verbose: int) -> None:
    """deptracker - check class dependencies against layer rules."""
    logging.basicConfig(
        level=_LOG_LEVELS[min(verbose, len(_LOG_LEVELS) - 1)],
        format="%(levelname)s %(name)s: %(message)s",
    )


@main.command()
@click.option(
    "--depfile",
    type=click.Path(dir_okay=False, path_type=Path),
    default=DEFAULT_DEPFILE_NAME,
    show_default=True,
    help="Depfile to create.",
)
def init(*, depfile: Path) -> None:
    """Create a default depfile."""
    loader = ConfigurationLoader(depfile)
    try:
        created = loader.dump_default()
    except OSError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(EXIT_ERROR)

    if created:
        click.echo(f"{depfile} created.")
    else:
        click.echo(f"{depfile} already exists, nothing to do.")


@main.command()
@click.argument("class_map", type=click.Path(dir_okay=False, path_type=Path))
@click.option(
    "--depfile",
    type=click.Path(dir_okay=False, path_type=Path),
    default=DEFAULT_DEPFILE_NAME,
    show_default=True,
    help="Layers and ruleset.",
)
@click.option(
    "--formatter",
    "formatter_name",
    type=click.Choice(formatter_names()),
    default=None,
    help="Output format (default: from depfile).",
)
def analyze(*, class_map: Path, depfile: Path, formatter_name: str | None) -> None:
    """Check CLASS_MAP against the layers and ruleset of the depfile."""
    loader = ConfigurationLoader(depfile)
    if not loader.has_configuration():
        click.echo(f"{depfile} not found, run deptracker init to create one.", err=True)
        sys.exit(EXIT_ERROR)

    try:
        configuration = loader.load_configuration()
        formatter = formatter_by_name(formatter_name or configuration.formatter)
        classes = load_class_map(class_map)
        result = Analyzer.with_defaults().analyze(classes, configuration)
    except ConfigurationError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(EXIT_ERROR)
    except OSError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(EXIT_ERROR)

    output = formatter.finish(result)
    if output:
        click.echo(output, nl=not output.endswith("\n"))

    sys.exit(EXIT_OK if result.passed else EXIT_VIOLATIONS)
