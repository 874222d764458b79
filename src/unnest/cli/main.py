"""Unnest CLI entry point: Click group with subcommands."""

import click

from unnest import __version__


@click.group()
@click.version_option(version=__version__, prog_name="unnest")
def cli() -> None:
    """Unnest - flatten nested style sheets into plain CSS rules."""


# Import and register subcommands
from unnest.cli.flatten import flatten  # noqa: E402
from unnest.cli.check import check  # noqa: E402
from unnest.cli.inspect import inspect  # noqa: E402

cli.add_command(flatten)
cli.add_command(check)
cli.add_command(inspect)
