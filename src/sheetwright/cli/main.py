"""Sheetwright CLI entry point: Click group with subcommands."""

import logging

import click

from sheetwright import __version__


@click.group()
@click.version_option(version=__version__, prog_name="sheetwright")
@click.option("--verbose", is_flag=True, help="Log debug output to stderr")
def cli(verbose: bool) -> None:
    """Sheetwright - render JSON rule documents to CSS."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


# Import and register subcommands
from sheetwright.cli.render import render  # noqa: E402
from sheetwright.cli.selectors import selectors  # noqa: E402

cli.add_command(render)
cli.add_command(selectors)
