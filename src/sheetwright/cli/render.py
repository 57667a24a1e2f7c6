"""CLI command: sheetwright render -- render a rule document to CSS."""

from __future__ import annotations

import sys
from dataclasses import replace
from pathlib import Path

import click

from sheetwright.config import PRESETS
from sheetwright.errors import EmptyScopeError, LoadError
from sheetwright.loader import load_path
from sheetwright.render import render_with


@click.command()
@click.argument("document", type=click.Path(exists=True))
@click.option(
    "--style",
    type=click.Choice(sorted(PRESETS)),
    default="pretty",
    show_default=True,
    help="Formatting preset",
)
@click.option(
    "--banner/--no-banner",
    default=None,
    help="Force the generator banner on or off (default: per preset)",
)
@click.option("--output", "-o", default=None, help="Write CSS to this file instead of stdout")
def render(document: str, style: str, banner: bool | None, output: str | None) -> None:
    """Render a JSON rule DOCUMENT to CSS."""
    config = PRESETS[style]
    if banner is not None:
        config = replace(config, banner=banner)

    try:
        doc = load_path(document)
        css = render_with(config, doc.scope, doc.rules)
    except LoadError as exc:
        click.echo(f"Load error: {exc}", err=True)
        sys.exit(1)
    except EmptyScopeError as exc:
        click.echo(f"Render error: {exc}", err=True)
        sys.exit(1)

    if output:
        Path(output).write_text(css, encoding="utf-8")
        click.echo(f"Wrote {len(css)} characters to {output}")
    else:
        click.echo(css, nl=False)
