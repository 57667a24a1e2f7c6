"""CLI command: sheetwright selectors -- list resolved block selectors."""

from __future__ import annotations

import sys
from typing import Iterator, Sequence

import click

from sheetwright.errors import EmptyScopeError, LoadError
from sheetwright.loader import load_path
from sheetwright.model.rule import Nested, Query, Rule
from sheetwright.model.scope import ScopeOp
from sheetwright.render import merge, render_selector


def _scopes(
    scope: tuple[ScopeOp, ...], rules: Sequence[Rule]
) -> Iterator[tuple[ScopeOp, ...]]:
    """Yield the scope stack of every nested block, depth-first."""
    for rule in rules:
        if isinstance(rule, Nested):
            inner = (rule.scope, *scope)
            yield inner
            yield from _scopes(inner, rule.rules)
        elif isinstance(rule, Query):
            yield from _scopes(scope, rule.rules)


@click.command()
@click.argument("document", type=click.Path(exists=True))
def selectors(document: str) -> None:
    """Print the resolved selector of every nested block in DOCUMENT.

    Blocks inside @media queries are included; keyframes and font-face
    bodies have no selector and are skipped.
    """
    try:
        doc = load_path(document)
    except LoadError as exc:
        click.echo(f"Load error: {exc}", err=True)
        sys.exit(1)

    failed = False
    for scope in _scopes(doc.scope, doc.rules):
        try:
            click.echo(render_selector(merge(scope)))
        except EmptyScopeError:
            click.echo(f"Render error: empty scope at block {len(scope)} level(s) deep", err=True)
            failed = True

    if failed:
        sys.exit(1)
