"""Top-level rendering entry points."""

from __future__ import annotations

import logging
from typing import Sequence

import click

from sheetwright.config import COMPACT, PRESETS, PRETTY, RenderConfig
from sheetwright.model.rule import Rule
from sheetwright.model.scope import ScopeStack
from sheetwright.model.selector import Selector
from sheetwright.render.merger import merge
from sheetwright.render.rules import render_rules
from sheetwright.render.selector import print_selector

__all__ = [
    "BANNER",
    "merge",
    "put_css",
    "render",
    "render_rules",
    "render_selector",
    "render_with",
    "with_banner",
]

log = logging.getLogger("sheetwright")

BANNER = "/* Generated with sheetwright */"


def with_banner(text: str) -> str:
    """Append the generator banner to *text*."""
    return f"{text}\n{BANNER}\n"


def render_with(config: RenderConfig, scope: ScopeStack, rules: Sequence[Rule]) -> str:
    """Render *rules* under an initial *scope* stack using *config*."""
    output = render_rules(config, scope, rules)
    if config.banner:
        output = with_banner(output)
    preset = next((name for name, c in PRESETS.items() if c == config), "custom")
    log.debug(
        "Rendered %d top-level rule(s) into %d characters (preset=%s inline=%s align=%s banner=%s)",
        len(rules),
        len(output),
        preset,
        config.is_inline,
        config.align,
        config.banner,
    )
    return output


def render(
    rules: Sequence[Rule],
    config: RenderConfig = PRETTY,
    scope: ScopeStack = (),
) -> str:
    """Render a stylesheet, pretty-printed by default."""
    return render_with(config, scope, rules)


def render_selector(selector: Selector) -> str:
    """Render a bare selector with the compact configuration."""
    return print_selector(COMPACT, selector)


def put_css(rules: Sequence[Rule], config: RenderConfig = PRETTY) -> None:
    """Render *rules* and write the result to standard output."""
    click.echo(render(rules, config), nl=False)
