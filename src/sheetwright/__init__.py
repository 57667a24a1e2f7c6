"""Sheetwright: render nested rule trees into CSS text."""

from sheetwright.config import COMPACT, INLINE, PRESETS, PRETTY, RenderConfig
from sheetwright.errors import EmptyScopeError, LoadError, SheetwrightError
from sheetwright.render import (
    BANNER,
    put_css,
    render,
    render_rules,
    render_selector,
    render_with,
    with_banner,
)

__version__ = "0.1.0"

__all__ = [
    "BANNER",
    "COMPACT",
    "EmptyScopeError",
    "INLINE",
    "LoadError",
    "PRESETS",
    "PRETTY",
    "RenderConfig",
    "SheetwrightError",
    "put_css",
    "render",
    "render_rules",
    "render_selector",
    "render_with",
    "with_banner",
]
