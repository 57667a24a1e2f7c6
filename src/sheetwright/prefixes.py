"""Static vendor-prefix table.

Each browser entry lists the contexts its prefix applies to:

    property   -- prefixed property names (``-webkit-transition``)
    value      -- prefixed property values (``-moz-linear-gradient(...)``)
    keyframes  -- prefixed ``@keyframes`` at-rules

The unprefixed standard entry is always last.
"""

from __future__ import annotations

from dataclasses import dataclass

from sheetwright.model.rule import Prefixed

__all__ = [
    "BROWSERS",
    "Browser",
    "KEYFRAMES",
    "PROPERTY",
    "VALUE",
    "prefixes_for",
    "vendor_variants",
]

PROPERTY = "property"
VALUE = "value"
KEYFRAMES = "keyframes"

_ALL_CONTEXTS = frozenset({PROPERTY, VALUE, KEYFRAMES})


@dataclass(frozen=True)
class Browser:
    """A vendor and the contexts its prefix is emitted in."""

    name: str
    prefix: str
    contexts: frozenset[str] = _ALL_CONTEXTS

    def applies_to(self, context: str) -> bool:
        return context in self.contexts


BROWSERS: tuple[Browser, ...] = (
    Browser("webkit", "-webkit-"),
    Browser("moz", "-moz-"),
    # @-ms-keyframes never shipped; IE10 went straight to @keyframes.
    Browser("ms", "-ms-", frozenset({PROPERTY, VALUE})),
    Browser("o", "-o-"),
    Browser("standard", ""),
)


def prefixes_for(context: str) -> tuple[str, ...]:
    """Return the prefixes applicable to *context*, in table order."""
    if context not in _ALL_CONTEXTS:
        raise ValueError(f"Unknown prefix context: {context!r}")
    return tuple(b.prefix for b in BROWSERS if b.applies_to(context))


def vendor_variants(base: str, context: str = PROPERTY) -> Prefixed:
    """Build a Prefixed text carrying *base* under every applicable prefix."""
    return Prefixed(tuple((prefix, base) for prefix in prefixes_for(context)))
