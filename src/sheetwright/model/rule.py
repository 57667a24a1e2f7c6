"""Rule tree model: declarations, nested blocks and at-rules."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Sequence, Union

from sheetwright.model.scope import ScopeOp

__all__ = [
    "Comment",
    "Feature",
    "FontFace",
    "Import",
    "Important",
    "Keyframes",
    "MediaModifier",
    "MediaQuery",
    "Modifier",
    "Nested",
    "Plain",
    "Prefixed",
    "PropertyDecl",
    "PropertyText",
    "Query",
    "Rule",
]


# ---------------------------------------------------------------------------
# Property keys and values
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Plain:
    """A property key or value with no vendor variants."""

    text: str


@dataclass(frozen=True)
class Prefixed:
    """A property key or value carried under several vendor prefixes.

    ``variants`` holds ``(prefix, base)`` pairs; the rendered text of a
    variant is ``prefix + base``.
    """

    variants: tuple[tuple[str, str], ...]


PropertyText = Union[Plain, Prefixed, str]


@dataclass(frozen=True)
class Important:
    pass


@dataclass(frozen=True)
class Comment:
    text: str


Modifier = Union[Important, Comment]


# ---------------------------------------------------------------------------
# Media queries
# ---------------------------------------------------------------------------


class MediaModifier(Enum):
    NOT = "not"
    ONLY = "only"


@dataclass(frozen=True)
class Feature:
    """A media feature test: ``(name)`` or ``(name: value)``."""

    name: str
    value: str | None = None


@dataclass(frozen=True)
class MediaQuery:
    media_type: str
    features: tuple[Feature, ...] = ()
    modifier: MediaModifier | None = None


# ---------------------------------------------------------------------------
# Rules
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class PropertyDecl:
    """A single ``key: value`` declaration.

    Bare strings are accepted for *key* and *value* and treated as Plain.
    """

    key: PropertyText
    value: PropertyText
    modifiers: tuple[Modifier, ...] = ()


@dataclass(frozen=True)
class Nested:
    scope: ScopeOp
    rules: Sequence[Rule] = ()


@dataclass(frozen=True)
class Query:
    media: MediaQuery
    rules: Sequence[Rule] = ()


@dataclass(frozen=True)
class Keyframes:
    """An animation; *frames* are ``(percentage, rules)`` pairs in order."""

    name: str
    frames: Sequence[tuple[float, Sequence[Rule]]] = ()


@dataclass(frozen=True)
class FontFace:
    rules: Sequence[Rule] = ()


@dataclass(frozen=True)
class Import:
    url: str


Rule = Union[PropertyDecl, Nested, Query, Keyframes, FontFace, Import]
