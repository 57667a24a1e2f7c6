"""Property expansion and printing.

Declarations are first expanded into concrete ``key: value`` pairs, one per
vendor variant, then printed as the body of a rule block. A prefixed key
whose vendor has no matching prefixed value turns into a PrefixWarning
instead of a declaration.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Sequence, Union

from sheetwright.config import RenderConfig
from sheetwright.model.rule import (
    Comment,
    Important,
    Modifier,
    Plain,
    Prefixed,
    PropertyDecl,
    PropertyText,
)

__all__ = [
    "PrefixWarning",
    "Representation",
    "ResolvedProperty",
    "expand",
    "expand_all",
    "print_properties",
]

log = logging.getLogger("sheetwright")


@dataclass(frozen=True)
class PrefixWarning:
    """No vendor-prefixed value exists for the vendor-prefixed *key*."""

    key: str


@dataclass(frozen=True)
class ResolvedProperty:
    modifiers: tuple[Modifier, ...]
    key: str
    value: str


Representation = Union[PrefixWarning, ResolvedProperty]


def _normalize(text: PropertyText) -> Plain | Prefixed:
    if isinstance(text, str):
        return Plain(text)
    if isinstance(text, (Plain, Prefixed)):
        return text
    raise TypeError(f"Unknown property text: {text!r}")


def expand(
    modifiers: Sequence[Modifier], key: PropertyText, value: PropertyText
) -> list[Representation]:
    """Cross-expand a declaration's key and value variants."""
    mods = tuple(modifiers)
    key = _normalize(key)
    value = _normalize(value)

    if isinstance(key, Plain) and isinstance(value, Plain):
        return [ResolvedProperty(mods, key.text, value.text)]

    if isinstance(key, Prefixed) and isinstance(value, Plain):
        return [
            ResolvedProperty(mods, prefix + base, value.text)
            for prefix, base in key.variants
        ]

    if isinstance(key, Plain) and isinstance(value, Prefixed):
        return [
            ResolvedProperty(mods, key.text, prefix + base)
            for prefix, base in value.variants
        ]

    # Both prefixed: pair each key variant with the value of the same vendor.
    values_by_prefix: dict[str, str] = {}
    for prefix, base in value.variants:
        values_by_prefix.setdefault(prefix, base)

    reps: list[Representation] = []
    for prefix, base in key.variants:
        if prefix in values_by_prefix:
            reps.append(
                ResolvedProperty(mods, prefix + base, prefix + values_by_prefix[prefix])
            )
        else:
            log.debug("No value for vendor-prefixed property %s", prefix + base)
            reps.append(PrefixWarning(prefix + base))
    return reps


def expand_all(decls: Iterable[PropertyDecl]) -> list[Representation]:
    reps: list[Representation] = []
    for decl in decls:
        reps.extend(expand(decl.modifiers, decl.key, decl.value))
    return reps


def _declaration(config: RenderConfig, prop: ResolvedProperty, width: int) -> str:
    if config.align:
        gap = " " * (width - len(prop.key))
    else:
        gap = config.separator

    important = ""
    if any(isinstance(m, Important) for m in prop.modifiers):
        important = " !important"

    comment = ""
    notes = [m.text for m in prop.modifiers if isinstance(m, Comment)]
    if notes and config.comments:
        comment = f" /* {' '.join(notes)} */"

    return f"{config.indentation}{prop.key}:{gap}{prop.value}{important}{comment}"


def print_properties(config: RenderConfig, reps: Sequence[Representation]) -> str:
    """Render a rule body.

    Declarations are joined by ``;``; the last one only gets a ``;`` when
    ``final_semicolon`` is set. Warnings print as standalone comment lines
    when ``warn`` is set.
    """
    width = 1 + max(
        (len(r.key) for r in reps if isinstance(r, ResolvedProperty)), default=0
    )
    last = max(
        (i for i, r in enumerate(reps) if isinstance(r, ResolvedProperty)), default=-1
    )
    final = ";" if config.final_semicolon else ""

    parts: list[str] = []
    for i, rep in enumerate(reps):
        if isinstance(rep, PrefixWarning):
            if config.warn:
                parts.append(
                    f"{config.indentation}/* no value for {rep.key} */{config.newline}"
                )
        elif isinstance(rep, ResolvedProperty):
            terminator = final if i == last else ";"
            parts.append(_declaration(config, rep, width) + terminator + config.newline)
        else:
            raise TypeError(f"Unknown representation: {rep!r}")
    return "".join(parts)
