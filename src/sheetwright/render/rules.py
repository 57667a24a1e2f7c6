"""Rule tree renderer.

Each nesting level renders its siblings grouped by kind, always in this
order regardless of declaration order:

    1. declarations       one block under the merged scope selector
    2. @import
    3. @keyframes         once per vendor prefix applicable to keyframes
    4. @font-face
    5. nested blocks      recursed with their scope op pushed on the stack
    6. @media             recursed with the enclosing stack unchanged
"""

from __future__ import annotations

from typing import Sequence

from sheetwright.config import RenderConfig
from sheetwright.model.rule import (
    FontFace,
    Import,
    Keyframes,
    MediaModifier,
    MediaQuery,
    Nested,
    PropertyDecl,
    Query,
    Rule,
)
from sheetwright.model.scope import ScopeStack
from sheetwright.prefixes import KEYFRAMES, prefixes_for
from sheetwright.render.merger import merge
from sheetwright.render.properties import expand_all, print_properties
from sheetwright.render.selector import print_selector

__all__ = ["format_percentage", "render_media_query", "render_rules"]


def _block(config: RenderConfig, heading: str, body: str) -> str:
    return (
        f"{heading}{config.separator}{config.lbrace}{config.newline}"
        f"{body}{config.rbrace}{config.newline}"
    )


def _join(config: RenderConfig, chunks: Sequence[str]) -> str:
    return config.newline.join(chunk for chunk in chunks if chunk)


def _declarations(
    config: RenderConfig,
    scope: ScopeStack,
    decls: Sequence[PropertyDecl],
    heading: str | None,
) -> str:
    reps = expand_all(decls)
    if not reps:
        return ""
    if heading is None:
        # Inline output has no selector, so the stack is never resolved.
        heading = "" if config.is_inline else print_selector(config, merge(scope))
    return _block(config, heading, print_properties(config, reps))


def format_percentage(value: float) -> str:
    """Format a keyframe offset without trailing zeros: 0, 12.5, 100."""
    text = f"{value:.5f}".rstrip("0").rstrip(".")
    return text if text not in ("", "-0") else "0"


def _keyframes(config: RenderConfig, keyframes: Keyframes) -> list[str]:
    frames = "".join(
        _render_level(config, (), rules, heading=f"{format_percentage(offset)}%")
        for offset, rules in keyframes.frames
    )
    return [
        _block(config, f"@{prefix}keyframes {keyframes.name}", frames)
        for prefix in prefixes_for(KEYFRAMES)
    ]


def _font_face(config: RenderConfig, face: FontFace) -> str:
    return _render_level(config, (), face.rules, heading="@font-face")


def _import(config: RenderConfig, rule: Import) -> str:
    return f"@import url({rule.url});{config.newline}"


def render_media_query(query: MediaQuery) -> str:
    """Render the ``@media ...`` prelude of a media query."""
    parts = ["@media "]
    if query.modifier is MediaModifier.NOT:
        parts.append("not ")
    elif query.modifier is MediaModifier.ONLY:
        parts.append("only ")
    parts.append(query.media_type)
    for feature in query.features:
        if feature.value is None:
            parts.append(f" and ({feature.name})")
        else:
            parts.append(f" and ({feature.name}: {feature.value})")
    return "".join(parts)


def _query(config: RenderConfig, scope: ScopeStack, query: Query) -> str:
    inner = _render_level(config, scope, query.rules)
    if not inner:
        return ""
    return _block(config, render_media_query(query.media), inner)


def _render_level(
    config: RenderConfig,
    scope: ScopeStack,
    rules: Sequence[Rule],
    heading: str | None = None,
) -> str:
    decls: list[PropertyDecl] = []
    imports: list[Import] = []
    animations: list[Keyframes] = []
    faces: list[FontFace] = []
    nested: list[Nested] = []
    queries: list[Query] = []

    for rule in rules:
        if isinstance(rule, PropertyDecl):
            decls.append(rule)
        elif isinstance(rule, Import):
            imports.append(rule)
        elif isinstance(rule, Keyframes):
            animations.append(rule)
        elif isinstance(rule, FontFace):
            faces.append(rule)
        elif isinstance(rule, Nested):
            nested.append(rule)
        elif isinstance(rule, Query):
            queries.append(rule)
        else:
            raise TypeError(f"Unknown rule: {rule!r}")

    chunks = [_declarations(config, scope, decls, heading)]
    chunks.append("".join(_import(config, i) for i in imports))
    for animation in animations:
        chunks.extend(_keyframes(config, animation))
    chunks.extend(_font_face(config, face) for face in faces)
    chunks.extend(
        _render_level(config, (n.scope, *scope), n.rules) for n in nested
    )
    chunks.extend(_query(config, scope, q) for q in queries)
    return _join(config, chunks)


def render_rules(
    config: RenderConfig, scope: ScopeStack, rules: Sequence[Rule]
) -> str:
    """Render a sequence of sibling rules under *scope*."""
    return _render_level(config, tuple(scope), rules)
