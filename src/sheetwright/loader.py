"""Build a rule tree from a JSON rule document.

Document shape:

    {
      "scope": [{"child": "div"}],
      "rules": [
        {"property": "color", "value": "red", "important": true},
        {"property": {"vendors": "transition"}, "value": "all 1s"},
        {"nested": {"refine": [{"pseudo": "hover"}]}, "rules": [...]},
        {"media": {"type": "screen", "features": [["max-width", "600px"]]}, "rules": [...]},
        {"keyframes": "spin", "frames": [[0, [...]], [100, [...]]]},
        {"font_face": [...]},
        {"import": "base.css"}
      ]
    }

The scope list is innermost first, the same order the renderer uses.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable

from sheetwright.errors import LoadError
from sheetwright.model.rule import (
    Comment,
    Feature,
    FontFace,
    Import,
    Important,
    Keyframes,
    MediaModifier,
    MediaQuery,
    Modifier,
    Nested,
    Plain,
    Prefixed,
    PropertyDecl,
    PropertyText,
    Query,
    Rule,
)
from sheetwright.model.scope import (
    ChildOf,
    DescendantOf,
    PopLevels,
    RefineSelf,
    RootedAt,
    ScopeOp,
)
from sheetwright.model.selector import (
    AdjacentSibling,
    AttrContains,
    AttrEndsWith,
    AttrEquals,
    AttrHyphenSeparatedContains,
    AttrSpaceSeparatedContains,
    AttrStartsWith,
    ChildCombinator,
    DescendantCombinator,
    Element,
    GeneralSibling,
    HasAttr,
    HasClass,
    HasId,
    Predicate,
    Pseudo,
    PseudoElement,
    PseudoFunction,
    Selector,
    Union,
    Universal,
    refine,
)
from sheetwright.prefixes import PROPERTY, VALUE, vendor_variants

__all__ = ["Document", "load_document", "load_path"]


@dataclass(frozen=True)
class Document:
    """A loaded rule document: initial scope stack plus top-level rules."""

    scope: tuple[ScopeOp, ...]
    rules: tuple[Rule, ...]


# Attribute operator keys accepted alongside {"attr": name}.
_ATTR_PREDICATES: dict[str, Callable[[str, str], Predicate]] = {
    "equals": AttrEquals,
    "starts_with": AttrStartsWith,
    "ends_with": AttrEndsWith,
    "contains": AttrContains,
    "space_contains": AttrSpaceSeparatedContains,
    "hyphen_contains": AttrHyphenSeparatedContains,
}

_COMBINATORS: dict[str, Callable[[Selector, Selector], Selector]] = {
    ">": ChildCombinator,
    " ": DescendantCombinator,
    "+": AdjacentSibling,
    "~": GeneralSibling,
    ",": Union,
}

_SCOPE_OPS: dict[str, Callable[[Selector], ScopeOp]] = {
    "child": ChildOf,
    "descendant": DescendantOf,
    "root": RootedAt,
}


def _expect(value: Any, kind: type, path: str) -> Any:
    if not isinstance(value, kind) or (kind is int and isinstance(value, bool)):
        raise LoadError(f"expected {kind.__name__}, got {type(value).__name__}", path)
    return value


# ---------------------------------------------------------------------------
# Selectors
# ---------------------------------------------------------------------------


def _build_predicate(data: Any, path: str) -> Predicate:
    data = _expect(data, dict, path)
    if "id" in data:
        return HasId(_expect(data["id"], str, f"{path}.id"))
    if "class" in data:
        return HasClass(_expect(data["class"], str, f"{path}.class"))
    if "attr" in data:
        name = _expect(data["attr"], str, f"{path}.attr")
        for key, factory in _ATTR_PREDICATES.items():
            if key in data:
                return factory(name, _expect(data[key], str, f"{path}.{key}"))
        return HasAttr(name)
    if "pseudo" in data:
        name = _expect(data["pseudo"], str, f"{path}.pseudo")
        if "args" in data:
            args = _expect(data["args"], list, f"{path}.args")
            return PseudoFunction(
                name,
                tuple(_expect(a, str, f"{path}.args[{i}]") for i, a in enumerate(args)),
            )
        return Pseudo(name)
    if "pseudo_element" in data:
        return PseudoElement(_expect(data["pseudo_element"], str, f"{path}.pseudo_element"))
    raise LoadError(f"unknown predicate keys: {sorted(data)}", path)


def _build_predicates(data: Any, path: str) -> tuple[Predicate, ...]:
    items = _expect(data, list, path)
    return tuple(_build_predicate(item, f"{path}[{i}]") for i, item in enumerate(items))


def _build_selector(data: Any, path: str) -> Selector:
    if isinstance(data, str):
        if data == "*":
            return Universal()
        if not data:
            raise LoadError("selector must be a non-empty string", path)
        return Element(data)

    data = _expect(data, dict, path)
    refinement = frozenset(_build_predicates(data.get("refine", []), f"{path}.refine"))

    if "combinator" in data:
        glue = data["combinator"]
        if glue not in _COMBINATORS:
            raise LoadError(f"unknown combinator {glue!r}", f"{path}.combinator")
        for side in ("left", "right"):
            if side not in data:
                raise LoadError(f"combinator needs {side!r}", path)
        combined = _COMBINATORS[glue](
            _build_selector(data["left"], f"{path}.left"),
            _build_selector(data["right"], f"{path}.right"),
        )
        return refine(combined, refinement)

    tag = data.get("element")
    if tag is None or tag == "*":
        return Universal(refinement)
    if not _expect(tag, str, f"{path}.element"):
        raise LoadError("element must be a non-empty string", f"{path}.element")
    return Element(tag, refinement)


def _build_scope_op(data: Any, path: str) -> ScopeOp:
    data = _expect(data, dict, path)
    if len(data) != 1:
        raise LoadError("scope operation must have exactly one key", path)
    (key, value), = data.items()
    if key in _SCOPE_OPS:
        return _SCOPE_OPS[key](_build_selector(value, f"{path}.{key}"))
    if key == "pop":
        count = _expect(value, int, f"{path}.pop")
        try:
            return PopLevels(count)
        except ValueError as exc:
            raise LoadError(str(exc), f"{path}.pop") from exc
    if key == "refine":
        return RefineSelf(_build_predicates(value, f"{path}.refine"))
    raise LoadError(f"unknown scope operation {key!r}", path)


# ---------------------------------------------------------------------------
# Rules
# ---------------------------------------------------------------------------


def _build_text(data: Any, context: str, path: str) -> PropertyText:
    if isinstance(data, str):
        return Plain(data)
    data = _expect(data, dict, path)
    if "vendors" in data:
        return vendor_variants(_expect(data["vendors"], str, f"{path}.vendors"), context)
    if "prefixed" in data:
        pairs = _expect(data["prefixed"], list, f"{path}.prefixed")
        variants = []
        for i, pair in enumerate(pairs):
            pair_path = f"{path}.prefixed[{i}]"
            pair = _expect(pair, list, pair_path)
            if len(pair) != 2:
                raise LoadError("variant must be a [prefix, base] pair", pair_path)
            variants.append(
                (_expect(pair[0], str, pair_path), _expect(pair[1], str, pair_path))
            )
        return Prefixed(tuple(variants))
    raise LoadError("expected a string, 'vendors' or 'prefixed'", path)


def _build_property(data: dict[str, Any], path: str) -> PropertyDecl:
    if "value" not in data:
        raise LoadError("property needs a 'value'", path)
    modifiers: list[Modifier] = []
    if _expect(data.get("important", False), bool, f"{path}.important"):
        modifiers.append(Important())
    if "comment" in data:
        modifiers.append(Comment(_expect(data["comment"], str, f"{path}.comment")))
    return PropertyDecl(
        key=_build_text(data["property"], PROPERTY, f"{path}.property"),
        value=_build_text(data["value"], VALUE, f"{path}.value"),
        modifiers=tuple(modifiers),
    )


def _build_media(data: Any, path: str) -> MediaQuery:
    data = _expect(data, dict, path)
    media_type = _expect(data.get("type", "all"), str, f"{path}.type")
    modifier = None
    if "modifier" in data:
        try:
            modifier = MediaModifier(data["modifier"])
        except ValueError as exc:
            raise LoadError(f"unknown media modifier {data['modifier']!r}", f"{path}.modifier") from exc
    features = []
    for i, item in enumerate(_expect(data.get("features", []), list, f"{path}.features")):
        item_path = f"{path}.features[{i}]"
        item = _expect(item, list, item_path)
        if len(item) not in (1, 2):
            raise LoadError("feature must be [name] or [name, value]", item_path)
        name = _expect(item[0], str, item_path)
        value = _expect(item[1], str, item_path) if len(item) == 2 else None
        features.append(Feature(name, value))
    return MediaQuery(media_type=media_type, features=tuple(features), modifier=modifier)


def _build_frames(data: Any, path: str) -> tuple[tuple[float, tuple[Rule, ...]], ...]:
    frames = []
    for i, item in enumerate(_expect(data, list, path)):
        item_path = f"{path}[{i}]"
        item = _expect(item, list, item_path)
        if len(item) != 2:
            raise LoadError("frame must be a [percentage, rules] pair", item_path)
        offset = item[0]
        if isinstance(offset, bool) or not isinstance(offset, (int, float)):
            raise LoadError("frame percentage must be a number", item_path)
        frames.append((offset, _build_rules(item[1], f"{item_path}[1]")))
    return tuple(frames)


def _build_rule(data: Any, path: str) -> Rule:
    data = _expect(data, dict, path)
    if "property" in data:
        return _build_property(data, path)
    if "nested" in data:
        return Nested(
            scope=_build_scope_op(data["nested"], f"{path}.nested"),
            rules=_build_rules(data.get("rules", []), f"{path}.rules"),
        )
    if "media" in data:
        return Query(
            media=_build_media(data["media"], f"{path}.media"),
            rules=_build_rules(data.get("rules", []), f"{path}.rules"),
        )
    if "keyframes" in data:
        return Keyframes(
            name=_expect(data["keyframes"], str, f"{path}.keyframes"),
            frames=_build_frames(data.get("frames", []), f"{path}.frames"),
        )
    if "font_face" in data:
        return FontFace(rules=_build_rules(data["font_face"], f"{path}.font_face"))
    if "import" in data:
        return Import(url=_expect(data["import"], str, f"{path}.import"))
    raise LoadError(f"unknown rule keys: {sorted(data)}", path)


def _build_rules(data: Any, path: str) -> tuple[Rule, ...]:
    items = _expect(data, list, path)
    return tuple(_build_rule(item, f"{path}[{i}]") for i, item in enumerate(items))


def load_document(data: Any) -> Document:
    """Convert decoded JSON into a Document.

    Raises:
        LoadError: naming the JSON path of the first malformed entry.
    """
    data = _expect(data, dict, "document")
    scope_items = _expect(data.get("scope", []), list, "scope")
    scope = tuple(_build_scope_op(item, f"scope[{i}]") for i, item in enumerate(scope_items))
    rules = _build_rules(data.get("rules", []), "rules")
    return Document(scope=scope, rules=rules)


def load_path(path: str | Path) -> Document:
    """Read and load a UTF-8 JSON rule document from *path*."""
    try:
        source = Path(path).read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise LoadError(f"document is not valid UTF-8 (byte offset {exc.start})") from exc
    except OSError as exc:
        raise LoadError(f"cannot read document: {exc.strerror or exc}") from exc
    try:
        data = json.loads(source)
    except json.JSONDecodeError as exc:
        raise LoadError(f"invalid JSON at line {exc.lineno} column {exc.colno}: {exc.msg}") from exc
    return load_document(data)
