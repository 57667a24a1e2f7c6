"""Selector printer."""

from __future__ import annotations

from sheetwright.config import RenderConfig
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
    predicate_sort_key,
)

__all__ = ["print_predicate", "print_selector", "selector_entries"]

# Attribute operator for each valued attribute predicate.
_ATTR_OPERATORS: dict[type, str] = {
    AttrEquals: "=",
    AttrStartsWith: "^=",
    AttrEndsWith: "$=",
    AttrContains: "*=",
    AttrSpaceSeparatedContains: "~=",
    AttrHyphenSeparatedContains: "|=",
}

_COMBINATOR_GLUE: dict[type, str] = {
    ChildCombinator: " > ",
    DescendantCombinator: " ",
    AdjacentSibling: " + ",
    GeneralSibling: " ~ ",
}


def print_predicate(predicate: Predicate) -> str:
    if isinstance(predicate, HasId):
        return f"#{predicate.name}"
    if isinstance(predicate, HasClass):
        return f".{predicate.name}"
    if isinstance(predicate, HasAttr):
        return f"[{predicate.name}]"
    if type(predicate) in _ATTR_OPERATORS:
        op = _ATTR_OPERATORS[type(predicate)]
        return f"[{predicate.name}{op}'{predicate.value}']"
    if isinstance(predicate, Pseudo):
        return f":{predicate.name}"
    if isinstance(predicate, PseudoFunction):
        return f":{predicate.name}({','.join(predicate.args)})"
    if isinstance(predicate, PseudoElement):
        return f"::{predicate.name}"
    raise TypeError(f"Unknown predicate: {predicate!r}")


def _operands(selector: Selector) -> tuple[Selector, Selector]:
    if isinstance(selector, ChildCombinator):
        return selector.parent, selector.child
    if isinstance(selector, DescendantCombinator):
        return selector.ancestor, selector.descendant
    return selector.first, selector.second


def selector_entries(selector: Selector) -> list[str]:
    """Render *selector* as the list of entries of a selector list.

    Unions contribute one entry per branch; combinators pair every entry of
    the left side with every entry of the right side.
    """
    suffix = "".join(
        print_predicate(p)
        for p in sorted(selector.refinement, key=predicate_sort_key)
    )

    if isinstance(selector, Universal):
        entries = ["" if selector.refinement else "*"]
    elif isinstance(selector, Element):
        entries = [selector.tag]
    elif isinstance(selector, Union):
        entries = selector_entries(selector.first) + selector_entries(selector.second)
    elif type(selector) in _COMBINATOR_GLUE:
        glue = _COMBINATOR_GLUE[type(selector)]
        left, right = _operands(selector)
        entries = [
            a + glue + b
            for a in selector_entries(left)
            for b in selector_entries(right)
        ]
    else:
        raise TypeError(f"Unknown selector: {selector!r}")

    return [entry + suffix for entry in entries]


def print_selector(config: RenderConfig, selector: Selector) -> str:
    """Render *selector* under *config*; inline configs print nothing."""
    if config.is_inline:
        return ""
    return ("," + config.newline).join(selector_entries(selector))
