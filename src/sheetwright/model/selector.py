"""Selector model: refinement predicates and the recursive selector tree.

Every selector node carries a *refinement*, an unordered set of predicates
narrowing the elements it matches. Shapes:

    Universal              *
    Element                div
    ChildCombinator        a > b
    DescendantCombinator   a b
    AdjacentSibling        a + b
    GeneralSibling         a ~ b
    Union                  a, b
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterable, Union as _Union

__all__ = [
    "AdjacentSibling",
    "AttrContains",
    "AttrEndsWith",
    "AttrEquals",
    "AttrHyphenSeparatedContains",
    "AttrSpaceSeparatedContains",
    "AttrStartsWith",
    "ChildCombinator",
    "DescendantCombinator",
    "Element",
    "GeneralSibling",
    "HasAttr",
    "HasClass",
    "HasId",
    "Predicate",
    "Pseudo",
    "PseudoElement",
    "PseudoFunction",
    "Selector",
    "Union",
    "Universal",
    "predicate_sort_key",
    "refine",
]


# ---------------------------------------------------------------------------
# Predicates
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class HasId:
    name: str


@dataclass(frozen=True)
class HasClass:
    name: str


@dataclass(frozen=True)
class HasAttr:
    name: str


@dataclass(frozen=True)
class AttrEquals:
    name: str
    value: str


@dataclass(frozen=True)
class AttrStartsWith:
    name: str
    value: str


@dataclass(frozen=True)
class AttrEndsWith:
    name: str
    value: str


@dataclass(frozen=True)
class AttrContains:
    name: str
    value: str


@dataclass(frozen=True)
class AttrSpaceSeparatedContains:
    name: str
    value: str


@dataclass(frozen=True)
class AttrHyphenSeparatedContains:
    name: str
    value: str


@dataclass(frozen=True)
class Pseudo:
    """A pseudo-class such as ``:hover``."""

    name: str


@dataclass(frozen=True)
class PseudoFunction:
    """A functional pseudo-class such as ``:nth-child(2n+1)``."""

    name: str
    args: tuple[str, ...] = ()


@dataclass(frozen=True)
class PseudoElement:
    """A pseudo-element such as ``::before``."""

    name: str


Predicate = _Union[
    HasId,
    HasClass,
    HasAttr,
    AttrEquals,
    AttrStartsWith,
    AttrEndsWith,
    AttrContains,
    AttrSpaceSeparatedContains,
    AttrHyphenSeparatedContains,
    Pseudo,
    PseudoFunction,
    PseudoElement,
]

# Print order of predicate kinds. Pseudo-elements must come last to stay
# valid CSS.
_PREDICATE_RANK: dict[type, int] = {
    HasId: 0,
    HasClass: 1,
    HasAttr: 2,
    AttrEquals: 3,
    AttrStartsWith: 4,
    AttrEndsWith: 5,
    AttrContains: 6,
    AttrSpaceSeparatedContains: 7,
    AttrHyphenSeparatedContains: 8,
    Pseudo: 9,
    PseudoFunction: 10,
    PseudoElement: 11,
}


def predicate_sort_key(predicate: Predicate) -> tuple:
    """Total order over predicates: kind first, then payload."""
    try:
        rank = _PREDICATE_RANK[type(predicate)]
    except KeyError:
        raise TypeError(f"Unknown predicate: {predicate!r}") from None
    name = predicate.name
    value = getattr(predicate, "value", "")
    args = getattr(predicate, "args", ())
    return (rank, name, value, args)


# ---------------------------------------------------------------------------
# Selector shapes
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Universal:
    refinement: frozenset[Predicate] = frozenset()


@dataclass(frozen=True)
class Element:
    tag: str
    refinement: frozenset[Predicate] = frozenset()

    def __post_init__(self) -> None:
        if not self.tag:
            raise ValueError("Element tag must be a non-empty string")


@dataclass(frozen=True)
class ChildCombinator:
    parent: Selector
    child: Selector
    refinement: frozenset[Predicate] = frozenset()


@dataclass(frozen=True)
class DescendantCombinator:
    ancestor: Selector
    descendant: Selector
    refinement: frozenset[Predicate] = frozenset()


@dataclass(frozen=True)
class AdjacentSibling:
    first: Selector
    second: Selector
    refinement: frozenset[Predicate] = frozenset()


@dataclass(frozen=True)
class GeneralSibling:
    first: Selector
    second: Selector
    refinement: frozenset[Predicate] = frozenset()


@dataclass(frozen=True)
class Union:
    """Two selectors printed as separate entries of one selector list."""

    first: Selector
    second: Selector
    refinement: frozenset[Predicate] = frozenset()


Selector = _Union[
    Universal,
    Element,
    ChildCombinator,
    DescendantCombinator,
    AdjacentSibling,
    GeneralSibling,
    Union,
]


def refine(selector: Selector, predicates: Iterable[Predicate]) -> Selector:
    """Return *selector* with *predicates* added to its own refinement set."""
    return replace(selector, refinement=selector.refinement | frozenset(predicates))
