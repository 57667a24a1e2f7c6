"""Scope operations: how a nested block's selector relates to its parents.

A scope stack is an ordered sequence of operations with the innermost
(most recently entered) block at the front.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Union

from sheetwright.model.selector import Predicate, Selector

__all__ = [
    "ChildOf",
    "DescendantOf",
    "PopLevels",
    "RefineSelf",
    "RootedAt",
    "ScopeOp",
    "ScopeStack",
]


@dataclass(frozen=True)
class ChildOf:
    """Nest as a direct child: ``outer > selector``."""

    selector: Selector


@dataclass(frozen=True)
class DescendantOf:
    """Nest as a descendant: ``outer selector``."""

    selector: Selector


@dataclass(frozen=True)
class RootedAt:
    """Plant *selector* as the outermost ancestor of the remaining scope."""

    selector: Selector


@dataclass(frozen=True)
class PopLevels:
    """Discard this operation and ``count - 1`` enclosing ones."""

    count: int

    def __post_init__(self) -> None:
        if self.count < 1:
            raise ValueError(f"PopLevels count must be >= 1, got {self.count}")


@dataclass(frozen=True)
class RefineSelf:
    """Attach predicates to the enclosing selector itself (``&:hover``)."""

    predicates: tuple[Predicate, ...]


ScopeOp = Union[ChildOf, DescendantOf, RootedAt, PopLevels, RefineSelf]

ScopeStack = Sequence[ScopeOp]
