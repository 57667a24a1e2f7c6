"""Selector composition: resolve a scope stack into one selector.

The stack is read front (innermost block) to back (outermost). Resolution is
defined on the head and the selector resolved from the tail:

    ChildOf(s)      tail empty -> s, else  tail > s
    DescendantOf(s) tail empty -> s, else  tail s
    RootedAt(s)     tail empty -> s, else  s tail
    PopLevels(n)    drop n entries including the head, resolve the rest
    RefineSelf(p)   tail empty -> * with p, else tail with p
"""

from __future__ import annotations

from sheetwright.errors import EmptyScopeError
from sheetwright.model.scope import (
    ChildOf,
    DescendantOf,
    PopLevels,
    RefineSelf,
    RootedAt,
    ScopeOp,
    ScopeStack,
)
from sheetwright.model.selector import (
    ChildCombinator,
    DescendantCombinator,
    Selector,
    Universal,
    refine,
)

__all__ = ["effective_ops", "merge"]


def _survivors(stack: ScopeStack) -> list[tuple[int, ScopeOp]]:
    survivors: list[tuple[int, ScopeOp]] = []
    i = 0
    while i < len(stack):
        op = stack[i]
        if isinstance(op, PopLevels):
            i += op.count
            continue
        survivors.append((i, op))
        i += 1
    return survivors


def effective_ops(stack: ScopeStack) -> list[ScopeOp]:
    """Return the operations left after applying every PopLevels, front first."""
    return [op for _, op in _survivors(stack)]


def merge(stack: ScopeStack) -> Selector:
    """Resolve *stack* into a single selector.

    Folds from the outermost operation inwards so arbitrarily deep nesting
    never grows the call stack.

    Raises:
        EmptyScopeError: if no operation survives popping, or if an
            operation has enclosing entries that all pop away.
    """
    survivors = _survivors(stack)
    if not survivors:
        raise EmptyScopeError()
    # Only the outermost survivor may resolve without a tail; anything
    # after it in the raw stack was popped to nothing.
    outermost, _ = survivors[-1]
    if outermost != len(stack) - 1:
        raise EmptyScopeError(
            f"enclosing scope of entry {outermost} pops down to an empty stack"
        )

    merged: Selector | None = None
    for _, op in reversed(survivors):
        if isinstance(op, ChildOf):
            merged = op.selector if merged is None else ChildCombinator(merged, op.selector)
        elif isinstance(op, DescendantOf):
            merged = op.selector if merged is None else DescendantCombinator(merged, op.selector)
        elif isinstance(op, RootedAt):
            merged = op.selector if merged is None else DescendantCombinator(op.selector, merged)
        elif isinstance(op, RefineSelf):
            merged = refine(Universal() if merged is None else merged, op.predicates)
        else:
            raise TypeError(f"Unknown scope operation: {op!r}")

    return merged
