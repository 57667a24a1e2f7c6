"""Tests for resolving scope stacks into selectors."""

import pytest

from sheetwright.errors import EmptyScopeError
from sheetwright.model import (
    ChildCombinator,
    ChildOf,
    DescendantCombinator,
    DescendantOf,
    Element,
    HasClass,
    PopLevels,
    Pseudo,
    RefineSelf,
    RootedAt,
    Universal,
)
from sheetwright.render import merge, render_selector
from sheetwright.render.merger import effective_ops

DIV = Element("div")
SPAN = Element("span")
A = Element("a")


# ---------------------------------------------------------------------------
# Single operations
# ---------------------------------------------------------------------------


class TestSingleOperation:
    def test_empty_stack_is_an_error(self):
        with pytest.raises(EmptyScopeError):
            merge([])

    def test_child_alone(self):
        assert merge([ChildOf(DIV)]) == DIV

    def test_descendant_alone(self):
        assert merge([DescendantOf(DIV)]) == DIV

    def test_rooted_alone(self):
        assert merge([RootedAt(DIV)]) == DIV

    def test_refine_alone_applies_to_universal(self):
        assert merge([RefineSelf((Pseudo("hover"),))]) == Universal(frozenset({Pseudo("hover")}))


# ---------------------------------------------------------------------------
# Combining with the enclosing scope
# ---------------------------------------------------------------------------


class TestCombining:
    def test_child_of_outer(self):
        assert merge([ChildOf(A), ChildOf(DIV)]) == ChildCombinator(DIV, A)

    def test_descendant_of_outer(self):
        assert merge([DescendantOf(A), ChildOf(DIV)]) == DescendantCombinator(DIV, A)

    def test_rooted_is_planted_outermost(self):
        sel = merge([RootedAt(Element("body")), ChildOf(A)])
        assert sel == DescendantCombinator(Element("body"), A)
        assert render_selector(sel) == "body a"

    def test_refine_attaches_to_outer_selector(self):
        sel = merge([RefineSelf((Pseudo("hover"),)), ChildOf(A)])
        assert sel == Element("a", frozenset({Pseudo("hover")}))
        assert render_selector(sel) == "a:hover"

    def test_three_levels(self):
        sel = merge([ChildOf(SPAN), DescendantOf(A), ChildOf(DIV)])
        assert render_selector(sel) == "div a > span"


# ---------------------------------------------------------------------------
# Popping
# ---------------------------------------------------------------------------


class TestPopLevels:
    def test_pop_one_discards_only_itself(self):
        stack = [PopLevels(1), ChildOf(SPAN), DescendantOf(DIV)]
        assert effective_ops(stack) == [ChildOf(SPAN), DescendantOf(DIV)]
        assert render_selector(merge(stack)) == "div > span"

    def test_pop_two_discards_one_enclosing_level(self):
        stack = [PopLevels(2), ChildOf(SPAN), DescendantOf(DIV)]
        assert merge(stack) == DIV

    def test_pop_everything_is_an_error(self):
        with pytest.raises(EmptyScopeError):
            merge([PopLevels(3), ChildOf(SPAN), DescendantOf(DIV)])

    def test_pop_past_the_end_is_an_error(self):
        with pytest.raises(EmptyScopeError):
            merge([PopLevels(10), ChildOf(SPAN)])

    def test_tail_popped_to_nothing_is_an_error(self):
        with pytest.raises(EmptyScopeError):
            merge([ChildOf(A), PopLevels(2), ChildOf(DIV)])

    def test_refine_over_popped_tail_is_an_error(self):
        with pytest.raises(EmptyScopeError):
            merge([RefineSelf((HasClass("x"),)), PopLevels(1)])

    def test_rooted_over_popped_tail_is_an_error(self):
        with pytest.raises(EmptyScopeError):
            merge([RootedAt(Element("body")), PopLevels(1)])

    def test_leading_pop_before_single_entry(self):
        assert merge([PopLevels(1), ChildOf(A)]) == A

    def test_popped_pop_is_ignored(self):
        stack = [PopLevels(2), PopLevels(5), ChildOf(A), ChildOf(DIV)]
        assert render_selector(merge(stack)) == "div > a"

    def test_inner_pop_applies_to_outer_levels(self):
        stack = [ChildOf(A), PopLevels(2), ChildOf(SPAN), ChildOf(DIV)]
        assert render_selector(merge(stack)) == "div > a"


# ---------------------------------------------------------------------------
# Mixed stacks
# ---------------------------------------------------------------------------


class TestMixedStacks:
    def test_all_kinds(self):
        stack = [
            ChildOf(Element("em")),
            RootedAt(Element("html")),
            RefineSelf((HasClass("x"),)),
            PopLevels(1),
            DescendantOf(Element("p")),
            ChildOf(DIV),
        ]
        assert render_selector(merge(stack)) == "html div p.x > em"

    def test_rooted_between_children(self):
        stack = [ChildOf(A), RootedAt(Element("body")), ChildOf(DIV)]
        assert merge(stack) == ChildCombinator(
            DescendantCombinator(Element("body"), DIV), A
        )

    def test_refine_on_combinator(self):
        stack = [RefineSelf((Pseudo("hover"),)), ChildOf(A), ChildOf(DIV)]
        assert render_selector(merge(stack)) == "div > a:hover"

    def test_deep_stack_does_not_recurse(self):
        stack = [ChildOf(A)] * 5000
        sel = merge(stack)
        depth = 1
        while isinstance(sel, ChildCombinator):
            sel = sel.parent
            depth += 1
        assert depth == 5000
