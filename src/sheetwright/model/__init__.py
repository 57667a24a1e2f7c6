"""Sheetwright model layer -- public type re-exports."""

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
    ScopeStack,
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

__all__ = [
    # selector
    "Predicate",
    "HasId",
    "HasClass",
    "HasAttr",
    "AttrEquals",
    "AttrStartsWith",
    "AttrEndsWith",
    "AttrContains",
    "AttrSpaceSeparatedContains",
    "AttrHyphenSeparatedContains",
    "Pseudo",
    "PseudoFunction",
    "PseudoElement",
    "Selector",
    "Universal",
    "Element",
    "ChildCombinator",
    "DescendantCombinator",
    "AdjacentSibling",
    "GeneralSibling",
    "Union",
    "refine",
    # scope
    "ScopeOp",
    "ScopeStack",
    "ChildOf",
    "DescendantOf",
    "RootedAt",
    "PopLevels",
    "RefineSelf",
    # rule
    "Plain",
    "Prefixed",
    "PropertyText",
    "Important",
    "Comment",
    "Modifier",
    "MediaModifier",
    "Feature",
    "MediaQuery",
    "PropertyDecl",
    "Nested",
    "Query",
    "Keyframes",
    "FontFace",
    "Import",
    "Rule",
]
