"""Error hierarchy for sheetwright."""

from __future__ import annotations


class SheetwrightError(Exception):
    """Base error for all sheetwright errors."""


class EmptyScopeError(SheetwrightError):
    """Raised when a selector is requested from an empty scope stack.

    Scope stacks are produced by whoever built the rule tree; an empty one at
    a rule that declares properties means that tree is malformed.
    """

    def __init__(self, message: str = "cannot resolve a selector from an empty scope stack") -> None:
        super().__init__(message)


class LoadError(SheetwrightError):
    """Raised when a JSON rule document cannot be turned into a rule tree."""

    def __init__(self, message: str, path: str | None = None) -> None:
        self.path = path
        if path:
            message = f"{path}: {message}"
        super().__init__(message)
