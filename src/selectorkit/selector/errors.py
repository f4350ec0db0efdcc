"""Error hierarchy for selector construction."""

from __future__ import annotations


class SelectorError(Exception):
    """Base error for everything raised while building a selector."""


class OrderViolation(SelectorError):
    """A fragment of lower tier was appended after one of higher tier."""

    def __init__(self, current: int, attempted: int) -> None:
        self.current = current
        self.attempted = attempted
        super().__init__(
            "Selector parts should be arranged in the following order: "
            "element, id, class, attribute, pseudo-class, pseudo-element"
        )


class DuplicateViolation(SelectorError):
    """A singleton fragment (element, id, pseudo-element) was appended twice."""

    def __init__(self, tier: int) -> None:
        self.tier = tier
        super().__init__(
            "Element, id and pseudo-element should not occur more than one "
            "time inside the selector"
        )


class ExpressionError(SelectorError):
    """Raised when a builder expression cannot be parsed."""

    def __init__(
        self, message: str, line: int | None = None, column: int | None = None
    ):
        self.line = line
        self.column = column
        super().__init__(message)
