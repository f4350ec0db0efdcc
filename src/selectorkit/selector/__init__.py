from selectorkit.selector.builder import Combinator, combine, empty, render
from selectorkit.selector.errors import (
    DuplicateViolation,
    ExpressionError,
    OrderViolation,
    SelectorError,
)
from selectorkit.selector.expression import parse_expression
from selectorkit.selector.model import Selector, Tier

__all__ = [
    "Combinator",
    "DuplicateViolation",
    "ExpressionError",
    "OrderViolation",
    "Selector",
    "SelectorError",
    "Tier",
    "combine",
    "empty",
    "parse_expression",
    "render",
]
