"""Builder entry points: the empty selector, combinators and rendering."""

from __future__ import annotations

from enum import Enum

from selectorkit.selector.model import Selector, Tier

__all__ = ["Combinator", "combine", "empty", "render"]

_EMPTY = Selector()


class Combinator(str, Enum):
    """The four CSS combinators joining two compound selectors."""

    DESCENDANT = " "
    CHILD = ">"
    ADJACENT_SIBLING = "+"
    GENERAL_SIBLING = "~"


def empty() -> Selector:
    """Return the starting selector: empty text, no fragment tier."""
    return _EMPTY


def render(selector: Selector) -> str:
    return selector.render()


def combine(left: Selector, combinator: str | Combinator, right: Selector) -> Selector:
    """Join two selectors with *combinator*, padded by one space on each side.

    The combinator is spliced in verbatim, so the descendant combinator
    produces three consecutive spaces. The result carries no trailing tier.
    """
    symbol = combinator.value if isinstance(combinator, Combinator) else combinator
    return Selector(
        text=f"{render(left)} {symbol} {render(right)}",
        tier=Tier.NONE,
    )
