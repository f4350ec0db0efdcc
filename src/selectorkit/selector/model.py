"""Selector model: the Tier ranking and the immutable Selector value."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import IntEnum

from selectorkit.selector.errors import DuplicateViolation, OrderViolation

logger = logging.getLogger(__name__)


class Tier(IntEnum):
    """Ordering rank of a selector fragment kind.

    Fragments must be appended in non-decreasing tier order. NONE marks a
    selector with no trailing fragment (freshly created or combined).
    """

    NONE = 0
    ELEMENT = 1
    ID = 2
    CLASS = 3
    ATTRIBUTE = 4
    PSEUDO_CLASS = 5
    PSEUDO_ELEMENT = 6


# Kinds that may occur at most once inside one compound selector.
SINGLETON_TIERS = frozenset({Tier.ELEMENT, Tier.ID, Tier.PSEUDO_ELEMENT})

# (prefix, suffix) wrapped around each token.
_PUNCTUATION: dict[Tier, tuple[str, str]] = {
    Tier.ELEMENT: ("", ""),
    Tier.ID: ("#", ""),
    Tier.CLASS: (".", ""),
    Tier.ATTRIBUTE: ("[", "]"),
    Tier.PSEUDO_CLASS: (":", ""),
    Tier.PSEUDO_ELEMENT: ("::", ""),
}


def check_order(current: Tier, attempted: Tier) -> None:
    """Raise if a fragment of tier *attempted* may not follow *current*."""
    if attempted < current:
        logger.debug("Order violation: tier %d after tier %d", attempted, current)
        raise OrderViolation(current, attempted)
    if attempted == current and attempted in SINGLETON_TIERS:
        logger.debug("Duplicate violation: tier %d", attempted)
        raise DuplicateViolation(attempted)


@dataclass(frozen=True)
class Selector:
    """An immutable, partially built CSS selector.

    Every fragment method validates ordering against ``tier`` and returns a
    new Selector; the receiver is left untouched, so several chains can
    safely branch from the same value.
    """

    text: str = ""
    tier: Tier = Tier.NONE

    def append(self, tier: Tier, token: str) -> Selector:
        """Append *token* as a fragment of the given tier."""
        tier = Tier(tier)
        if tier is Tier.NONE:
            raise ValueError("Cannot append a fragment without a tier")
        check_order(self.tier, tier)
        prefix, suffix = _PUNCTUATION[tier]
        return replace(self, text=f"{self.text}{prefix}{token}{suffix}", tier=tier)

    # --- fragment operations --------------------------------------------------

    def element(self, name: str) -> Selector:
        return self.append(Tier.ELEMENT, name)

    def id(self, name: str) -> Selector:
        return self.append(Tier.ID, name)

    def class_(self, name: str) -> Selector:
        return self.append(Tier.CLASS, name)

    def attribute(self, spec: str) -> Selector:
        """Append an attribute fragment; *spec* is wrapped in brackets."""
        return self.append(Tier.ATTRIBUTE, spec)

    def pseudo_class(self, name: str) -> Selector:
        return self.append(Tier.PSEUDO_CLASS, name)

    def pseudo_element(self, name: str) -> Selector:
        return self.append(Tier.PSEUDO_ELEMENT, name)

    # --- rendering ------------------------------------------------------------

    def render(self) -> str:
        """Return the accumulated selector text."""
        return self.text

    def __str__(self) -> str:
        return self.text
