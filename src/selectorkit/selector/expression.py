"""Lark Transformer that evaluates builder call chains into Selector values."""

from __future__ import annotations

import logging
import re
from pathlib import Path

from lark import Lark, Token, Transformer
from lark.exceptions import VisitError

from selectorkit.selector.builder import combine, empty
from selectorkit.selector.errors import ExpressionError
from selectorkit.selector.model import Selector, Tier

__all__ = ["parse_expression"]

logger = logging.getLogger(__name__)

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"

_FRAGMENT_TIERS: dict[str, Tier] = {
    "element": Tier.ELEMENT,
    "id": Tier.ID,
    "class": Tier.CLASS,
    "class_": Tier.CLASS,
    "attribute": Tier.ATTRIBUTE,
    "attr": Tier.ATTRIBUTE,
    "pseudo_class": Tier.PSEUDO_CLASS,
    "pseudo_element": Tier.PSEUDO_ELEMENT,
}

_ESCAPE_RE = re.compile(r"\\(.)", re.DOTALL)


def _unquote(token: Token) -> str:
    """Strip surrounding quotes and resolve backslash escapes."""
    return _ESCAPE_RE.sub(r"\1", str(token)[1:-1])


class SelectorTransformer(Transformer):  # type: ignore[type-arg]
    """Fold each call chain onto the empty selector, bottom-up."""

    def call(self, items: list[Token]) -> tuple[Tier, str]:
        return (_FRAGMENT_TIERS[str(items[0])], _unquote(items[1]))

    def chain(self, items: list[tuple[Tier, str]]) -> Selector:
        selector = empty()
        for tier, token in items:
            selector = selector.append(tier, token)
        return selector

    def combine(self, items: list[object]) -> Selector:
        left, symbol, right = items
        return combine(left, _unquote(symbol), right)  # type: ignore[arg-type]

    def start(self, items: list[Selector]) -> Selector:
        return items[0]


def parse_expression(source: str) -> Selector:
    """Parse and evaluate a builder expression into a Selector.

    Ordering and duplicate errors raised while evaluating propagate as-is;
    syntax errors are reported as ExpressionError.
    """
    parser = Lark(
        GRAMMAR_PATH.read_text(encoding="utf-8"),
        parser="lalr",
        start="start",
    )
    try:
        tree = parser.parse(source)
    except Exception as e:
        line = getattr(e, "line", None)
        column = getattr(e, "column", None)
        raise ExpressionError(str(e), line=line, column=column) from e
    try:
        selector = SelectorTransformer().transform(tree)
    except VisitError as e:
        raise e.orig_exc from None
    logger.debug("Evaluated %r -> %r", source, selector.text)
    return selector
