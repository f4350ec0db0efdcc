"""CLI command: selectorkit build -- evaluate a builder expression."""

from __future__ import annotations

import sys

import click

from selectorkit.objects import to_json
from selectorkit.selector import SelectorError, parse_expression


@click.command()
@click.argument("expression")
@click.option("--json", "as_json", is_flag=True, default=False, help="Print selector and tier as JSON")
def build(expression: str, as_json: bool) -> None:
    """Evaluate a builder EXPRESSION and print the rendered selector.

    Example: selectorkit build 'element("a").pseudo_class("focus")'

    Exits with code 1 on a syntax error or an ordering violation.
    """
    try:
        selector = parse_expression(expression)
    except SelectorError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    if as_json:
        click.echo(to_json({"selector": selector.render(), "tier": int(selector.tier)}))
    else:
        click.echo(selector.render())
