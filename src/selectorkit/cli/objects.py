"""CLI commands for the object helpers: rectangle and to-json."""

from __future__ import annotations

import json
import sys
from dataclasses import replace

import click

from selectorkit.config import SelectorkitConfig
from selectorkit.objects import Rectangle, to_json


@click.command()
@click.argument("width", type=float)
@click.argument("height", type=float)
def rectangle(width: float, height: float) -> None:
    """Print a WIDTH x HEIGHT rectangle and its area as JSON."""
    rect = Rectangle(width, height)
    click.echo(to_json({"width": rect.width, "height": rect.height, "area": rect.area()}))


@click.command("to-json")
@click.argument("value")
@click.option("--indent", type=int, default=None, help="Indent nested JSON by N spaces")
@click.option("--sort-keys", is_flag=True, default=False, help="Sort object keys")
@click.pass_obj
def to_json_cmd(config: SelectorkitConfig | None, value: str, indent: int | None, sort_keys: bool) -> None:
    """Re-encode the JSON literal VALUE."""
    config = replace(config or SelectorkitConfig(), json_indent=indent, sort_keys=sort_keys)
    try:
        decoded = json.loads(value)
    except json.JSONDecodeError as exc:
        click.echo(f"Error: invalid JSON: {exc}", err=True)
        sys.exit(1)
    click.echo(to_json(decoded, config=config))
