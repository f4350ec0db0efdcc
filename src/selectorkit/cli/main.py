"""selectorkit CLI entry point: Click group with subcommands."""

import logging

import click

from selectorkit import __version__
from selectorkit.config import SelectorkitConfig


@click.group()
@click.version_option(version=__version__, prog_name="selectorkit")
@click.option("--verbose", is_flag=True, default=False, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """selectorkit - build CSS selectors and encode plain objects."""
    config = SelectorkitConfig(log_level="DEBUG" if verbose else "WARNING")
    logging.basicConfig(level=config.log_level)
    ctx.obj = config


# Import and register subcommands
from selectorkit.cli.build import build  # noqa: E402
from selectorkit.cli.objects import rectangle, to_json_cmd  # noqa: E402

cli.add_command(build)
cli.add_command(rectangle)
cli.add_command(to_json_cmd)
