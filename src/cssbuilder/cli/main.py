"""cssbuilder CLI entry point: Click group with subcommands."""

import logging

import click

from cssbuilder import __version__
from cssbuilder.config import CssBuilderConfig


@click.group()
@click.version_option(version=__version__, prog_name="cssbuilder")
@click.option(
    "--log-level",
    default=CssBuilderConfig.log_level,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging verbosity",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str) -> None:
    """cssbuilder - build CSS selectors and small JSON objects."""
    config = CssBuilderConfig(log_level=log_level.upper())
    logging.basicConfig(
        level=config.log_level, format="%(levelname)s %(name)s: %(message)s"
    )
    ctx.obj = config


# Import and register subcommands
from cssbuilder.cli.selector import selector  # noqa: E402
from cssbuilder.cli.objects import decode_rectangle, rectangle  # noqa: E402

cli.add_command(selector)
cli.add_command(rectangle)
cli.add_command(decode_rectangle)
