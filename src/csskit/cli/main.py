"""csskit CLI entry point: Click group with subcommands."""

import logging

import click

from csskit import __version__
from csskit.config import CsskitConfig

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


@click.group()
@click.version_option(version=__version__, prog_name="csskit")
@click.option(
    "--log-level",
    default="WARNING",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    help="Logging verbosity",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str) -> None:
    """csskit - build CSS selectors and work with small value objects."""
    config = CsskitConfig(log_level=log_level.upper())
    logging.basicConfig(level=config.log_level)
    ctx.obj = config


# Import and register subcommands
from csskit.cli.area import area  # noqa: E402
from csskit.cli.selector import build, combine  # noqa: E402

cli.add_command(build)
cli.add_command(combine)
cli.add_command(area)
