"""Graffiti CLI entry point: Click group with subcommands."""

import logging

import click

from graffiti import __version__
from graffiti.config import GraffitiConfig

_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


@click.group()
@click.version_option(version=__version__, prog_name="graffiti")
@click.option(
    "--log-level",
    type=click.Choice(_LEVELS, case_sensitive=False),
    default=GraffitiConfig.log_level,
    show_default=True,
    help="Logging level; DEBUG shows every skipped rule and dropped declaration.",
)
@click.option(
    "--encoding",
    default=GraffitiConfig.encoding,
    show_default=True,
    help="Encoding used to read stylesheet files.",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str, encoding: str) -> None:
    """Graffiti - parse CSS-subset stylesheets and resolve element styles."""
    logging.basicConfig(level=log_level.upper(), format="%(levelname)s %(name)s: %(message)s")
    ctx.obj = GraffitiConfig(encoding=encoding, log_level=log_level.upper())


# Import and register subcommands
from graffiti.cli.tokenize import tokenize  # noqa: E402
from graffiti.cli.inspect import inspect  # noqa: E402
from graffiti.cli.style import style  # noqa: E402

cli.add_command(tokenize)
cli.add_command(inspect)
cli.add_command(style)
