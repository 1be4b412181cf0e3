"""Themer CLI entry point: Click group with subcommands."""

import logging

import click

from themer import __version__


@click.group()
@click.version_option(version=__version__, prog_name="themer")
@click.option("-v", "--verbose", is_flag=True, help="Log dropped keys and other details.")
def cli(verbose: bool) -> None:
    """Themer - render nested theme objects into stylesheet text."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# Import and register subcommands
from themer.cli.render import render  # noqa: E402
from themer.cli.validate import validate  # noqa: E402

cli.add_command(render)
cli.add_command(validate)
