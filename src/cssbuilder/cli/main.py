"""cssbuilder CLI entry point: Click group with subcommands."""

import logging

import click

from cssbuilder import __version__


@click.group()
@click.version_option(version=__version__, prog_name="cssbuilder")
@click.option("-v", "--verbose", is_flag=True, help="Log builder events to stderr.")
def cli(verbose: bool) -> None:
    """cssbuilder - build CSS selectors from parts and combinators."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s"
        )


# Import and register subcommands
from cssbuilder.cli.build import build  # noqa: E402
from cssbuilder.cli.combine import combine  # noqa: E402

cli.add_command(build)
cli.add_command(combine)
