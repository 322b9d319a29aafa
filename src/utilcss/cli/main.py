"""utilcss CLI entry point: Click group with subcommands."""

import logging

import click

from utilcss import __version__


@click.group()
@click.version_option(version=__version__, prog_name="utilcss")
@click.option("-v", "--verbose", is_flag=True, help="Log debug output to stderr")
def cli(verbose: bool) -> None:
    """utilcss - inject generated stylesheets into HTML documents."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# Import and register subcommands
from utilcss.cli.build import build  # noqa: E402
from utilcss.cli.css import css  # noqa: E402
from utilcss.cli.check import check  # noqa: E402

cli.add_command(build)
cli.add_command(css)
cli.add_command(check)
