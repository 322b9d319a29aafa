"""Options and helpers shared by the CLI commands."""

from __future__ import annotations

import sys

import click

from utilcss.config.settings import ParserSettings
from utilcss.errors import ConfigLoadError
from utilcss.parser import CSSParser

config_option = click.option(
    "--config",
    "config_dir",
    default="configs",
    show_default=True,
    type=click.Path(file_okay=False),
    help="Directory holding the INI style tables",
)


def load_parser(config_dir: str) -> CSSParser:
    """Build a CSSParser, exiting with code 1 if the tables cannot be loaded."""
    try:
        return CSSParser(ParserSettings(config_dir=config_dir))
    except ConfigLoadError as exc:
        click.echo(f"Config error: {exc}", err=True)
        sys.exit(1)
