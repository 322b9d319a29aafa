"""CLI command: utilcss css -- print the stylesheet a document needs."""

from __future__ import annotations

import click

from utilcss.cli.options import config_option, load_parser


@click.command()
@click.argument("markup", type=click.File("r", encoding="utf-8"))
@config_option
def css(markup, config_dir: str) -> None:
    """Print the stylesheet generated for MARKUP without modifying it."""
    parser = load_parser(config_dir)
    click.echo(parser.build_stylesheet(markup.read()))
