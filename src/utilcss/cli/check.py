"""CLI command: utilcss check -- load the style tables and summarize them."""

from __future__ import annotations

import click

from utilcss.cli.options import config_option, load_parser
from utilcss.stylesheet.media import media_query_prelude


@click.command()
@config_option
def check(config_dir: str) -> None:
    """Load the style tables and print what they contain.

    Exits with code 0 when every table loads, or code 1 otherwise.
    """
    tables = load_parser(config_dir).tables

    click.echo(f"OK: {config_dir}")
    click.echo(f"Attribute:   {tables.attribute_name}")
    click.echo(f"Root:        {len(tables.root)} variable(s)")
    click.echo(f"Elements:    {len(tables.elements)}")
    click.echo(f"Custom:      {len(tables.custom)}")
    click.echo(f"Utilities:   {len(tables.utilities)}")
    click.echo(f"Breakpoints: {len(tables.breakpoints)}")
    for breakpoint in tables.breakpoints.values():
        click.echo(f"  {breakpoint.name}: {media_query_prelude(breakpoint)}")
