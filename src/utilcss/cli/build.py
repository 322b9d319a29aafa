"""CLI command: utilcss build -- write a document with its stylesheet injected."""

from __future__ import annotations

import click

from utilcss.cli.options import config_option, load_parser


@click.command()
@click.argument("markup", type=click.File("r", encoding="utf-8"))
@config_option
@click.option(
    "-o",
    "--output",
    type=click.File("w", encoding="utf-8"),
    default="-",
    help="Where to write the document (default: stdout)",
)
def build(markup, config_dir: str, output) -> None:
    """Inject the generated stylesheet into MARKUP.

    MARKUP is an HTML file, or - for stdin.
    """
    parser = load_parser(config_dir)
    output.write(parser.parse(markup.read()))
