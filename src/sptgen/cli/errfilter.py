"""The `filter` command: shorten a compiler error dump to message and line."""

from __future__ import annotations

import click

from sptgen.tools.errfilter import filter_error


@click.command("filter")
@click.argument("raw", required=False, default="")
def filter_cmd(raw: str) -> None:
    """Print "<message> at line: <n>" for a parser error, else RAW unchanged."""
    click.echo(filter_error(raw))
