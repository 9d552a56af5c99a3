"""The `tags` command: regenerate tags.hpp from the element reference."""

from __future__ import annotations

from pathlib import Path

import click

from sptgen.cli._output import format_error
from sptgen.errors import HarvestError
from sptgen.tools.tags import DEFAULT_TAGS_URL, DEFAULT_TIMEOUT, harvest_tags


@click.command()
@click.option("--url", default=DEFAULT_TAGS_URL, show_default=True, help="Reference page.")
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False),
    default="tags.hpp",
    show_default=True,
    help="Header file to write.",
)
@click.option("--timeout", type=float, default=DEFAULT_TIMEOUT, help="HTTP timeout in seconds.")
def tags(url: str, output: str, timeout: float) -> None:
    """Harvest HTML tag names into a C++ header."""
    try:
        text = harvest_tags(url, timeout=timeout)
    except HarvestError as e:
        click.echo(format_error(e), err=True)
        raise SystemExit(1) from e

    Path(output).write_text(text, encoding="utf-8")
    click.echo(f"Wrote {output}")
