"""The `skeleton` command: print a test program for a template file."""

from __future__ import annotations

import click

from sptgen.tools.skeleton import build_skeleton


@click.command()
@click.argument("source_path")
def skeleton(source_path: str) -> None:
    """Print a main() that compiles SOURCE_PATH through the parser."""
    click.echo(build_skeleton(source_path))
