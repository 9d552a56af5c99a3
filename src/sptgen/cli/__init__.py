"""CLI entry point: `sptgen`."""

from __future__ import annotations

import click

from sptgen.cli.check import check
from sptgen.cli.errfilter import filter_cmd
from sptgen.cli.generate import generate
from sptgen.cli.skeleton import skeleton
from sptgen.cli.tags import tags


@click.group()
@click.version_option(package_name="sptgen")
def main() -> None:
    """sptgen: scaffolding and helper tools for the seephit template parser."""


main.add_command(generate)
main.add_command(check)
main.add_command(filter_cmd)
main.add_command(skeleton)
main.add_command(tags)
