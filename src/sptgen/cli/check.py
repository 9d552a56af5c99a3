"""The `check` command: validate a catalog without generating anything."""

from __future__ import annotations

import click

from sptgen.catalog import validate_catalog
from sptgen.cli._output import format_error, format_validation
from sptgen.cli._shared import catalog_option, kind_option, resolve_catalog, slots_option
from sptgen.errors import InvalidConfigError


@click.command()
@catalog_option
@kind_option
@slots_option
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["json", "text"]),
    default="text",
    help="Output format.",
)
def check(
    catalog_file: str | None,
    kinds: tuple[str, ...],
    slots: int | None,
    output_format: str,
) -> None:
    """Validate catalog names, uniqueness and slot budget."""
    try:
        config = resolve_catalog(catalog_file, kinds, slots)
    except InvalidConfigError as e:
        click.echo(format_error(e), err=True)
        raise SystemExit(1) from e

    result = validate_catalog(config.catalog, config.slots, config.schema)
    output = format_validation(result, output_format=output_format)
    if output:
        click.echo(output)
    if result.blocked:
        raise SystemExit(1)
