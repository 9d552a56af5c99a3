"""The `generate` command: write the scaffold header for a catalog."""

from __future__ import annotations

from pathlib import Path

import click

from sptgen.cli._output import format_error
from sptgen.cli._shared import catalog_option, kind_option, resolve_catalog, slots_option
from sptgen.errors import CatalogError
from sptgen.genlog import cleanup_old_logs, log_generation
from sptgen.scaffold import generate as generate_scaffold


@click.command()
@catalog_option
@kind_option
@slots_option
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False),
    default=None,
    help="Write the header to this file instead of stdout.",
)
@click.option("--no-log", is_flag=True, help="Do not record this run in the generation log.")
def generate(
    catalog_file: str | None,
    kinds: tuple[str, ...],
    slots: int | None,
    output: str | None,
    no_log: bool,
) -> None:
    """Generate the error scaffold header (parse_error_generated.h)."""
    config = None
    try:
        config = resolve_catalog(catalog_file, kinds, slots)
        artifact = generate_scaffold(config.catalog, config.slots, config.schema)
    except CatalogError as e:
        click.echo(format_error(e), err=True)
        if not no_log:
            log_generation(
                kinds=config.catalog.names if config is not None else list(kinds),
                slots=config.slots if config is not None else slots,
                blocked=True,
                diagnostics=[str(d.code) for d in e.diagnostics] or [str(e.code)],
                source=catalog_file,
                output=output,
            )
        raise SystemExit(1) from e

    if output is not None:
        try:
            Path(output).write_text(artifact.text, encoding="utf-8")
        except OSError as e:
            click.echo(f"error: cannot write {output}: {e.strerror or e}", err=True)
            raise SystemExit(1) from e
    else:
        click.echo(artifact.text, nl=False)

    if not no_log:
        log_generation(
            kinds=config.catalog.names,
            slots=config.slots,
            diagnostics=[],
            source=catalog_file,
            output=output,
        )
        cleanup_old_logs()
