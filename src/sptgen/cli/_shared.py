"""Shared helpers for the catalog-driven commands."""

from __future__ import annotations

import click

from sptgen.catalog import (
    DEFAULT_SLOTS,
    Catalog,
    CatalogConfig,
    default_catalog,
    load_catalog_file,
)
from sptgen.schema import DEFAULT_SCHEMA

catalog_option = click.option(
    "--catalog",
    "catalog_file",
    type=click.Path(dir_okay=False),
    default=None,
    help="Catalog TOML file ([catalog] kinds/slots, optional [schema]).",
)
kind_option = click.option(
    "--kind",
    "kinds",
    multiple=True,
    help="Error kind name, in ordinal order. Repeat; replaces the catalog's kinds.",
)
slots_option = click.option(
    "--slots",
    type=int,
    default=None,
    help=f"Number of warning slots to unroll (default: file value or {DEFAULT_SLOTS}).",
)


def resolve_catalog(
    catalog_file: str | None,
    kinds: tuple[str, ...],
    slots: int | None,
) -> CatalogConfig:
    """Resolve catalog settings: file (or built-in default), then flag overrides.

    Raises InvalidConfigError if the catalog file cannot be used.
    """
    if catalog_file is not None:
        config = load_catalog_file(catalog_file)
    else:
        config = CatalogConfig(catalog=default_catalog(), slots=DEFAULT_SLOTS, schema=DEFAULT_SCHEMA)

    catalog = Catalog.from_names(kinds) if kinds else config.catalog
    return CatalogConfig(
        catalog=catalog,
        slots=slots if slots is not None else config.slots,
        schema=config.schema,
    )
