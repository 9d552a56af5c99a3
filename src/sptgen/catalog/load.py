"""Catalog files: TOML with a [catalog] table and an optional [schema] table.

    [catalog]
    kinds = ["Expecting_an_identifier", "Missing_open_bracket"]
    slots = 20

    [schema]
    warnings_field = "m_arrWarns"
"""

from __future__ import annotations

import tomllib
from pathlib import Path

from sptgen.catalog._types import Catalog, CatalogConfig
from sptgen.catalog.defaults import DEFAULT_SLOTS
from sptgen.errors import InvalidConfigError
from sptgen.schema import DEFAULT_SCHEMA, ScaffoldSchema


def _load_file(path: Path) -> dict:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise InvalidConfigError(f"cannot read catalog file {path}: {e.strerror}") from e
    try:
        return tomllib.loads(text)
    except tomllib.TOMLDecodeError as e:
        raise InvalidConfigError(f"invalid TOML in {path}: {e}") from e


def parse_catalog_config(data: dict, *, source: str = "<config>") -> CatalogConfig:
    """Turn a decoded catalog document into a CatalogConfig.

    Only the shape is checked here; names and budget are validated by
    validate_catalog so that every problem is reported together.
    """
    table = data.get("catalog")
    if not isinstance(table, dict):
        raise InvalidConfigError(f"{source}: missing [catalog] table")

    kinds = table.get("kinds")
    if not isinstance(kinds, list) or not all(isinstance(k, str) for k in kinds):
        raise InvalidConfigError(f"{source}: catalog.kinds must be a list of strings")

    slots = table.get("slots", DEFAULT_SLOTS)
    if isinstance(slots, bool) or not isinstance(slots, int):
        raise InvalidConfigError(f"{source}: catalog.slots must be an integer")

    schema_table = data.get("schema", {})
    if not isinstance(schema_table, dict):
        raise InvalidConfigError(f"{source}: [schema] must be a table")
    try:
        schema = ScaffoldSchema.from_mapping(schema_table) if schema_table else DEFAULT_SCHEMA
    except KeyError as e:
        raise InvalidConfigError(f"{source}: unknown schema key {e.args[0]!r}") from e
    except TypeError as e:
        raise InvalidConfigError(f"{source}: {e}") from e

    return CatalogConfig(catalog=Catalog.from_names(kinds), slots=slots, schema=schema)


def load_catalog_file(path: str | Path) -> CatalogConfig:
    """Read and parse a catalog TOML file."""
    path = Path(path)
    return parse_catalog_config(_load_file(path), source=str(path))
