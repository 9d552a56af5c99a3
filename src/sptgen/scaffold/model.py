"""Ordinal and marker-type assignment for a validated catalog."""

from __future__ import annotations

from sptgen.catalog import SENTINEL_ORDINAL, Catalog
from sptgen.scaffold._types import MarkerType, Ordinal
from sptgen.schema import ScaffoldSchema


def assign_ordinals(catalog: Catalog, schema: ScaffoldSchema) -> tuple[Ordinal, ...]:
    """Sentinel at 0, then kinds at 1..K in catalog order."""
    sentinel = Ordinal(SENTINEL_ORDINAL, schema.sentinel, schema.ordinal_name(schema.sentinel))
    return (sentinel,) + tuple(
        Ordinal(i, kind.name, schema.ordinal_name(kind.name))
        for i, kind in enumerate(catalog, start=1)
    )


def build_mapping(ordinals: tuple[Ordinal, ...]) -> dict[int, MarkerType]:
    """Total, injective ordinal -> marker type mapping.

    Marker types are named after their kind, so uniqueness of kind names
    (checked by validate_catalog) makes the mapping injective.
    """
    return {o.value: MarkerType(name=o.kind, ordinal=o.value) for o in ordinals}
