"""Scaffold generator: catalog in, compile-time diagnostic header out."""

from __future__ import annotations

from sptgen.catalog import DEFAULT_SLOTS, Catalog, validate_catalog
from sptgen.scaffold._types import (
    DispatchSlot,
    MarkerType,
    Ordinal,
    ReportSection,
    ScaffoldArtifact,
    TrialExpression,
)
from sptgen.scaffold.model import assign_ordinals, build_mapping
from sptgen.scaffold.sections import (
    assemble,
    dispatch_section,
    dispatch_slot,
    mapping_section,
    marker_section,
    ordinal_section,
    report_section,
)
from sptgen.schema import DEFAULT_SCHEMA, ScaffoldSchema

__all__ = [
    "DispatchSlot",
    "MarkerType",
    "Ordinal",
    "ReportSection",
    "ScaffoldArtifact",
    "TrialExpression",
    "generate",
]


def generate(
    catalog: Catalog,
    slots: int = DEFAULT_SLOTS,
    schema: ScaffoldSchema = DEFAULT_SCHEMA,
) -> ScaffoldArtifact:
    """Generate the scaffold header for `catalog` with `slots` warning slots.

    Steps:
        1. Validate names, uniqueness, budget and schema (all at once)
        2. Assign ordinals (sentinel first) and the ordinal -> marker mapping
        3. Unroll one dispatch slot per index in 0..slots-1
        4. Build the report macro and assemble the text

    Raises:
        CatalogError: a precondition does not hold. Nothing is generated.
    """
    validate_catalog(catalog, slots, schema).raise_for_errors()

    ordinals = assign_ordinals(catalog, schema)
    by_ordinal = build_mapping(ordinals)
    mapping = tuple((o, by_ordinal[o.value]) for o in ordinals)
    markers = tuple(marker for _, marker in mapping)

    dispatch = tuple(dispatch_slot(i, mapping, schema) for i in range(slots))
    report = report_section(dispatch, schema)

    text = assemble(
        kinds=len(catalog),
        slots=slots,
        schema=schema,
        ordinals=ordinal_section(ordinals, schema),
        markers=marker_section(markers),
        mapping=mapping_section(mapping, schema),
        dispatch=dispatch_section(dispatch),
        report=report,
    )

    return ScaffoldArtifact(
        catalog=catalog,
        slots=slots,
        schema=schema,
        ordinals=ordinals,
        markers=markers,
        mapping=mapping,
        dispatch=dispatch,
        report=report,
        text=text,
    )
