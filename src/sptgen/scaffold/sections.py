"""C++ emission for each scaffold section.

Each function is a pure projection of the ordinals/mapping onto header
lines. The dispatch section is fully unrolled here: one macro per slot,
one trial per kind, because the parser has no indexed jump or reflection
available at the point where warnings are reported.
"""

from __future__ import annotations

from sptgen.scaffold._types import (
    DispatchSlot,
    MarkerType,
    Ordinal,
    ReportSection,
    TrialExpression,
)
from sptgen.schema import ScaffoldSchema


def _macro(header: str, body: list[str]) -> list[str]:
    """Join a macro definition with line continuations."""
    lines = [header, *body]
    return [f"{line} \\" for line in lines[:-1]] + [lines[-1]]


def ordinal_section(ordinals: tuple[Ordinal, ...], schema: ScaffoldSchema) -> list[str]:
    names = [o.name for o in ordinals]
    return [
        f"enum {schema.enum_name}",
        "{",
        *[f"  {name}," for name in names[:-1]],
        f"  {names[-1]}",
        "};",
    ]


def marker_section(markers: tuple[MarkerType, ...]) -> list[str]:
    # The sentinel is only ever named, never instantiated, so it stays incomplete.
    sentinel, *rest = markers
    return [f"struct {sentinel.name};", *[f"struct {m.name} {{}};" for m in rest]]


def mapping_section(
    mapping: tuple[tuple[Ordinal, MarkerType], ...], schema: ScaffoldSchema
) -> list[str]:
    lines = [f"template<{schema.enum_name} m> struct {schema.mapping_name}{{}};", ""]
    for ordinal, marker in mapping:
        lines.append(
            f"template<> struct {schema.mapping_name}<{ordinal.name}>"
            f"{{using type = {marker.name};}};"
        )
    return lines


def trial_expression(ordinal: Ordinal, marker: MarkerType, schema: ScaffoldSchema) -> TrialExpression:
    ns = schema.namespace
    resolved = f"{ns}::{schema.mapping_name}<{ns}::{ordinal.name}>::type"
    text = (
        f"{ns}::{schema.condition_template}<w.{schema.kind_field} == {ns}::{ordinal.name}, "
        f"{ns}::{schema.warning_template}<w.{schema.row_field}, w.{schema.col_field}, "
        f"{resolved}>> ();"
    )
    return TrialExpression(ordinal=ordinal, marker=marker, text=text)


def dispatch_slot(
    index: int,
    mapping: tuple[tuple[Ordinal, MarkerType], ...],
    schema: ScaffoldSchema,
) -> DispatchSlot:
    trials = tuple(
        trial_expression(ordinal, marker, schema)
        for ordinal, marker in mapping
        if not ordinal.is_sentinel
    )
    body = [f"if ({index} < n)", "{"]
    if trials:
        body.append(f"  constexpr auto w = parser.{schema.warnings_field}[{index}];")
        body.extend(f"  {t.text}" for t in trials)
    body.append("}")
    macro = schema.slot_macro(index)
    return DispatchSlot(
        index=index,
        trials=trials,
        macro=macro,
        lines=tuple(_macro(f"#define {macro}(parser)", body)),
    )


def dispatch_section(slots: tuple[DispatchSlot, ...]) -> list[str]:
    lines: list[str] = []
    for slot in slots:
        lines.extend(slot.lines)
        lines.append("")
    return lines[:-1]


def report_section(slots: tuple[DispatchSlot, ...], schema: ScaffoldSchema) -> ReportSection:
    ns = schema.namespace
    row = f"parser.{schema.error_row_field}"
    col = f"parser.{schema.error_col_field}"
    slot_calls = tuple(f"{slot.macro}(parser);" for slot in slots)
    error_check = f"constexpr bool hasErr = {row} >= 0 && {col} >= 0;"
    error_descriptor = (
        f"{ns}::{schema.condition_template}<hasErr, {ns}::{schema.error_template}<{row}, {col}, "
        f"{ns}::{schema.mapping_name}<parser.{schema.error_kind_field}>::type>> {{}};"
    )
    body = [
        f"constexpr int n = parser.{schema.warnings_field}.size();",
        *slot_calls,
        error_check,
        error_descriptor,
    ]
    return ReportSection(
        slot_calls=slot_calls,
        error_check=error_check,
        error_descriptor=error_descriptor,
        lines=tuple(_macro(f"#define {schema.report_macro}(parser)", body)),
    )


def assemble(
    *,
    kinds: int,
    slots: int,
    schema: ScaffoldSchema,
    ordinals: list[str],
    markers: list[str],
    mapping: list[str],
    dispatch: list[str],
    report: ReportSection,
) -> str:
    guard = schema.include_guard
    lines = [
        f"// Generated by sptgen from {kinds} error kinds and {slots} warning slots.",
        "// Do not edit; regenerate from the catalog instead.",
        "",
        f"#ifndef {guard}",
        f"#define {guard}",
        "",
        *ordinals,
        "",
        *markers,
        "",
        *mapping,
        "",
        f"#ifndef {schema.debug_macro}",
        "",
        *dispatch,
        "",
        *report.lines,
        "",
        "#else",
        "",
        f"#define {schema.report_macro}(parser)",
        "",
        "#endif",
        "",
        f"#endif  // {guard}",
    ]
    return "\n".join(lines) + "\n"
