"""Spelling of the downstream parser's structures in the emitted scaffold.

The parser's field names changed between snapshots, so nothing in the
generator hard-codes them: every name the artifact references or declares
comes from a ScaffoldSchema. DEFAULT_SCHEMA matches the current parser.
"""

from __future__ import annotations

from dataclasses import dataclass, fields


@dataclass(frozen=True)
class ScaffoldSchema:
    # Declarations
    namespace: str = "spt"
    enum_name: str = "Messages"
    mapping_name: str = "MsgToType"
    ordinal_prefix: str = "Error_"
    sentinel: str = "None"

    # Parser-side field names
    warnings_field: str = "m_arrWarns"
    kind_field: str = "m"
    row_field: str = "row"
    col_field: str = "col"
    error_row_field: str = "m_iErrRow"
    error_col_field: str = "m_iErrCol"
    error_kind_field: str = "m_arrErrs"
    warning_record: str = "Message"

    # Reporting templates provided by the parser headers
    condition_template: str = "IF"
    warning_template: str = "Warning"
    error_template: str = "Error"

    # Preprocessor names
    include_guard: str = "SEEPHIT_PARSE_ERROR_GENERATED_H"
    debug_macro: str = "SPT_DEBUG"
    report_macro: str = "REPORT_ERRORS"
    slot_macro_prefix: str = "SPT_DISPATCH_SLOT_"

    def ordinal_name(self, kind: str) -> str:
        return f"{self.ordinal_prefix}{kind}"

    def slot_macro(self, index: int) -> str:
        return f"{self.slot_macro_prefix}{index}"

    def declared_names(self) -> frozenset[str]:
        """Names the scaffold declares or relies on in the parser namespace.

        A kind named after one of these would shadow it, or be expanded away
        by one of the header's own macros. `type` is the member alias every
        mapping specialization declares.
        """
        return frozenset(
            {
                "type",
                self.warning_record,
                self.include_guard,
                self.debug_macro,
                self.report_macro,
                self.enum_name,
                self.mapping_name,
                self.sentinel,
                self.condition_template,
                self.warning_template,
                self.error_template,
            }
        )

    @classmethod
    def field_names(cls) -> list[str]:
        return [f.name for f in fields(cls)]

    @classmethod
    def from_mapping(cls, data: dict[str, object]) -> ScaffoldSchema:
        """Build a schema from a config table, rejecting unknown keys.

        Raises KeyError naming the first unknown key and TypeError for a
        non-string value.
        """
        known = set(cls.field_names())
        for key, value in data.items():
            if key not in known:
                raise KeyError(key)
            if not isinstance(value, str):
                raise TypeError(f"schema.{key} must be a string, got {type(value).__name__}")
        return cls(**data)  # type: ignore[arg-type]


DEFAULT_SCHEMA = ScaffoldSchema()
