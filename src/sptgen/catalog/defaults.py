"""The parser's own error catalog, in the order its enum was first published.

Reordering this list renumbers every ordinal in the generated header.
"""

from __future__ import annotations

from sptgen.catalog._types import Catalog

DEFAULT_SLOTS = 20

DEFAULT_KINDS: tuple[str, ...] = (
    "Expecting_an_identifier",
    "Unexpected_character_inside_tag_content",
    "Expecting_a_tag_name_after_open_bracket",
    "Empty_value_for_non_boolean_attribute",
    "Duplicate_ID_on_tag",
    "Expecting_a_value_for_attribute",
    "Missing_open_bracket",
    "Unknown_tag_name",
    "Missing_close_bracket_on_void_tag",
    "Missing_close_bracket_on_open_tag",
    "Expecting_a_close_tag",
    "Mismatched_Close_Tag",
    "Missing_close_bracket_in_close_tag",
    "Missing_close_brace_in_template",
    "Unexpected_end_of_stream",
    "Invalid_syntax_in_for_tag",
    "Invalid_syntax_in_if_tag",
    "Infinite_loop_in_for_tag",
)


def default_catalog() -> Catalog:
    return Catalog.from_names(DEFAULT_KINDS)
