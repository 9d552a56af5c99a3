"""Tests for catalog precondition checks."""

import pytest

from sptgen.catalog import DEFAULT_KINDS, Catalog, default_catalog, validate_catalog
from sptgen.catalog.validate import is_identifier, sanitize_name
from sptgen.diagnostics import Level, codes
from sptgen.errors import (
    DuplicateNameError,
    InvalidBudgetError,
    InvalidConfigError,
    InvalidNameError,
)
from sptgen.scaffold import generate
from sptgen.schema import ScaffoldSchema


def _codes(result):
    return [d.code for d in result.diagnostics]


def test_default_catalog_is_clean():
    result = validate_catalog(default_catalog(), 20)
    assert result.diagnostics == []
    assert not result.blocked
    assert len(DEFAULT_KINDS) == 18


def test_duplicate_name_rejected():
    result = validate_catalog(Catalog.from_names(["Foo", "Bar", "Foo"]), 4)
    assert _codes(result) == [codes.DUPLICATE_NAME]
    diag = result.diagnostics[0]
    assert diag.entry == 2
    assert diag.notes == ["first defined at catalog entry 0"]

    with pytest.raises(DuplicateNameError) as exc_info:
        result.raise_for_errors()
    assert "'Foo'" in str(exc_info.value)
    assert exc_info.value.diagnostics == result.diagnostics


@pytest.mark.parametrize(
    "name",
    ["", "1abc", "has space", "dash-name", "class", "__x", "_Upper", "a__b", "ünï"],
)
def test_invalid_names_rejected(name):
    result = validate_catalog(Catalog.from_names([name]), 1)
    assert _codes(result) == [codes.INVALID_NAME]
    with pytest.raises(InvalidNameError):
        result.raise_for_errors()


@pytest.mark.parametrize(
    "name",
    [
        "None",
        "Messages",
        "MsgToType",
        "IF",
        "Warning",
        "Error",
        "type",
        "Message",
        "SEEPHIT_PARSE_ERROR_GENERATED_H",
        "SPT_DEBUG",
        "REPORT_ERRORS",
        "SPT_DISPATCH_SLOT_0",
        "SPT_DISPATCH_SLOT_17",
    ],
)
def test_names_declared_by_scaffold_rejected(name):
    result = validate_catalog(Catalog.from_names([name]), 1)
    assert _codes(result) == [codes.INVALID_NAME]
    with pytest.raises(InvalidNameError):
        generate(Catalog.from_names([name]), 1)


def test_slot_macro_prefix_follows_schema():
    schema = ScaffoldSchema(slot_macro_prefix="SLOT_")
    result = validate_catalog(Catalog.from_names(["SPT_DISPATCH_SLOT_0"]), 1, schema)
    assert result.diagnostics == []

    result = validate_catalog(Catalog.from_names(["SLOT_X"]), 1, schema)
    assert _codes(result) == [codes.INVALID_NAME]


def test_name_colliding_with_ordinal_rejected():
    result = validate_catalog(Catalog.from_names(["Foo", "Error_Foo"]), 1)
    assert _codes(result) == [codes.INVALID_NAME]
    assert result.diagnostics[0].entry == 1


def test_sentinel_ordinal_collision_rejected():
    result = validate_catalog(Catalog.from_names(["Error_None"]), 1)
    assert _codes(result) == [codes.INVALID_NAME]


def test_invalid_name_suggests_identifier():
    result = validate_catalog(Catalog.from_names(["Missing open bracket"]), 1)
    diag = result.diagnostics[0]
    assert diag.suggestions[0].replacement == "Missing_open_bracket"


@pytest.mark.parametrize("slots", [0, -3, "20", 2.5, True])
def test_invalid_budget_rejected(slots):
    result = validate_catalog(Catalog.from_names(["Foo"]), slots)
    assert _codes(result) == [codes.INVALID_BUDGET]
    with pytest.raises(InvalidBudgetError):
        result.raise_for_errors()


def test_all_violations_reported_in_one_pass():
    result = validate_catalog(Catalog.from_names(["Foo", "bad name", "Foo"]), 0)
    assert _codes(result) == [codes.INVALID_BUDGET, codes.INVALID_NAME, codes.DUPLICATE_NAME]
    assert [d.entry for d in result.diagnostics] == [None, 1, 2]


def test_first_blocking_diagnostic_picks_exception():
    result = validate_catalog(Catalog.from_names(["Foo", "Foo"]), 0)
    with pytest.raises(InvalidBudgetError):
        result.raise_for_errors()


def test_empty_catalog_warns_but_does_not_block():
    result = validate_catalog(Catalog(), 1)
    assert _codes(result) == [codes.EMPTY_CATALOG]
    assert result.diagnostics[0].level == Level.WARNING
    assert not result.blocked
    result.raise_for_errors()


def test_invalid_schema_rejected():
    schema = ScaffoldSchema(warnings_field="m-arrWarns")
    result = validate_catalog(Catalog.from_names(["Foo"]), 1, schema)
    assert _codes(result) == [codes.INVALID_CONFIG]
    with pytest.raises(InvalidConfigError):
        result.raise_for_errors()


def test_schema_changes_reserved_names():
    schema = ScaffoldSchema(sentinel="NoError")
    result = validate_catalog(Catalog.from_names(["None"]), 1, schema)
    assert result.diagnostics == []


def test_is_identifier():
    assert is_identifier("Expecting_an_identifier")
    assert is_identifier("_lower")
    assert not is_identifier("")
    assert not is_identifier("9lives")
    assert not is_identifier("template")


def test_sanitize_name():
    assert sanitize_name("Missing open bracket") == "Missing_open_bracket"
    assert sanitize_name("  spaced--out  ") == "spaced_out"
    assert sanitize_name("42 things") == "E42_things"
    assert sanitize_name("class") == "class_"
    assert sanitize_name("!!!") is None
