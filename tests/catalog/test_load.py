"""Tests for catalog TOML loading."""

import pytest

from sptgen.catalog import DEFAULT_SLOTS, Catalog, load_catalog_file, parse_catalog_config
from sptgen.errors import InvalidConfigError
from sptgen.schema import DEFAULT_SCHEMA


def test_load_catalog_file(tmp_path):
    path = tmp_path / "errors.toml"
    path.write_text(
        '[catalog]\n'
        'kinds = ["Expecting_an_identifier", "Missing_open_bracket"]\n'
        'slots = 4\n'
        '\n'
        '[schema]\n'
        'warnings_field = "m_warnings"\n'
    )

    config = load_catalog_file(path)

    assert config.catalog == Catalog.from_names(
        ["Expecting_an_identifier", "Missing_open_bracket"]
    )
    assert config.slots == 4
    assert config.schema.warnings_field == "m_warnings"
    assert config.schema.error_row_field == DEFAULT_SCHEMA.error_row_field


def test_defaults_when_slots_and_schema_missing():
    config = parse_catalog_config({"catalog": {"kinds": ["Foo"]}})
    assert config.slots == DEFAULT_SLOTS
    assert config.schema is DEFAULT_SCHEMA


def test_invalid_names_are_left_to_validation():
    config = parse_catalog_config({"catalog": {"kinds": ["Foo", "Foo", ""]}})
    assert config.catalog.names == ["Foo", "Foo", ""]


def test_missing_file(tmp_path):
    with pytest.raises(InvalidConfigError, match="cannot read catalog file"):
        load_catalog_file(tmp_path / "nope.toml")


def test_invalid_toml(tmp_path):
    path = tmp_path / "bad.toml"
    path.write_text("[catalog\nkinds = 1")
    with pytest.raises(InvalidConfigError, match="invalid TOML"):
        load_catalog_file(path)


@pytest.mark.parametrize(
    ("data", "message"),
    [
        ({}, "missing \\[catalog\\] table"),
        ({"catalog": {"kinds": "Foo"}}, "list of strings"),
        ({"catalog": {"kinds": ["Foo", 3]}}, "list of strings"),
        ({"catalog": {"kinds": ["Foo"], "slots": "20"}}, "must be an integer"),
        ({"catalog": {"kinds": ["Foo"], "slots": True}}, "must be an integer"),
        ({"catalog": {"kinds": ["Foo"]}, "schema": "x"}, "must be a table"),
        ({"catalog": {"kinds": ["Foo"]}, "schema": {"bogus": "x"}}, "unknown schema key 'bogus'"),
        ({"catalog": {"kinds": ["Foo"]}, "schema": {"kind_field": 1}}, "must be a string"),
    ],
)
def test_malformed_config(data, message):
    with pytest.raises(InvalidConfigError, match=message):
        parse_catalog_config(data)


def test_catalog_ordinals():
    catalog = Catalog.from_names(["A", "B", "C"])
    assert catalog.ordinal("A") == 1
    assert catalog.ordinal("C") == 3
    with pytest.raises(KeyError):
        catalog.ordinal("D")
