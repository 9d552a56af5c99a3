"""Root conftest — shared fixtures."""

from __future__ import annotations

import pytest

from sptgen.catalog import Catalog


@pytest.fixture
def two_kinds() -> Catalog:
    return Catalog.from_names(["Expecting_an_identifier", "Missing_open_bracket"])


@pytest.fixture(autouse=True)
def _isolated_log_root(tmp_path, monkeypatch):
    """Keep generation logs out of the real home directory."""
    monkeypatch.setattr("sptgen.genlog._LOG_ROOT", tmp_path / "logs")
