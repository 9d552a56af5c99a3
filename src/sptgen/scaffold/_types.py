"""Scaffold data model: every section of the artifact as immutable data."""

from __future__ import annotations

from dataclasses import dataclass

from sptgen.catalog import Catalog
from sptgen.schema import ScaffoldSchema


@dataclass(frozen=True)
class Ordinal:
    value: int
    kind: str
    name: str

    @property
    def is_sentinel(self) -> bool:
        return self.value == 0


@dataclass(frozen=True)
class MarkerType:
    name: str
    ordinal: int


@dataclass(frozen=True)
class TrialExpression:
    """One `does warning[i] have this kind?` test inside a dispatch slot."""

    ordinal: Ordinal
    marker: MarkerType
    text: str


@dataclass(frozen=True)
class DispatchSlot:
    index: int
    trials: tuple[TrialExpression, ...]
    macro: str
    lines: tuple[str, ...]


@dataclass(frozen=True)
class ReportSection:
    slot_calls: tuple[str, ...]
    error_check: str
    error_descriptor: str
    lines: tuple[str, ...]


@dataclass(frozen=True)
class ScaffoldArtifact:
    catalog: Catalog
    slots: int
    schema: ScaffoldSchema
    ordinals: tuple[Ordinal, ...]
    markers: tuple[MarkerType, ...]
    mapping: tuple[tuple[Ordinal, MarkerType], ...]
    dispatch: tuple[DispatchSlot, ...]
    report: ReportSection
    text: str

    def marker_for(self, ordinal: int) -> MarkerType:
        for o, marker in self.mapping:
            if o.value == ordinal:
                return marker
        raise KeyError(ordinal)

    def __str__(self) -> str:
        return self.text
