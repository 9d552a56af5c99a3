"""Catalog data model: ordered, name-unique error kinds."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from sptgen.schema import DEFAULT_SCHEMA, ScaffoldSchema

SENTINEL_ORDINAL = 0


@dataclass(frozen=True)
class ErrorKind:
    name: str


@dataclass(frozen=True)
class Catalog:
    """Ordered error kinds. Ordinals are positional: kind i has ordinal i + 1."""

    kinds: tuple[ErrorKind, ...] = ()

    @classmethod
    def from_names(cls, names: Iterable[str]) -> Catalog:
        """Build a catalog without validating it (see validate_catalog)."""
        return cls(kinds=tuple(ErrorKind(name) for name in names))

    @property
    def names(self) -> list[str]:
        return [k.name for k in self.kinds]

    def ordinal(self, name: str) -> int:
        """Return the ordinal of the first kind called `name`.

        Raises KeyError if the catalog has no such kind.
        """
        for i, kind in enumerate(self.kinds):
            if kind.name == name:
                return i + 1
        raise KeyError(name)

    def __len__(self) -> int:
        return len(self.kinds)

    def __iter__(self) -> Iterator[ErrorKind]:
        return iter(self.kinds)


@dataclass(frozen=True)
class CatalogConfig:
    """A catalog together with the generation settings loaded alongside it."""

    catalog: Catalog
    slots: int
    schema: ScaffoldSchema = DEFAULT_SCHEMA
