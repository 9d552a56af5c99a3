"""Stable, searchable error code registry.

Ranges:
- C00xx      — Catalog errors (block generation)
- C01xx      — Catalog warnings
- H00xx      — Tag harvester failures
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ErrorCode:
    prefix: str
    value: int

    def __str__(self) -> str:
        return f"{self.prefix}{self.value:04d}"


# Catalog errors (C00xx)
DUPLICATE_NAME = ErrorCode("C", 1)
INVALID_NAME = ErrorCode("C", 2)
INVALID_BUDGET = ErrorCode("C", 3)
INVALID_CONFIG = ErrorCode("C", 4)

# Catalog warnings (C01xx)
EMPTY_CATALOG = ErrorCode("C", 101)

# Tag harvester (H00xx)
HARVEST_NETWORK = ErrorCode("H", 1)
HARVEST_NO_MATCH = ErrorCode("H", 2)
