"""Rust compiler-inspired diagnostics for catalog validation.

Every check produces Diagnostic values pointing at a catalog entry. All
diagnostics are collected and returned together so one run reports every
problem in the catalog, not only the first.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from sptgen.diagnostics.codes import ErrorCode


class Level(enum.IntEnum):
    WARNING = 1
    ERROR = 2


@dataclass
class Suggestion:
    message: str
    replacement: str | None = None


@dataclass
class Diagnostic:
    level: Level
    code: ErrorCode
    message: str
    entry: int | None = None
    notes: list[str] = field(default_factory=list)
    suggestions: list[Suggestion] = field(default_factory=list)

    # -- Builder classmethods ---------------------------------------------------

    @classmethod
    def error(cls, code: ErrorCode, message: str) -> Diagnostic:
        return cls(level=Level.ERROR, code=code, message=message)

    @classmethod
    def warning(cls, code: ErrorCode, message: str) -> Diagnostic:
        return cls(level=Level.WARNING, code=code, message=message)

    # -- Builder chain methods --------------------------------------------------

    def at(self, entry: int) -> Diagnostic:
        """Point the diagnostic at a 0-based catalog entry."""
        self.entry = entry
        return self

    def note(self, note: str) -> Diagnostic:
        self.notes.append(note)
        return self

    def suggest(self, message: str, replacement: str | None = None) -> Diagnostic:
        self.suggestions.append(Suggestion(message=message, replacement=replacement))
        return self

    # -- Query methods ----------------------------------------------------------

    @property
    def is_blocking(self) -> bool:
        return self.level == Level.ERROR
