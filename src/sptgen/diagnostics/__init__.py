"""Diagnostic system: types, codes and rendering."""

from sptgen.diagnostics import codes
from sptgen.diagnostics.codes import ErrorCode
from sptgen.diagnostics.types import Diagnostic, Level, Suggestion

__all__ = [
    "Diagnostic",
    "ErrorCode",
    "Level",
    "Suggestion",
    "codes",
]
