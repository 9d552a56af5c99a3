"""Shared output formatting for CLI commands."""

from __future__ import annotations

import json

from sptgen.catalog import ValidationResult
from sptgen.diagnostics.render import render_json, render_text
from sptgen.errors import SptgenError


def format_validation(result: ValidationResult, *, output_format: str = "text") -> str:
    if output_format == "json":
        data = render_json(result.diagnostics, blocked=result.blocked)
        data["kinds"] = result.catalog.names
        data["slots"] = result.slots
        return json.dumps(data, indent=2)
    return render_text(result.diagnostics)


def format_error(error: SptgenError) -> str:
    """Render an error with its diagnostics, or as a single line when it has none."""
    if error.diagnostics:
        return render_text(error.diagnostics)
    return f"error[{error.code}]: {error.message}"
