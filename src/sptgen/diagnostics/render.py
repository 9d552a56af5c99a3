"""Render diagnostics for terminal (text) and tooling (JSON) output."""

from __future__ import annotations

from sptgen.diagnostics.types import Diagnostic


def render_json(diagnostics: list[Diagnostic], *, blocked: bool) -> dict:
    """Render diagnostics as a JSON-serializable dict."""
    return {
        "blocked": blocked,
        "diagnostics": [diagnostic_to_dict(d) for d in diagnostics],
    }


def render_text(diagnostics: list[Diagnostic]) -> str:
    """Render diagnostics as human-readable text."""
    lines: list[str] = []
    for d in diagnostics:
        lines.append(f"{d.level.name.lower()}[{d.code}]: {d.message}")
        if d.entry is not None:
            lines.append(f"  --> catalog entry {d.entry}")
        for note in d.notes:
            lines.append(f"  = note: {note}")
        for s in d.suggestions:
            lines.append(f"  = help: {s.message}")
    return "\n".join(lines)


def diagnostic_to_dict(d: Diagnostic) -> dict:
    data: dict = {
        "level": d.level.name.lower(),
        "code": str(d.code),
        "message": d.message,
        "notes": d.notes,
    }
    if d.entry is not None:
        data["entry"] = d.entry
    if d.suggestions:
        data["suggestions"] = [
            {"message": s.message, "replacement": s.replacement} for s in d.suggestions
        ]
    return data
