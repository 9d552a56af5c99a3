"""Generation log: one JSONL line per `generate` run, one file per day and project.

Files live under ``$SPTGEN_HOME/logs/<project-slug>/YYYY-MM-DD.jsonl``
(``~/.sptgen`` when ``SPTGEN_HOME`` is unset). The location is resolved on
every call, so changing ``SPTGEN_HOME`` at runtime takes effect.
"""

from __future__ import annotations

import contextlib
import hashlib
import json
import os
from collections.abc import Iterator
from dataclasses import asdict, dataclass, field
from datetime import UTC, date, datetime, timedelta
from pathlib import Path

DEFAULT_RETENTION_DAYS = 30

# Test hook; when set it replaces the SPTGEN_HOME-derived root.
_LOG_ROOT: Path | None = None


def _home() -> Path:
    override = os.environ.get("SPTGEN_HOME")
    return Path(override) if override else Path.home() / ".sptgen"


def log_root() -> Path:
    return _LOG_ROOT if _LOG_ROOT is not None else _home() / "logs"


def _project_slug() -> str:
    """Encode cwd into a directory-safe slug."""
    return os.getcwd().replace("/", "-").lstrip("-")


def _log_dir() -> Path:
    return log_root() / _project_slug()


def catalog_digest(names: list[str]) -> str:
    """Stable fingerprint of a catalog's names and order."""
    return hashlib.sha256("\n".join(names).encode("utf-8")).hexdigest()


@dataclass(frozen=True)
class GenerationRecord:
    """What one `generate` run did. Kind names are stored only as a digest."""

    kinds: int
    catalog_sha256: str
    slots: object
    blocked: bool = False
    diagnostics: list[str] = field(default_factory=list)
    source: str | None = None
    output: str | None = None
    ts: str = field(default_factory=lambda: datetime.now(UTC).isoformat())

    def to_json(self) -> str:
        return json.dumps(asdict(self), default=str)


def log_generation(
    *,
    kinds: list[str],
    slots: object,
    blocked: bool = False,
    diagnostics: list[str] | None = None,
    source: str | None = None,
    output: str | None = None,
) -> Path:
    """Append a record to today's log file and return that file's path."""
    record = GenerationRecord(
        kinds=len(kinds),
        catalog_sha256=catalog_digest(kinds),
        slots=slots,
        blocked=blocked,
        diagnostics=list(diagnostics or []),
        source=source,
        output=output,
    )
    log_file = _log_dir() / f"{datetime.now(UTC):%Y-%m-%d}.jsonl"
    log_file.parent.mkdir(parents=True, exist_ok=True)
    with open(log_file, "a", encoding="utf-8") as f:
        f.write(record.to_json() + "\n")
    return log_file


def _dated_logs(log_dir: Path) -> Iterator[tuple[date, Path]]:
    """Yield (day, file) for every log file whose stem is a YYYY-MM-DD date."""
    for log_file in log_dir.glob("*.jsonl"):
        try:
            day = datetime.strptime(log_file.stem, "%Y-%m-%d").date()
        except ValueError:
            continue
        yield day, log_file


def cleanup_old_logs(*, retention_days: int = DEFAULT_RETENTION_DAYS) -> int:
    """Delete this project's log files older than retention_days. Returns the count."""
    log_dir = _log_dir()
    if not log_dir.is_dir():
        return 0

    cutoff = (datetime.now(UTC) - timedelta(days=retention_days)).date()
    stale = [path for day, path in _dated_logs(log_dir) if day < cutoff]
    for path in stale:
        path.unlink()

    # Only succeeds when the directory is empty.
    with contextlib.suppress(OSError):
        log_dir.rmdir()

    return len(stale)
