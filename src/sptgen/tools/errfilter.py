"""Reduce a compiler error dump to the parser's message and line.

The parser reports a failure by instantiating a template whose name
carries the message and then indexing an array with the line number, so
the compiler output contains both pieces somewhere in a long dump.
"""

from __future__ import annotations

import re

_ERROR_RE = re.compile(
    r"(?:ParseError\(.*\"(.+)\"\))[\s\S]*(?:array subscript value '([0-9]+)')"
)


def filter_error(raw: str = "") -> str:
    """Return "<message> at line: <n>", or `raw` unchanged when it doesn't match."""
    match = _ERROR_RE.search(raw)
    if match is None:
        return raw
    message, line = match.groups()
    return f"{message} at line: {line}"
