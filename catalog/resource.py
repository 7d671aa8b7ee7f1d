"""Services resource codec — read and write the generated ``services.kt`` format.

The resource looks like::

    // Copyright (c) HashiCorp, Inc.
    // ...
    var services = mapOf(
            "aadb2c" to "AAD B2C",
            "apimanagement" to "API Management",
            ...
            "web" to "Web"
    )

Parsing is line-based: comments, blank lines, the ``mapOf(`` opener and
the ``)`` closer are skipped; every other line must be one entry.
"""
from __future__ import annotations

import os
import re

from catalog.table import ServiceNameTable
from catalog.types import ResourceFormatError
from reporting.render import render_services


_STRING = r'"((?:[^"\\]|\\.)*)"'
_ENTRY_RE = re.compile(rf"^\s*{_STRING}\s+to\s+{_STRING}\s*,?\s*$")
_OPEN_RE = re.compile(r"^\s*(?:(?:var|val)\s+\w+\s*=\s*)?mapOf\(\s*$")
_CLOSE_RE = re.compile(r"^\s*\)\s*$")

_ESCAPES = {
    '"': '"', "'": "'", "\\": "\\", "$": "$",
    "n": "\n", "r": "\r", "t": "\t", "b": "\b",
}


def _unescape(raw: str, line_no: int, line: str) -> str:
    def repl(m: re.Match) -> str:
        if m.group(1):
            return chr(int(m.group(1), 16))
        ch = m.group(2)
        if ch not in _ESCAPES:
            raise ResourceFormatError(line_no, line, f"unsupported escape '\\{ch}'")
        return _ESCAPES[ch]

    return re.sub(r"\\(?:u([0-9a-fA-F]{4})|(.))", repl, raw)


def parse_pairs(text: str) -> list[tuple[str, str]]:
    """Extract ``(key, display_name)`` pairs in file order.

    Raises ``ResourceFormatError`` for any line that is not a comment,
    blank, the map opener/closer, or an entry.  Does not check the
    catalog invariants; see ``parse_services``.
    """
    pairs: list[tuple[str, str]] = []
    closed = False

    for line_no, line in enumerate(text.splitlines(), start=1):
        stripped = line.strip()
        if not stripped or stripped.startswith("//"):
            continue
        if _OPEN_RE.match(line):
            continue
        if _CLOSE_RE.match(line):
            closed = True
            continue

        m = _ENTRY_RE.match(line)
        if m is None:
            raise ResourceFormatError(line_no, line)
        if closed:
            raise ResourceFormatError(line_no, line, "entry after closing parenthesis")
        pairs.append((
            _unescape(m.group(1), line_no, line),
            _unescape(m.group(2), line_no, line),
        ))

    return pairs


def parse_services(text: str) -> ServiceNameTable:
    """Parse resource text into a table (raises ``TableValidationError``
    if the entries break the catalog invariants)."""
    return ServiceNameTable.from_pairs(parse_pairs(text))


def dump_services(table: ServiceNameTable) -> str:
    """Serialize a table back to resource text."""
    return render_services(table, "kotlin")


def load_table(path: str) -> ServiceNameTable:
    with open(path, encoding="utf-8") as f:
        return parse_services(f.read())


def save_table(table: ServiceNameTable, path: str) -> str:
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(dump_services(table))
    return path
