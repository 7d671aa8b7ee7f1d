from __future__ import annotations

import os
from typing import TYPE_CHECKING

from jinja2 import Environment, FileSystemLoader, select_autoescape

from schemas.services import RESOURCE_HEADER, RESOURCE_VARIABLE

if TYPE_CHECKING:
    from catalog.table import ServiceNameTable


# ── Output format → template file (beside this module) ───────────
TEMPLATE_NAMES = {
    "kotlin": "services_template.kt",
    "markdown": "services_template.md",
}


# Every character str.splitlines() breaks on must be escaped, otherwise
# the resource no longer parses line by line.
_KOTLIN_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "$": "\\$",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\b": "\\b",
}
_LINE_BREAKS = "\x0b\x0c\x1c\x1d\x1e\x85\u2028\u2029"


def _kotlin_string(value: str) -> str:
    """Escape a value for a double-quoted Kotlin string literal."""
    out = []
    for ch in value:
        if ch in _KOTLIN_ESCAPES:
            out.append(_KOTLIN_ESCAPES[ch])
        elif ch in _LINE_BREAKS:
            out.append(f"\\u{ord(ch):04x}")
        else:
            out.append(ch)
    return "".join(out)


def _md_cell(value: str) -> str:
    """Keep a value inside one Markdown table cell."""
    return value.replace("|", "\\|").replace("\n", " ")


def _environment() -> Environment:
    env = Environment(
        loader=FileSystemLoader(os.path.dirname(__file__)),
        autoescape=select_autoescape(["html", "xml"]),
    )
    env.filters["kotlin_string"] = _kotlin_string
    env.filters["md_cell"] = _md_cell
    return env


def render_services(table: ServiceNameTable, fmt: str = "kotlin") -> str:
    """Render the table as a services resource (``kotlin``) or a
    Markdown reference page (``markdown``), preserving entry order."""
    template_name = TEMPLATE_NAMES.get(fmt)
    if template_name is None:
        raise ValueError(
            f"Unknown output format '{fmt}' (expected one of: {', '.join(TEMPLATE_NAMES)})"
        )

    template = _environment().get_template(template_name)
    return template.render(
        header=RESOURCE_HEADER,
        variable=RESOURCE_VARIABLE,
        entries=table.all_entries(),
    )


def generate_services_file(table: ServiceNameTable, fmt: str = "kotlin", out_path: str | None = None) -> str:
    text = render_services(table, fmt)

    if out_path is None:
        suffix = "kt" if fmt == "kotlin" else "md"
        out_path = os.path.join(os.getcwd(), f"services.{suffix}")
    parent = os.path.dirname(out_path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    with open(out_path, "w", encoding="utf-8") as f:
        f.write(text)
    return out_path
