"""Catalog validation — invariant checks and summary reporting.

Two capabilities:
  1. validate_entries(): list every invariant violation in a set of pairs
  2. build_catalog_summary(): counts and shared display names for a table

Violations are plain dicts so the CLI can print them and callers can
decide whether to fail fast (``TableValidationError``) or just report.
"""
from __future__ import annotations

from collections import defaultdict
from typing import TYPE_CHECKING, Any, Iterable

from catalog.types import KEY_PATTERN

if TYPE_CHECKING:
    from catalog.table import ServiceNameTable


# ══════════════════════════════════════════════════════════════════
#  1.  Entry validation
# ══════════════════════════════════════════════════════════════════

def validate_entries(pairs: Iterable[tuple[str, str]]) -> list[dict[str, str]]:
    """Check identifier → display-name pairs against the catalog invariants.

    Checks:
      - key is non-empty
      - key is lowercase alphanumeric
      - key appears only once
      - display name is non-empty (whitespace-only counts as empty)

    Returns a list of violation dicts: ``{"key", "type", "detail"}``.
    An empty list means the pairs form a valid table.
    """
    violations: list[dict[str, str]] = []
    seen: set[str] = set()

    for key, display_name in pairs:
        if not key:
            violations.append({
                "key": key,
                "type": "empty_key",
                "detail": f"Empty service identifier (display name '{display_name}')",
            })
        elif not KEY_PATTERN.fullmatch(key):
            violations.append({
                "key": key,
                "type": "invalid_key",
                "detail": f"Service identifier '{key}' is not lowercase alphanumeric",
            })

        if key in seen:
            violations.append({
                "key": key,
                "type": "duplicate_key",
                "detail": f"Service identifier '{key}' is defined more than once",
            })
        seen.add(key)

        if not display_name or not display_name.strip():
            violations.append({
                "key": key,
                "type": "empty_display_name",
                "detail": f"Service identifier '{key}' has an empty display name",
            })

    return violations


# ══════════════════════════════════════════════════════════════════
#  2.  Catalog summary
# ══════════════════════════════════════════════════════════════════

def build_catalog_summary(table: ServiceNameTable) -> dict[str, Any]:
    """Summarise a table for the ``--validate`` report.

    Returns::

        {
            "total_entries": 121,
            "distinct_display_names": 121,
            "shared_display_names": {},
            "violations": [],
            "valid": True,
        }
    """
    by_name: dict[str, list[str]] = defaultdict(list)
    for entry in table.all_entries():
        by_name[entry.display_name].append(entry.key)

    violations = validate_entries((e.key, e.display_name) for e in table.all_entries())

    return {
        "total_entries": len(table),
        "distinct_display_names": len(by_name),
        # Not an error — display names are allowed to collide
        "shared_display_names": {n: keys for n, keys in by_name.items() if len(keys) > 1},
        "violations": violations,
        "valid": not violations,
    }


def print_catalog_summary(summary: dict[str, Any]) -> None:
    """Pretty-print the catalog summary to terminal."""
    ok = "✅" if summary["valid"] else "❌"
    print("\n┌─ Service Catalog Report ──────────────────────────────────┐")
    print(f"│  Entries:                       {summary['total_entries']:>6}")
    print(f"│  Distinct display names:        {summary['distinct_display_names']:>6}")
    print(f"│  Shared display names:          {len(summary['shared_display_names']):>6}")
    print(f"│  Violations:                    {len(summary['violations']):>6}")
    print(f"│  Valid:                          {ok}")
    if summary["shared_display_names"]:
        print("│  ──────────────────────────────────────────────────────")
        for name, keys in list(summary["shared_display_names"].items())[:10]:
            print(f"│    ⚠ {name[:30]}: {', '.join(keys)}")
    if summary["violations"]:
        print("│  ──────────────────────────────────────────────────────")
        for v in summary["violations"][:10]:
            print(f"│    ✗ {v['key'][:20]}: {v['type']}")
    print("└───────────────────────────────────────────────────────────┘")
