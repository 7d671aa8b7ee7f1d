"""Core types for the service-name catalog."""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any


# Upstream service catalog convention for identifiers (use fullmatch).
KEY_PATTERN = re.compile(r"[a-z0-9]+")


@dataclass(frozen=True)
class ServiceNameEntry:
    """One identifier → display-name pair."""
    key: str
    display_name: str

    def to_dict(self) -> dict[str, Any]:
        return {"key": self.key, "display_name": self.display_name}


class NotFoundError(KeyError):
    """Raised when a service identifier has no registered display name."""

    def __init__(self, key: str):
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"No display name registered for service '{self.key}'"


class TableValidationError(Exception):
    """Raised when entries break the catalog invariants."""

    def __init__(self, violations: list[dict[str, str]]):
        self.violations = violations
        details = "; ".join(v["detail"] for v in violations[:5])
        more = f" (+{len(violations) - 5} more)" if len(violations) > 5 else ""
        super().__init__(f"{len(violations)} catalog violation(s): {details}{more}")


class ResourceFormatError(ValueError):
    """Raised when a services resource file cannot be parsed."""

    def __init__(self, line_no: int, line: str, reason: str = "unrecognised line"):
        self.line_no = line_no
        self.line = line
        super().__init__(f"line {line_no}: {reason}: {line.strip()[:80]!r}")
