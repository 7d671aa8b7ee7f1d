"""Service name table — read-only lookup from service identifier to display name.

Usage:
    from catalog.table import SERVICE_NAMES, lookup
    label = lookup("cosmos")                      # "CosmosDB"
    label = SERVICE_NAMES.display_name_or_key(k)  # raw key when unregistered

The table is built once and never mutated, so it can be shared across
threads without locking.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Any, Iterable, Iterator, Mapping

from catalog.types import NotFoundError, ServiceNameEntry, TableValidationError
from catalog.validation import validate_entries
from schemas.services import SERVICES


class ServiceNameTable:
    """Immutable, insertion-ordered identifier → display-name mapping."""

    __slots__ = ("_names", "_entries")

    def __init__(self, names: Mapping[str, str]):
        violations = validate_entries(names.items())
        if violations:
            raise TableValidationError(violations)
        # Own copy so later changes to the caller's mapping are not visible
        self._names = MappingProxyType(dict(names))
        self._entries = tuple(ServiceNameEntry(k, v) for k, v in self._names.items())

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[str, str]]) -> ServiceNameTable:
        """Build a table from ``(key, display_name)`` pairs.

        Unlike a dict, a pair sequence can repeat a key; that is reported
        as a ``duplicate_key`` violation instead of silently keeping the
        last value.
        """
        pairs = list(pairs)
        violations = validate_entries(pairs)
        if violations:
            raise TableValidationError(violations)
        return cls(dict(pairs))

    # ── Lookup ────────────────────────────────────────────────────
    def lookup(self, key: str) -> str:
        try:
            return self._names[key]
        except KeyError:
            raise NotFoundError(key) from None

    def get(self, key: str, default: str | None = None) -> str | None:
        return self._names.get(key, default)

    def display_name_or_key(self, key: str) -> str:
        """Display name for ``key``, or ``key`` itself when unregistered."""
        return self._names.get(key, key)

    def keys_for(self, display_name: str) -> list[str]:
        """Every identifier labelled ``display_name`` (names may be shared)."""
        return [e.key for e in self._entries if e.display_name == display_name]

    def all_entries(self) -> tuple[ServiceNameEntry, ...]:
        """Every entry exactly once, in insertion order."""
        return self._entries

    def as_dict(self) -> dict[str, str]:
        return dict(self._names)

    # ── Mapping-style protocol ────────────────────────────────────
    def __getitem__(self, key: str) -> str:
        return self.lookup(key)

    def __contains__(self, key: object) -> bool:
        return key in self._names

    def __iter__(self) -> Iterator[str]:
        return iter(self._names)

    def __len__(self) -> int:
        return len(self._entries)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, ServiceNameTable):
            return NotImplemented
        return self._entries == other._entries

    def __hash__(self) -> int:
        return hash(self._entries)

    def __repr__(self) -> str:
        return f"ServiceNameTable({len(self)} entries)"


# ── Process-wide catalog ──────────────────────────────────────────
SERVICE_NAMES = ServiceNameTable(SERVICES)


def lookup(key: str) -> str:
    """Look up ``key`` in the embedded catalog; raises ``NotFoundError``."""
    return SERVICE_NAMES.lookup(key)


def all_entries() -> tuple[ServiceNameEntry, ...]:
    """All entries of the embedded catalog, in generator order."""
    return SERVICE_NAMES.all_entries()
