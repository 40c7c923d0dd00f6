"""
String table access.

The resolver only needs two capabilities from a string table: a lookup that
raises for a missing key, and an existence check. Bundle loading and locale
selection belong to whatever produces the table.
"""
from __future__ import annotations

from typing import Mapping, Optional, Protocol, runtime_checkable

from .errors import MissingResourceError


@runtime_checkable
class StringTable(Protocol):
    """Locale-specific mapping from composed keys to display strings."""

    def lookup(self, key: str) -> str:
        """Return the string for key, raising if there is none."""
        ...

    def contains_key(self, key: str) -> bool:
        ...


class MappingStringTable:
    """StringTable over any mapping (dict, parsed .properties, JSON object)."""

    def __init__(self, entries: Optional[Mapping[str, str]] = None) -> None:
        self._entries: Mapping[str, str] = entries if entries is not None else {}

    def lookup(self, key: str) -> str:
        try:
            return self._entries[key]
        except KeyError:
            raise MissingResourceError(key) from None

    def contains_key(self, key: str) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"MappingStringTable({len(self._entries)} entries)"
