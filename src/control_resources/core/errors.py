"""
Exception types for control resource resolution.

Only the failures a caller may legitimately want to catch are modelled here.
Everything the resolver and binder can recover from locally (broken label
lookups, out-of-range mnemonic indices) is logged and degraded rather than
propagated.
"""
from __future__ import annotations


class ControlResourceError(Exception):
    """Base class for control resource errors."""


class MissingResourceError(ControlResourceError, KeyError):
    """Raised by a string table when a key has no entry."""

    def __init__(self, key: str) -> None:
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"No string table entry for key: {self.key!r}"


class MnemonicIndexError(ControlResourceError, IndexError):
    """Raised when a displayed mnemonic index falls outside the control text."""

    def __init__(self, index: int, text_length: int) -> None:
        super().__init__(
            f"Mnemonic index {index} out of range for text of length {text_length}"
        )
        self.index = index
        self.text_length = text_length
