"""
Module: label

Purpose:
    Value objects produced by label resolution: the raw/clean label pair
    with its marker position, and the mnemonic derived from it.

Key Classes:
    - Label: Raw text, marker index, clean text
    - MnemonicSpec: Mnemonic character and its display index

Dependencies:
    - dataclasses (std)

Used By:
    - core.labels
    - core.mnemonics
    - core.binder
"""

from __future__ import annotations

from dataclasses import dataclass

NO_MARKER = -1


@dataclass(frozen=True, slots=True)
class Label:
    """
    A resolved label, before and after mnemonic marker removal.

    Attributes:
        raw_text: Text as stored in the string table, marker included
        marker_index: Index of the first marker in raw_text, or -1
        clean_text: raw_text with the marker removed

    Invariants:
        - marker_index == -1 or raw_text[marker_index] is the marker
        - clean_text == raw_text when marker_index == -1
        - len(clean_text) == len(raw_text) - 1 otherwise

    Example:
        >>> label = Label("Open&File", 4, "OpenFile")
        >>> label.mnemonic_index
        4
    """

    raw_text: str
    marker_index: int
    clean_text: str

    @property
    def has_marker(self) -> bool:
        return self.marker_index != NO_MARKER

    @property
    def mnemonic_index(self) -> int:
        """
        Index of the mnemonic character in clean_text.

        The marker is a single character removed just before the mnemonic,
        so its index in raw_text is the mnemonic's index in clean_text.
        Defaults to 0 when no marker is present.
        """
        return self.marker_index if self.has_marker else 0


@dataclass(frozen=True, slots=True)
class MnemonicSpec:
    """
    Mnemonic character for a control and where to underline it.

    Attributes:
        character: Uppercased mnemonic character
        display_index: Underline position in the clean text, or -1 for none
    """

    character: str
    display_index: int
