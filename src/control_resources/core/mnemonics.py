"""
Module: core.mnemonics

Purpose:
    Locate, strip and translate the mnemonic marker embedded in raw label
    text, and derive the mnemonic character it designates.

    Raw labels mark their mnemonic with a sentinel character placed just
    before it: "&Open..." designates "O", "Open&File" designates "F". Only
    the first marker counts.

Key Functions:
    - find_marker_index(text, marker): Index of the first marker, or -1
    - strip_or_translate(text, marker, target_marker, replace): Clean text
    - mnemonic_char_at(text, marker_index, locale): Uppercased mnemonic
    - mnemonic_spec(label, locale): MnemonicSpec for a resolved Label
    - upper_for_locale(char, locale): Single-character uppercasing

Dependencies:
    - core.config (marker defaults)
    - core.models.label

Used By:
    - core.labels
    - core.binder
"""

from __future__ import annotations

from typing import Optional

from .config import AMPERSAND_MARKER, DEFAULT_CONFIG, UNDERSCORE_MARKER
from .models.label import NO_MARKER, Label, MnemonicSpec

# Languages whose dotted/dotless i uppercase differently from the default.
_DOTTED_I_LANGUAGES = frozenset({"tr", "az"})


def find_marker_index(text: str, marker: str = AMPERSAND_MARKER) -> int:
    """Index of the first marker character in text, or -1 if absent."""
    return text.find(marker)


def strip_or_translate(
    text: str,
    marker: str = AMPERSAND_MARKER,
    target_marker: Optional[str] = UNDERSCORE_MARKER,
    replace: bool = False,
) -> str:
    """
    Remove the first marker from text, or swap it for another marker.

    Args:
        text: Raw label text.
        marker: Marker to look for.
        target_marker: Marker inserted in its place when replace is True.
        replace: Translate instead of strip.

    Returns:
        The adjusted text; text unchanged when it holds no marker.

    Example:
        >>> strip_or_translate("Open&File")
        'OpenFile'
        >>> strip_or_translate("Open&File", replace=True)
        'Open_File'
    """
    index = find_marker_index(text, marker)
    if index == NO_MARKER:
        return text

    before = text[:index]
    after = text[index + len(marker):]
    if replace and target_marker:
        return f"{before}{target_marker}{after}"
    return f"{before}{after}"


def upper_for_locale(char: str, locale: str = DEFAULT_CONFIG.locale) -> str:
    """
    Uppercase a single character under the given locale.

    Characters whose uppercase form is longer than one character (such as
    "ß") are returned unchanged so that a mnemonic stays one key.
    """
    language = locale.replace("-", "_").split("_")[0].lower()
    if language in _DOTTED_I_LANGUAGES:
        if char == "i":
            return "İ"
        if char == "ı":
            return "I"

    upper = char.upper()
    return upper if len(upper) == 1 else char


def mnemonic_char_at(
    text: str,
    marker_index: int,
    locale: str = DEFAULT_CONFIG.locale,
) -> Optional[str]:
    """
    Uppercased character designated by a marker in raw text.

    With no marker (index -1) the first character is used.

    Returns:
        The mnemonic character, or None when there is no character to take
        (empty text, or a marker at the very end).
    """
    index = marker_index + 1 if marker_index >= 0 else 0
    if index >= len(text):
        return None
    return upper_for_locale(text[index], locale)


def mnemonic_spec(
    label: Label,
    locale: str = DEFAULT_CONFIG.locale,
) -> Optional[MnemonicSpec]:
    """
    Mnemonic character and underline position for a resolved label.

    The display index is the marker index in the raw text, which equals the
    mnemonic's index in the clean text. It is -1 (no underline) when the
    label carried no marker.
    """
    character = mnemonic_char_at(label.raw_text, label.marker_index, locale)
    if character is None:
        return None
    return MnemonicSpec(character=character, display_index=label.marker_index)
