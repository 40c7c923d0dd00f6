"""
Module: core.labels

Purpose:
    Resolve display text for a control from a string table: the raw label
    and its marker position, the clean label shown to users, the optional
    tooltip, and the selected/deselected texts of toggle controls.

Key Functions:
    - resolve_label(group, item, table): Label or None
    - resolve_clean_label(group, item, table): Label text without marker
    - resolve_tool_tip(group, item, table): Tooltip text or None
    - resolve_toggle_texts(group, item, table): (selected, deselected) texts
    - parse_label(raw_text): Split raw text into a Label

Dependencies:
    - core.keys
    - core.mnemonics
    - core.strings (StringTable protocol)

Used By:
    - core.binder
    - gui.widgets.color_toggle_button

Failure Policy:
    Labels are required: a lookup that raises is replaced by a visibly broken
    placeholder "!<group.item>!" so the defect shows in the UI instead of
    crashing it. Tooltips are optional: their presence is checked with
    contains_key first, and absence is silent.
"""

from __future__ import annotations

import logging
from typing import Optional, Tuple

from .config import DEFAULT_CONFIG, ResolverConfig
from .keys import KEY_SEPARATOR, compose_key, compose_lookup_key
from .mnemonics import find_marker_index, strip_or_translate
from .models.label import NO_MARKER, Label
from .strings import StringTable

logger = logging.getLogger(__name__)

SELECTED_STATE = "selected"
DESELECTED_STATE = "deselected"


def parse_label(raw_text: str, config: Optional[ResolverConfig] = None) -> Label:
    """Split raw label text into marker position and clean text."""
    config = config or DEFAULT_CONFIG
    return Label(
        raw_text=raw_text,
        marker_index=find_marker_index(raw_text, config.marker),
        clean_text=strip_or_translate(raw_text, config.marker, replace=False),
    )


def placeholder_label(key: str, config: Optional[ResolverConfig] = None) -> Label:
    """Visibly broken label used when a label lookup fails."""
    config = config or DEFAULT_CONFIG
    text = f"{config.placeholder_delimiter}{key}{config.placeholder_delimiter}"
    return Label(raw_text=text, marker_index=NO_MARKER, clean_text=text)


def resolve_label(
    group: Optional[str],
    item: Optional[str],
    table: StringTable,
    config: Optional[ResolverConfig] = None,
) -> Optional[Label]:
    """
    Resolve the label for a control.

    Args:
        group: Group name, required.
        item: Item name within the group, optional.
        table: String table to look the "<key>.label" entry up in.
        config: Resolver settings, defaults to DEFAULT_CONFIG.

    Returns:
        - None if group is blank or the entry is blank
        - A placeholder Label "!<key>!" if the lookup raises
        - The parsed Label otherwise
    """
    config = config or DEFAULT_CONFIG
    name = compose_key(group, item)
    if not name:
        return None

    key = f"{name}{KEY_SEPARATOR}{config.label_suffix}"
    try:
        raw_text = table.lookup(key)
    except Exception as e:
        logger.warning("Label lookup failed for %s: %s", key, e)
        return placeholder_label(name, config)

    if raw_text is None or not raw_text.strip():
        return None
    return parse_label(raw_text, config)


def resolve_clean_label(
    group: Optional[str],
    item: Optional[str],
    table: StringTable,
    config: Optional[ResolverConfig] = None,
) -> Optional[str]:
    """Label text with its mnemonic marker stripped, or None."""
    label = resolve_label(group, item, table, config)
    if label is None:
        return None
    return label.clean_text


def resolve_tool_tip(
    group: Optional[str],
    item: Optional[str],
    table: StringTable,
    config: Optional[ResolverConfig] = None,
) -> Optional[str]:
    """
    Resolve the optional tooltip for a control.

    Returns:
        The tooltip text, or None when group is blank, the table has no
        "<key>.toolTip" entry, or the entry is blank.
    """
    config = config or DEFAULT_CONFIG
    key = compose_lookup_key(group, item, config.tool_tip_suffix)
    if not key:
        return None

    if not table.contains_key(key):
        logger.debug("No tooltip for %s", key)
        return None

    try:
        text = table.lookup(key)
    except Exception as e:
        # The key is listed, so a failure here points at a corrupt table.
        logger.warning("Tooltip lookup failed for %s: %s", key, e)
        return None

    if text is None or not text.strip():
        return None
    return text


def resolve_toggle_texts(
    group: Optional[str],
    item: Optional[str],
    table: StringTable,
    config: Optional[ResolverConfig] = None,
) -> Optional[Tuple[str, str]]:
    """
    Resolve the (selected, deselected) display texts of a toggle control.

    Each state may have its own "<key>.selected.label" or
    "<key>.deselected.label" entry; a state without one uses the plain
    clean label.

    Returns:
        The text pair, or None if the plain label cannot be resolved.
    """
    config = config or DEFAULT_CONFIG
    plain = resolve_clean_label(group, item, table, config)
    if plain is None:
        return None

    base = compose_key(group, item)

    def _state_text(state: str) -> str:
        key = f"{base}{KEY_SEPARATOR}{state}{KEY_SEPARATOR}{config.label_suffix}"
        if not table.contains_key(key):
            return plain
        label = resolve_label(base, state, table, config)
        return label.clean_text if label is not None else plain

    return _state_text(SELECTED_STATE), _state_text(DESELECTED_STATE)
