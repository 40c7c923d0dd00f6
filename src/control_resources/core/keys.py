"""
Resource key composition.

A control is named by a group and an optional item; its string table keys
are "<group>.<item>.<suffix>", or "<group>.<suffix>" when there is no item.
"""
from __future__ import annotations

from typing import Optional

KEY_SEPARATOR = "."


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def compose_key(group: Optional[str], item: Optional[str] = None) -> str:
    """
    Compose the base key for a control.

    Returns:
        "" if group is blank, group if item is blank, else "group.item".
    """
    if _is_blank(group):
        return ""
    if _is_blank(item):
        return group
    return f"{group}{KEY_SEPARATOR}{item}"


def compose_lookup_key(
    group: Optional[str],
    item: Optional[str],
    suffix: str,
) -> str:
    """
    Compose a lookup key with a purpose suffix ("label", "toolTip").

    Returns:
        "" if group is blank, else compose_key(group, item) + "." + suffix.
    """
    base = compose_key(group, item)
    if not base:
        return ""
    return f"{base}{KEY_SEPARATOR}{suffix}"
