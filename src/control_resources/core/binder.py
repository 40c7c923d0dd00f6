"""
Module: core.binder

Purpose:
    Push resolved text, mnemonic, tooltip and icons onto a control. The
    control is reached only through the Control capability protocol, so the
    same binding logic serves any toolkit with an adapter.

Key Functions:
    - apply_icons(control, enabled, disabled): Fill all icon slots
    - apply_icon_set(control, icons): Fill all icon slots from an IconSet
    - apply_text(control, group, item, table, use_mnemonic): Text + mnemonic
    - apply_tool_tip(control, group, item, table): Optional tooltip
    - bind(control, group, item, icons, table, use_mnemonic): All of the above
    - bind_from_files(...): bind() with icons loaded by an IconProvider

Dependencies:
    - core.labels
    - core.mnemonics
    - core.models (IconSet, IconSlot)

Used By:
    - gui.widgets.color_toggle_button
    - application code building controls

Statefulness:
    None. Every call resolves fully from its inputs; calling twice with the
    same inputs leaves the control in the same state.
"""

from __future__ import annotations

import logging
from typing import Optional, Protocol, Union, runtime_checkable

from .config import DEFAULT_CONFIG, ResolverConfig
from .labels import resolve_label, resolve_tool_tip
from .mnemonics import mnemonic_spec
from .models.icons import IconHandle, IconSet, IconSlot
from .strings import StringTable

logger = logging.getLogger(__name__)


@runtime_checkable
class Control(Protocol):
    """
    Capabilities the binder needs from a control.

    Adapters may additionally expose set_tool_tip(text); the binder uses it
    when present.
    """

    def set_text(self, text: str) -> None: ...

    def set_icon(self, slot: IconSlot, icon: Optional[IconHandle]) -> None: ...

    def set_mnemonic(self, character: str) -> None: ...

    def set_displayed_mnemonic_index(self, index: int) -> None:
        """Underline the character at index; -1 clears it.

        Raises:
            MnemonicIndexError: If index is outside [-1, len(text))
        """
        ...


class IconProvider(Protocol):
    """Loads icons by resource file name, returning None instead of raising."""

    def load_icon(self, filename: str) -> Optional[IconHandle]: ...


# ─────────────────────────────────────────────────────────────────────────────
# Icons
# ─────────────────────────────────────────────────────────────────────────────

def apply_icon_set(control: Optional[Control], icons: IconSet) -> bool:
    """
    Assign every slot of an icon set to the control.

    Returns:
        False if control is None. Otherwise whether the enabled icon is
        present, which tells the caller icon resources were actually found.
    """
    if control is None:
        return False

    for slot, icon in icons.by_slot().items():
        control.set_icon(slot, icon)
    return icons.enabled is not None


def apply_icons(
    control: Optional[Control],
    enabled_icon: Optional[IconHandle],
    disabled_icon: Optional[IconHandle],
) -> bool:
    """
    Assign enabled_icon to the normal, pressed, rollover and selected slots
    and disabled_icon to the disabled slot.

    Returns:
        See apply_icon_set.
    """
    return apply_icon_set(control, IconSet.from_pair(enabled_icon, disabled_icon))


# ─────────────────────────────────────────────────────────────────────────────
# Text
# ─────────────────────────────────────────────────────────────────────────────

def apply_text(
    control: Optional[Control],
    group: Optional[str],
    item: Optional[str],
    table: StringTable,
    use_mnemonic: bool = True,
    config: Optional[ResolverConfig] = None,
) -> bool:
    """
    Set the control's text, and optionally its mnemonic, from the table.

    Returns:
        True when the text (and mnemonic, if requested) was applied. False
        when control is None, no usable label resolves, or the control
        rejects the mnemonic index. A rejected index does not undo the text
        and mnemonic already set.
    """
    if control is None:
        return False

    config = config or DEFAULT_CONFIG
    label = resolve_label(group, item, table, config)
    if label is None or not label.clean_text.strip():
        return False

    control.set_text(label.clean_text)

    if not use_mnemonic:
        return True

    mnemonic = mnemonic_spec(label, config.locale)
    if mnemonic is None:
        logger.debug("Label %r designates no mnemonic character", label.raw_text)
        return True

    control.set_mnemonic(mnemonic.character)
    try:
        control.set_displayed_mnemonic_index(mnemonic.display_index)
    except (IndexError, ValueError) as e:
        logger.warning(
            "Could not underline mnemonic %r in %r: %s",
            mnemonic.character,
            label.clean_text,
            e,
        )
        return False

    return True


def apply_tool_tip(
    control: Optional[Control],
    group: Optional[str],
    item: Optional[str],
    table: StringTable,
    config: Optional[ResolverConfig] = None,
) -> bool:
    """
    Set the control's tooltip if the table has one and the control can
    show one.

    Returns:
        Whether a tooltip was applied.
    """
    setter = getattr(control, "set_tool_tip", None)
    if not callable(setter):
        return False

    text = resolve_tool_tip(group, item, table, config)
    if text is None:
        return False

    setter(text)
    return True


# ─────────────────────────────────────────────────────────────────────────────
# Combined
# ─────────────────────────────────────────────────────────────────────────────

def bind(
    control: Optional[Control],
    group: Optional[str],
    item: Optional[str],
    icons: Union[IconSet, IconHandle, None],
    table: StringTable,
    use_mnemonic: bool = True,
    config: Optional[ResolverConfig] = None,
) -> bool:
    """
    Apply icons, text, mnemonic and tooltip to a control.

    Args:
        icons: An IconSet, or a single icon used for every state.

    Returns:
        The outcome of the text step. Icon presence and tooltip presence are
        informational only.
    """
    icon_set = icons if isinstance(icons, IconSet) else IconSet.single(icons)
    if not apply_icon_set(control, icon_set) and control is not None:
        logger.debug("No enabled icon for %s", (group, item))

    bound = apply_text(control, group, item, table, use_mnemonic, config)
    apply_tool_tip(control, group, item, table, config)
    return bound


def bind_from_files(
    control: Optional[Control],
    group: Optional[str],
    item: Optional[str],
    enabled_filename: Optional[str],
    disabled_filename: Optional[str],
    table: StringTable,
    icon_provider: IconProvider,
    use_mnemonic: bool = True,
    config: Optional[ResolverConfig] = None,
) -> bool:
    """
    bind() with icons loaded from resource file names.

    When disabled_filename is None the enabled icon also serves as the
    disabled icon.
    """
    enabled_icon = icon_provider.load_icon(enabled_filename) if enabled_filename else None
    if disabled_filename is None:
        disabled_icon = enabled_icon
    else:
        disabled_icon = icon_provider.load_icon(disabled_filename)

    return bind(
        control,
        group,
        item,
        IconSet.from_pair(enabled_icon, disabled_icon),
        table,
        use_mnemonic,
        config,
    )
