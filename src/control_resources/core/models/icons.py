"""
Module: icons

Purpose:
    Icon state slots, icon sets shared across a control's visual states,
    and the standard icon sizes for each usage context.

Key Classes:
    - IconSlot: The five visual states a control can carry an icon for
    - IconSet: Immutable icon references per slot
    - IconContext: Standard icon size and inset per usage context

Dependencies:
    - dataclasses (std)
    - enum (std)

Used By:
    - core.binder
    - gui.control
    - gui.icons
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

# Opaque toolkit icon (QIcon, PhotoImage, ...). Never mutated here.
IconHandle = Any


class IconSlot(str, Enum):
    """Visual states that can each carry an icon."""

    NORMAL = "normal"
    DISABLED = "disabled"
    PRESSED = "pressed"
    ROLLOVER = "rollover"
    SELECTED = "selected"


@dataclass(frozen=True)
class IconSet:
    """
    Icon references for every visual state of a control.

    The binder only assigns these references into control slots; icons are
    shared and never copied or mutated. Any slot may be None.

    Attributes:
        enabled: Icon for the normal, enabled state
        disabled: Icon for the disabled state
        pressed: Icon while pressed
        rollover: Icon while hovered
        selected: Icon while selected/checked

    Example:
        >>> icons = IconSet.from_pair("play", "play-grey")
        >>> icons.rollover
        'play'
    """

    enabled: Optional[IconHandle] = None
    disabled: Optional[IconHandle] = None
    pressed: Optional[IconHandle] = None
    rollover: Optional[IconHandle] = None
    selected: Optional[IconHandle] = None

    @classmethod
    def from_pair(
        cls,
        enabled: Optional[IconHandle],
        disabled: Optional[IconHandle],
    ) -> "IconSet":
        """
        Build the usual set: one icon for every active state, plus a
        distinct disabled icon.

        Pressed and rollover feedback comes from the toolkit's own shading,
        so only the disabled state needs its own art.
        """
        return cls(
            enabled=enabled,
            disabled=disabled,
            pressed=enabled,
            rollover=enabled,
            selected=enabled,
        )

    @classmethod
    def single(cls, icon: Optional[IconHandle]) -> "IconSet":
        return cls.from_pair(icon, icon)

    def by_slot(self) -> Dict[IconSlot, Optional[IconHandle]]:
        return {
            IconSlot.NORMAL: self.enabled,
            IconSlot.DISABLED: self.disabled,
            IconSlot.PRESSED: self.pressed,
            IconSlot.ROLLOVER: self.rollover,
            IconSlot.SELECTED: self.selected,
        }


class IconContext(str, Enum):
    """Places icons appear, each with a standard size and inset in pixels."""

    FRAME_TITLE = "frame_title"
    MENU = "menu"
    TOOLBAR = "toolbar"
    CONTROL_PANEL = "control_panel"

    @property
    def size(self) -> int:
        return _ICON_METRICS[self][0]

    @property
    def inset(self) -> int:
        return _ICON_METRICS[self][1]


_ICON_METRICS: Dict[IconContext, tuple[int, int]] = {
    IconContext.FRAME_TITLE: (16, 2),
    IconContext.MENU: (16, 2),
    IconContext.TOOLBAR: (24, 4),
    IconContext.CONTROL_PANEL: (32, 6),
}
