"""
Module: appearance

Purpose:
    Two-state colour mapping for toggle-style controls. Rendering asks for
    the background and text colour of the current selection state on every
    repaint, so lookups are plain attribute selection.

Key Classes:
    - ToggleAppearance: (background, text colour) per selection state

Dependencies:
    - dataclasses, logging (std)
    - PIL.ImageColor (colour string parsing for contrast decisions)

Used By:
    - gui.styles.theme
    - gui.widgets.color_toggle_button
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from PIL import ImageColor

logger = logging.getLogger(__name__)

LIGHT_TEXT = "#ffffff"
DARK_TEXT = "#000000"
LIGHT_INSET = "#c0c0c0"
DARK_INSET = "#404040"

# Perceived luminance (0-255) below which a colour counts as dark.
DARK_LUMINANCE_THRESHOLD = 128


@dataclass(frozen=True, slots=True)
class ToggleAppearance:
    """
    Background and text colours for the selected and deselected states.

    Colours are any string PIL.ImageColor understands ("#1490DF", "white",
    "rgb(0, 0, 0)"); they are passed through untouched to the renderer.

    Example:
        >>> look = ToggleAppearance("#1490DF", "#ffffff", "#ffffff", "#1f1f1f")
        >>> look.background_for(True)
        '#1490DF'
        >>> look.text_color_for(False)
        '#1f1f1f'
    """

    selected_background: str
    deselected_background: str
    selected_text: str
    deselected_text: str

    def background_for(self, selected: bool) -> str:
        return self.selected_background if selected else self.deselected_background

    def text_color_for(self, selected: bool) -> str:
        return self.selected_text if selected else self.deselected_text

    def inset_color_for(self, selected: bool) -> str:
        """Bevel/inset colour that stays visible against the background."""
        if is_dark(self.background_for(selected)):
            return LIGHT_INSET
        return DARK_INSET

    @staticmethod
    def contrast_text_color(background: str) -> str:
        """Text colour guaranteed to be readable on the given background."""
        return LIGHT_TEXT if is_dark(background) else DARK_TEXT


def is_dark(color: str) -> bool:
    """
    Whether a colour is dark by perceived luminance.

    Colours PIL cannot parse (Qt names such as "transparent") count as light.
    """
    try:
        rgb = ImageColor.getrgb(color)
    except ValueError:
        logger.debug("Cannot judge luminance of colour %r", color)
        return False
    r, g, b = rgb[0], rgb[1], rgb[2]
    luminance = 0.299 * r + 0.587 * g + 0.114 * b
    return luminance < DARK_LUMINANCE_THRESHOLD
