"""
Theme definitions for control_resources widgets.
"""
import sys
from pathlib import Path

from control_resources.core.models import ToggleAppearance


def get_icon_path(filename):
    """Get absolute path to a packaged icon file, handling frozen/dev modes."""
    if hasattr(sys, '_MEIPASS'):
        # PyInstaller bundle
        base_path = Path(sys._MEIPASS) / "control_resources" / "gui" / "styles" / "icons"
    else:
        # Development mode: relative to this file
        base_path = Path(__file__).resolve().parent / "icons"

    return (base_path / filename).as_posix()


class Colors:
    # Primary Colors
    PRIMARY_BLUE = "#0364B8"
    PRIMARY_BLUE_HOVER = "#0A2767"

    # Backgrounds
    BACKGROUND = "#f5f5f5"
    SURFACE = "#ffffff"
    HOVER = "#f0f0f0"
    DISABLED_BG = "#e0e0e0"

    # Text
    TEXT_PRIMARY = "#1f1f1f"
    TEXT_SECONDARY = "#666666"
    TEXT_DISABLED = "#757575"
    TEXT_ON_PRIMARY = "#ffffff"

    # Borders
    BORDER = "#e0e0e0"
    BORDER_FOCUS = "#28A8EA"

    # Status
    ERROR = "#d32f2f"

    # Toggles
    TOGGLE_BG = "#1490DF"


class ColorsDark:
    """Dark theme palette."""

    PRIMARY_BLUE = "#3794FF"
    PRIMARY_BLUE_HOVER = "#4FA3FF"

    BACKGROUND = "#1e1e1e"
    SURFACE = "#252526"
    HOVER = "#21262D"
    DISABLED_BG = "#3D444D"

    TEXT_PRIMARY = "#E6EDF3"
    TEXT_SECONDARY = "#8B949E"
    TEXT_DISABLED = "#9CA3AF"
    TEXT_ON_PRIMARY = "#FFFFFF"

    BORDER = "#30363D"
    BORDER_FOCUS = "#3794FF"

    ERROR = "#F85149"

    TOGGLE_BG = "#3794FF"


class Fonts:
    WEIGHT_MEDIUM = "500"


# QSS template for a two-state colour button; filled per state.
TOGGLE_BUTTON_STYLE = """
    QPushButton {{
        background-color: {background};
        color: {text};
        border: 2px outset {inset};
        border-radius: 4px;
        padding: 4px 14px;
        font-weight: {weight};
    }}
    QPushButton:disabled {{
        background-color: {disabled_bg};
        color: {disabled_text};
    }}
"""


_is_dark_mode = False

def set_dark_mode(is_dark: bool):
    """Set the global theme mode."""
    global _is_dark_mode
    _is_dark_mode = is_dark


def get_colors():
    """Get the appropriate color palette based on current theme."""
    return ColorsDark if _is_dark_mode else Colors


def toggle_appearance(colors=None) -> ToggleAppearance:
    """Default selected/deselected colours for toggle buttons in a palette."""
    C = colors or get_colors()
    return ToggleAppearance(
        selected_background=C.TOGGLE_BG,
        deselected_background=C.SURFACE,
        selected_text=C.TEXT_ON_PRIMARY,
        deselected_text=C.TEXT_PRIMARY,
    )
