"""
Icon loading for control binding.

Icons are named either by a QtAwesome glyph ("mdi6.folder-open-outline") or
by an image file, absolute or relative to the provider's base directory.
Missing or unreadable icons come back as None; nothing here raises.
"""
from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Optional, Union

import qtawesome as qta
from PySide6.QtGui import QIcon, QImageReader

from control_resources.core.models import IconSet
from control_resources.gui.styles.theme import get_colors, get_icon_path

logger = logging.getLogger(__name__)

# QtAwesome glyph names: "<font prefix>.<glyph>"
_GLYPH_PATTERN = re.compile(
    r"^(?:fa|fa5|fa5s|fa5b|fa6|fa6s|fa6b|ei|mdi|mdi6|ph|ri|msc)\.[a-z0-9][a-z0-9-]*$"
)


def is_glyph_name(name: str) -> bool:
    return bool(_GLYPH_PATTERN.match(name))


class IconProvider:
    """
    Loads QIcons for the binder.

    Args:
        base_dir: Directory relative file names resolve against. Defaults to
            the packaged icons directory.
        color: Colour for QtAwesome glyphs. Defaults to the theme's
            secondary text colour at load time.
    """

    def __init__(
        self,
        base_dir: Optional[Union[str, Path]] = None,
        color: Optional[str] = None,
    ) -> None:
        self.base_dir = Path(base_dir) if base_dir is not None else Path(get_icon_path(""))
        self.color = color

    def resolve_path(self, filename: str) -> Path:
        path = Path(filename)
        return path if path.is_absolute() else self.base_dir / path

    def load_icon(self, filename: Optional[str]) -> Optional[QIcon]:
        """Load an icon, or return None if it is missing or unreadable."""
        if not filename:
            return None

        if is_glyph_name(filename):
            return self._load_glyph(filename)

        path = self.resolve_path(filename)
        if not path.is_file():
            logger.debug("Icon file not found: %s", path)
            return None

        if not QImageReader(path.as_posix()).canRead():
            logger.warning("Icon file could not be decoded: %s", path)
            return None
        return QIcon(path.as_posix())

    def load_icon_set(
        self,
        enabled_filename: Optional[str],
        disabled_filename: Optional[str] = None,
    ) -> IconSet:
        """IconSet.from_pair over loaded icons; one file serves both if needed."""
        enabled = self.load_icon(enabled_filename)
        if disabled_filename is None:
            return IconSet.single(enabled)
        return IconSet.from_pair(enabled, self.load_icon(disabled_filename))

    def _load_glyph(self, name: str) -> Optional[QIcon]:
        color = self.color or get_colors().TEXT_SECONDARY
        try:
            return qta.icon(name, color=color)
        except Exception as e:
            # QtAwesome raises for unknown glyphs and unloaded fonts.
            logger.debug("Icon glyph unavailable %s: %s", name, e)
            return None
