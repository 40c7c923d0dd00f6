"""PySide6 adapters, icon loading and widgets for control_resources."""

from .control import QtControl
from .icons import IconProvider

__all__ = ["IconProvider", "QtControl"]
