"""
PySide6 adapter for the binder's Control protocol.

Qt has one QIcon per widget with modes and states instead of separate icon
properties per state, and marks mnemonics with "&" inside the text instead
of a separate index. QtControl keeps the per-slot icons and the plain text
itself and re-renders both into the wrapped button or action.
"""
from __future__ import annotations

from typing import Dict, Optional, Union

from PySide6.QtCore import QSize
from PySide6.QtGui import QAction, QIcon, QKeySequence
from PySide6.QtWidgets import QAbstractButton

from control_resources.core.errors import MnemonicIndexError
from control_resources.core.models import IconContext, IconSlot


QT_MNEMONIC_MARKER = "&"

# Where each slot lands in the composite QIcon.
_SLOT_MODES = {
    IconSlot.NORMAL: ((QIcon.Mode.Normal, QIcon.State.Off),),
    IconSlot.DISABLED: (
        (QIcon.Mode.Disabled, QIcon.State.Off),
        (QIcon.Mode.Disabled, QIcon.State.On),
    ),
    IconSlot.ROLLOVER: ((QIcon.Mode.Active, QIcon.State.Off),),
    IconSlot.PRESSED: ((QIcon.Mode.Active, QIcon.State.On),),
    IconSlot.SELECTED: ((QIcon.Mode.Normal, QIcon.State.On),),
}


def with_mnemonic_marker(text: str, index: int) -> str:
    """Qt display text: literal "&" doubled, a single "&" before index."""
    parts = []
    for i, ch in enumerate(text):
        if i == index:
            parts.append(QT_MNEMONIC_MARKER)
        parts.append(QT_MNEMONIC_MARKER * 2 if ch == QT_MNEMONIC_MARKER else ch)
    return "".join(parts)


class QtControl:
    """
    Control protocol over a QAbstractButton or QAction.

    Args:
        target: Button or action to drive.
        context: Icon context that sets the rendered icon size.
    """

    def __init__(
        self,
        target: Union[QAbstractButton, QAction],
        context: IconContext = IconContext.TOOLBAR,
    ) -> None:
        self.target = target
        self.context = context
        self._text = ""
        self._mnemonic: Optional[str] = None
        self._displayed_index = -1
        self._icons: Dict[IconSlot, Optional[QIcon]] = {}

        if isinstance(target, QAbstractButton):
            target.setIconSize(QSize(context.size, context.size))

    # ─────────────────────────────────────────────────────────────────────────
    # Control protocol
    # ─────────────────────────────────────────────────────────────────────────

    def set_text(self, text: str) -> None:
        self._text = text
        self._displayed_index = -1
        self._render_text()

    def set_icon(self, slot: IconSlot, icon: Optional[QIcon]) -> None:
        self._icons[slot] = icon
        self.target.setIcon(self._composite_icon())

    def set_mnemonic(self, character: str) -> None:
        self._mnemonic = character
        self._apply_shortcut()

    def set_displayed_mnemonic_index(self, index: int) -> None:
        if index < -1 or index >= len(self._text):
            raise MnemonicIndexError(index, len(self._text))
        self._displayed_index = index
        self._render_text()

    def set_tool_tip(self, text: str) -> None:
        self.target.setToolTip(text)

    # ─────────────────────────────────────────────────────────────────────────
    # Accessors
    # ─────────────────────────────────────────────────────────────────────────

    def text(self) -> str:
        return self._text

    def mnemonic(self) -> Optional[str]:
        return self._mnemonic

    def displayed_mnemonic_index(self) -> int:
        return self._displayed_index

    def icon(self, slot: IconSlot) -> Optional[QIcon]:
        return self._icons.get(slot)

    # ─────────────────────────────────────────────────────────────────────────
    # Rendering
    # ─────────────────────────────────────────────────────────────────────────

    def _render_text(self) -> None:
        self.target.setText(with_mnemonic_marker(self._text, self._displayed_index))
        # QAbstractButton.setText() resets the shortcut from the "&" marker.
        self._apply_shortcut()

    def _apply_shortcut(self) -> None:
        if self._mnemonic and isinstance(self.target, QAbstractButton):
            self.target.setShortcut(QKeySequence(f"Alt+{self._mnemonic}"))

    def _composite_icon(self) -> QIcon:
        size = QSize(self.context.size, self.context.size)
        composite = QIcon()
        for slot, placements in _SLOT_MODES.items():
            source = self._icons.get(slot)
            if source is None or source.isNull():
                continue
            pixmap = source.pixmap(size)
            for mode, state in placements:
                composite.addPixmap(pixmap, mode, state)
        return composite
