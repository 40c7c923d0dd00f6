"""Unit tests for the PySide6 Control adapter."""

import pytest
from PySide6.QtCore import QSize
from PySide6.QtGui import QAction, QColor, QIcon, QKeySequence, QPixmap
from PySide6.QtWidgets import QPushButton

from control_resources.core.binder import apply_icon_set, apply_icons, bind
from control_resources.core.errors import MnemonicIndexError
from control_resources.core.models import IconContext, IconSet, IconSlot
from control_resources.gui.control import QtControl, with_mnemonic_marker


def _solid_icon(color: str) -> QIcon:
    pixmap = QPixmap(24, 24)
    pixmap.fill(QColor(color))
    return QIcon(pixmap)


class TestWithMnemonicMarker:

    def test_marks_index(self):
        assert with_mnemonic_marker("OpenFile", 4) == "Open&File"

    def test_no_index_escapes_only(self):
        assert with_mnemonic_marker("Save & Exit", -1) == "Save && Exit"

    def test_marks_index_after_escaped_ampersand(self):
        assert with_mnemonic_marker("R&D Tools", 4) == "R&&D &Tools"


class TestQtControlText:

    def test_bind_sets_qt_text_and_shortcut(self, qtbot, string_table):
        button = QPushButton()
        qtbot.addWidget(button)
        control = QtControl(button)

        assert bind(control, "File", "OpenFile", None, string_table) is True

        assert control.text() == "OpenFile"
        assert button.text() == "Open&File"
        assert control.mnemonic() == "F"
        assert control.displayed_mnemonic_index() == 4
        assert button.shortcut() == QKeySequence("Alt+F")

    def test_bind_sets_tool_tip(self, qtbot, string_table):
        button = QPushButton()
        qtbot.addWidget(button)

        bind(QtControl(button), "File", "Open", None, string_table)

        assert button.toolTip() == "Open an existing project"

    def test_no_marker_keeps_shortcut_without_underline(self, qtbot, string_table):
        button = QPushButton()
        qtbot.addWidget(button)
        control = QtControl(button)

        assert bind(control, "Edit", "NoMarker", None, string_table) is True

        assert button.text() == "Paste"
        assert button.shortcut() == QKeySequence("Alt+P")

    def test_set_text_clears_previous_underline(self, qtbot):
        button = QPushButton()
        qtbot.addWidget(button)
        control = QtControl(button)
        control.set_text("Open")
        control.set_displayed_mnemonic_index(0)

        control.set_text("Close")

        assert button.text() == "Close"
        assert control.displayed_mnemonic_index() == -1

    @pytest.mark.parametrize("index", [5, 99, -2])
    def test_index_out_of_range_raises(self, qtbot, index):
        button = QPushButton()
        qtbot.addWidget(button)
        control = QtControl(button)
        control.set_text("Paste")

        with pytest.raises(MnemonicIndexError):
            control.set_displayed_mnemonic_index(index)
        assert button.text() == "Paste"

    def test_action_target(self, qtbot, string_table):
        action = QAction()
        control = QtControl(action, IconContext.MENU)

        assert bind(control, "File", "Open", None, string_table) is True

        assert action.text() == "&Open..."
        assert action.toolTip() == "Open an existing project"


class TestQtControlIcons:

    def test_icon_size_follows_context(self, qtbot):
        button = QPushButton()
        qtbot.addWidget(button)
        QtControl(button, IconContext.CONTROL_PANEL)
        assert button.iconSize() == QSize(32, 32)

    def test_apply_icons_fills_composite_icon(self, qtbot):
        button = QPushButton()
        qtbot.addWidget(button)
        control = QtControl(button)
        enabled = _solid_icon("#1490DF")
        disabled = _solid_icon("#e0e0e0")

        assert apply_icons(control, enabled, disabled) is True

        assert not button.icon().isNull()
        assert control.icon(IconSlot.NORMAL) is enabled
        assert control.icon(IconSlot.ROLLOVER) is enabled
        assert control.icon(IconSlot.DISABLED) is disabled

    def test_missing_icons_leave_null_icon(self, qtbot):
        button = QPushButton()
        qtbot.addWidget(button)
        control = QtControl(button)

        assert apply_icons(control, None, None) is False
        assert button.icon().isNull()

    def test_disabled_slot_uses_disabled_art(self, qtbot):
        button = QPushButton()
        qtbot.addWidget(button)
        control = QtControl(button)

        control.set_icon(IconSlot.NORMAL, _solid_icon("#ff0000"))
        control.set_icon(IconSlot.DISABLED, _solid_icon("#00ff00"))

        pixmap = button.icon().pixmap(QSize(24, 24), QIcon.Mode.Disabled)
        assert pixmap.toImage().pixelColor(5, 5).name() == "#00ff00"

    def test_icon_set_with_selected_state(self, qtbot):
        button = QPushButton()
        qtbot.addWidget(button)
        control = QtControl(button)
        icons = IconSet(enabled=_solid_icon("#ff0000"), selected=_solid_icon("#0000ff"))

        apply_icon_set(control, icons)

        pixmap = button.icon().pixmap(QSize(24, 24), QIcon.Mode.Normal, QIcon.State.On)
        assert pixmap.toImage().pixelColor(5, 5).name() == "#0000ff"
