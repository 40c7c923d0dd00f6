import os
import sys
from pathlib import Path

import pytest

# Add src to sys.path so we can import control_resources
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

# Widget tests run without a display.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from control_resources.core.errors import MnemonicIndexError
from control_resources.core.strings import MappingStringTable


class RecordingControl:
    """In-memory Control that records every call made by the binder."""

    def __init__(self):
        self.text = None
        self.icons = {}
        self.mnemonic = None
        self.displayed_index = None
        self.tool_tip = None
        self.calls = []

    def set_text(self, text):
        self.calls.append("set_text")
        self.text = text

    def set_icon(self, slot, icon):
        self.calls.append("set_icon")
        self.icons[slot] = icon

    def set_mnemonic(self, character):
        self.calls.append("set_mnemonic")
        self.mnemonic = character

    def set_displayed_mnemonic_index(self, index):
        self.calls.append("set_displayed_mnemonic_index")
        if index < -1 or index >= len(self.text or ""):
            raise MnemonicIndexError(index, len(self.text or ""))
        self.displayed_index = index

    def set_tool_tip(self, text):
        self.calls.append("set_tool_tip")
        self.tool_tip = text


class BareControl:
    """Control without tooltip support."""

    def __init__(self):
        self.text = None

    def set_text(self, text):
        self.text = text

    def set_icon(self, slot, icon):
        pass

    def set_mnemonic(self, character):
        pass

    def set_displayed_mnemonic_index(self, index):
        pass


class FailingStringTable:
    """String table that lists every key but fails on lookup."""

    def lookup(self, key):
        raise RuntimeError(f"corrupt entry for {key}")

    def contains_key(self, key):
        return True


# Common test fixtures
@pytest.fixture
def string_table():
    """Return a small string table covering the common label shapes."""
    return MappingStringTable({
        "File.Open.label": "&Open...",
        "File.Open.toolTip": "Open an existing project",
        "File.OpenFile.label": "Open&File",
        "File.label": "&File",
        "Edit.Blank.label": "   ",
        "Edit.NoMarker.label": "Paste",
        "Edit.Trailing.label": "Cut&",
        "View.Grid.label": "&Grid",
        "View.Grid.selected.label": "Hide &Grid",
        "View.Grid.deselected.label": "Show &Grid",
        "View.Grid.toolTip": "Toggle the grid overlay",
    })


@pytest.fixture
def failing_table():
    return FailingStringTable()


@pytest.fixture
def control():
    return RecordingControl()


@pytest.fixture
def bare_control():
    return BareControl()
