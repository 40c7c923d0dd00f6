"""
Unit Tests for label and tooltip resolution.
"""

import logging

import pytest

from control_resources.core.config import ResolverConfig
from control_resources.core.labels import (
    parse_label,
    resolve_clean_label,
    resolve_label,
    resolve_toggle_texts,
    resolve_tool_tip,
)
from control_resources.core.models import Label
from control_resources.core.strings import MappingStringTable


class TestParseLabel:
    """Tests for parse_label."""

    def test_parse_label_when_marker_then_records_index_and_clean_text(self):
        assert parse_label("Open&File") == Label("Open&File", 4, "OpenFile")

    def test_parse_label_when_no_marker_then_index_minus_one(self):
        label = parse_label("Paste")
        assert label.marker_index == -1
        assert label.clean_text == "Paste"
        assert label.mnemonic_index == 0
        assert not label.has_marker

    def test_parse_label_when_custom_marker_then_uses_config(self):
        label = parse_label("Save _As", ResolverConfig(marker="_", target_marker="&"))
        assert label == Label("Save _As", 5, "Save As")


class TestResolveLabel:
    """Tests for resolve_label."""

    def test_resolve_label_when_leading_marker_then_clean_and_index_zero(self, string_table):
        label = resolve_label("File", "Open", string_table)
        assert label.raw_text == "&Open..."
        assert label.clean_text == "Open..."
        assert label.marker_index == 0

    def test_resolve_label_when_inner_marker_then_index_four(self, string_table):
        label = resolve_label("File", "OpenFile", string_table)
        assert label.clean_text == "OpenFile"
        assert label.marker_index == 4

    def test_resolve_label_when_item_missing_then_uses_group_key(self, string_table):
        assert resolve_label("File", None, string_table).clean_text == "File"

    @pytest.mark.parametrize("group", [None, "", "  "])
    def test_resolve_label_when_group_blank_then_none(self, string_table, group):
        assert resolve_label(group, "Open", string_table) is None

    def test_resolve_label_when_entry_blank_then_none(self, string_table):
        assert resolve_label("Edit", "Blank", string_table) is None

    def test_resolve_label_when_lookup_raises_then_placeholder(self, failing_table, caplog):
        """A failing lookup is surfaced as a visibly broken label."""
        with caplog.at_level(logging.WARNING):
            label = resolve_label("File", "Open", failing_table)

        assert label.clean_text == "!File.Open!"
        assert label.raw_text == "!File.Open!"
        assert label.marker_index == -1
        assert "File.Open.label" in caplog.text

    def test_resolve_label_when_key_missing_then_placeholder(self, string_table):
        """Labels are required, so a missing entry is a visible defect too."""
        assert resolve_label("File", "Close", string_table).clean_text == "!File.Close!"

    def test_resolve_label_when_custom_delimiter_then_used_in_placeholder(self, failing_table):
        config = ResolverConfig(placeholder_delimiter="?")
        assert resolve_label("File", None, failing_table, config).clean_text == "?File?"


class TestResolveCleanLabel:
    """Tests for resolve_clean_label."""

    def test_resolve_clean_label_when_marker_then_stripped(self, string_table):
        assert resolve_clean_label("File", "Open", string_table) == "Open..."

    def test_resolve_clean_label_when_unresolvable_then_none(self, string_table):
        assert resolve_clean_label("", "Open", string_table) is None


class TestResolveToolTip:
    """Tests for resolve_tool_tip."""

    def test_resolve_tool_tip_when_present_then_returns_text(self, string_table):
        assert resolve_tool_tip("File", "Open", string_table) == "Open an existing project"

    def test_resolve_tool_tip_when_absent_then_none_without_lookup(self):
        table = MappingStringTable({"File.Open.label": "&Open"})
        assert resolve_tool_tip("File", "Open", table) is None

    def test_resolve_tool_tip_when_group_blank_then_none(self, string_table):
        assert resolve_tool_tip(None, "Open", string_table) is None

    def test_resolve_tool_tip_when_lookup_raises_then_none(self, failing_table):
        """A listed key that fails to load is logged, not raised."""
        assert resolve_tool_tip("File", "Open", failing_table) is None

    def test_resolve_tool_tip_never_calls_lookup_for_absent_key(self):
        class CountingTable(MappingStringTable):
            lookups = 0

            def lookup(self, key):
                CountingTable.lookups += 1
                return super().lookup(key)

        assert resolve_tool_tip("File", "Open", CountingTable({})) is None
        assert CountingTable.lookups == 0


class TestResolveToggleTexts:
    """Tests for resolve_toggle_texts."""

    def test_resolve_toggle_texts_when_state_entries_then_uses_them(self, string_table):
        assert resolve_toggle_texts("View", "Grid", string_table) == ("Hide Grid", "Show Grid")

    def test_resolve_toggle_texts_when_no_state_entries_then_plain_label(self, string_table):
        assert resolve_toggle_texts("File", "Open", string_table) == ("Open...", "Open...")

    def test_resolve_toggle_texts_when_unresolvable_then_none(self, string_table):
        assert resolve_toggle_texts(" ", None, string_table) is None
