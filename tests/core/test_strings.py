"""
Unit Tests for the mapping-backed string table.
"""

import pytest

from control_resources.core.errors import MissingResourceError
from control_resources.core.strings import MappingStringTable, StringTable


class TestMappingStringTable:

    def test_lookup_when_present_then_returns_value(self):
        table = MappingStringTable({"File.label": "&File"})
        assert table.lookup("File.label") == "&File"

    def test_lookup_when_missing_then_raises_missing_resource(self):
        table = MappingStringTable({})
        with pytest.raises(MissingResourceError) as exc_info:
            table.lookup("File.label")
        assert exc_info.value.key == "File.label"

    def test_missing_resource_is_a_key_error(self):
        with pytest.raises(KeyError):
            MappingStringTable().lookup("x")

    def test_contains_key(self):
        table = MappingStringTable({"File.label": "&File"})
        assert table.contains_key("File.label")
        assert not table.contains_key("File.toolTip")

    def test_satisfies_string_table_protocol(self):
        assert isinstance(MappingStringTable(), StringTable)
        assert len(MappingStringTable({"a": "b"})) == 1
