"""
Tests for composite note ids.
"""

import pytest

from chainnotes.utils import NoteId, format_note_id


class TestNoteId:
    """Tests for NoteId parsing and formatting."""

    def test_parse(self):
        note_id = NoteId.parse("5-10")

        assert note_id.profile_id == "5"
        assert note_id.note_id == "10"

    def test_splits_on_first_dash_only(self):
        assert NoteId.parse("12-3-4") == NoteId("12", "3-4")

    def test_parse_without_dash(self):
        assert NoteId.parse("12") == NoteId("12", "")

    def test_format_round_trip(self):
        assert NoteId.parse("42-7").format() == "42-7"
        assert str(NoteId("42", "7")) == "42-7"
        assert format_note_id(42, 7) == "42-7"

    @pytest.mark.parametrize("text", ["1-1", "42-1000"])
    def test_valid(self, text):
        assert NoteId.is_valid(text)

    @pytest.mark.parametrize("text", [None, "", "12", "12-", "-3", "a-3", "3-b", "1-2-3"])
    def test_invalid(self, text):
        assert not NoteId.is_valid(text)

    def test_belongs_to(self):
        note_id = NoteId.parse("7-3")

        assert note_id.belongs_to(7)
        assert note_id.belongs_to("7")
        assert not note_id.belongs_to(5)
