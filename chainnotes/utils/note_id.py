"""
Composite note identifiers.

A note is addressed externally as "{profile_id}-{note_id}": the numeric
profile handle that owns it and the per-profile sequence number assigned by
the ledger. Parsing splits on the first "-" only.
"""

from typing import NamedTuple


class NoteId(NamedTuple):
    """Value type for a composite note id."""

    profile_id: str
    note_id: str

    @classmethod
    def parse(cls, text: str) -> "NoteId":
        """
        Split a composite id into its profile and note components.

        Never raises for a string input. A malformed id yields components
        that fail ``is_valid`` and never match a real profile handle.

        Args:
            text: Composite id such as "42-7"

        Returns:
            NoteId with both components as strings
        """
        profile_id, _, note_id = text.partition("-")
        return cls(profile_id=profile_id, note_id=note_id)

    @classmethod
    def is_valid(cls, text: str | None) -> bool:
        """Check that both components are present and decimal."""
        if not text:
            return False
        parsed = cls.parse(text)
        return parsed.profile_id.isdigit() and parsed.note_id.isdigit()

    def format(self) -> str:
        return f"{self.profile_id}-{self.note_id}"

    def belongs_to(self, profile_id: int | str) -> bool:
        """Check whether the id is owned by the given profile handle."""
        return self.profile_id == str(profile_id)

    def __str__(self) -> str:
        return self.format()


def format_note_id(profile_id: int | str, note_id: int | str) -> str:
    """Build the composite id for a note."""
    return NoteId(str(profile_id), str(note_id)).format()
