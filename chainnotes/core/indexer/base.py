"""
Abstract base class for index readers.
Queries notes committed to the registry.
"""

from abc import ABC, abstractmethod

from chainnotes.models.events import NoteEvent, NotesPage, NotesQuery


class IndexReader(ABC):
    """
    Abstract base for note indexers.

    Responsibilities:
    - Single-note lookup by profile handle and note id
    - Paginated queries scoped by profile and/or target URL
    """

    @abstractmethod
    async def get_note(self, profile_id: int | str, note_id: int | str) -> NoteEvent | None:
        """
        Fetch one note.

        Args:
            profile_id: Owning profile handle
            note_id: Per-profile note id

        Returns:
            Note event, or None if the note does not exist or was deleted
        """
        pass

    @abstractmethod
    async def get_notes(self, query: NotesQuery) -> NotesPage:
        """
        Fetch one page of notes.

        Args:
            query: Pagination cursor, page size and scope

        Returns:
            Page with the total count, events in index order and the next
            cursor when more pages may exist
        """
        pass

    async def close(self):
        """Close any open connections."""
        return None
