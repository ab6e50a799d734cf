"""
Data models for chainnotes.

- Note, NoteContent, Attachment, NoteMetadata: normalized note schema
- NoteInput: caller input for writes
- NotesOptions, NotesFilter, NoteSetOptions, NoteAction: caller options
- NotesResult, SetResult: adapter results
- NoteEvent, NotesQuery, NotesPage, TransactionReceipt: ledger/indexer records
"""

from chainnotes.models.events import (
    NoteEvent,
    NoteEventMetadata,
    NotesPage,
    NotesQuery,
    TransactionReceipt,
)
from chainnotes.models.note import Attachment, Note, NoteContent, NoteInput, NoteMetadata
from chainnotes.models.options import NoteAction, NoteSetOptions, NotesFilter, NotesOptions
from chainnotes.models.results import NotesResult, SetResult

__all__ = [
    # Note schema
    "Note",
    "NoteContent",
    "Attachment",
    "NoteMetadata",
    "NoteInput",
    # Options
    "NoteAction",
    "NotesFilter",
    "NotesOptions",
    "NoteSetOptions",
    # Results
    "NotesResult",
    "SetResult",
    # Ledger / indexer records
    "NoteEvent",
    "NoteEventMetadata",
    "NotesQuery",
    "NotesPage",
    "TransactionReceipt",
]
