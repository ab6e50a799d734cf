"""
Services for chainnotes.

- NoteAdapter: read and write notes against the registry
- note_mapper: pure transforms between stored payloads and the Note schema
"""

from chainnotes.services.note_adapter import NoteAdapter
from chainnotes.services.note_mapper import (
    build_related_urls,
    event_to_note,
    merge_payload,
    prepare_for_storage,
    restore_legacy_fields,
)

__all__ = [
    "NoteAdapter",
    "build_related_urls",
    "event_to_note",
    "merge_payload",
    "prepare_for_storage",
    "restore_legacy_fields",
]
