"""Utility modules for chainnotes."""

from chainnotes.utils.exceptions import (
    ChainNotesError,
    ConfigurationError,
    ContentStoreError,
    IndexerError,
    LedgerError,
    NotFoundError,
    StoreError,
    UnsupportedActionError,
    ValidationError,
)
from chainnotes.utils.ipfs import replace_ipfs
from chainnotes.utils.logger import get_logger, setup_logging
from chainnotes.utils.mime import get_mime_type
from chainnotes.utils.note_id import NoteId, format_note_id

__all__ = [
    # Logging
    "get_logger",
    "setup_logging",
    # Identifiers
    "NoteId",
    "format_note_id",
    # URL helpers
    "replace_ipfs",
    "get_mime_type",
    # Exceptions
    "ChainNotesError",
    "ValidationError",
    "UnsupportedActionError",
    "NotFoundError",
    "ConfigurationError",
    "StoreError",
    "ContentStoreError",
    "IndexerError",
    "LedgerError",
]
