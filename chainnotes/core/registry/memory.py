"""
In-process note registry.

Plays both sides of the registry for local runs and tests: it accepts
ledger transactions and answers index queries from the same state. Payloads
are hydrated from an InMemoryContentStore the way a real indexer fetches
them from the content network.
"""

import asyncio
import hashlib
from datetime import datetime, timezone

from chainnotes.core.content_store.memory import InMemoryContentStore
from chainnotes.core.indexer.base import IndexReader
from chainnotes.core.ledger.base import LedgerClient
from chainnotes.models.events import (
    NoteEvent,
    NoteEventMetadata,
    NotesPage,
    NotesQuery,
    TransactionReceipt,
)
from chainnotes.utils.exceptions import LedgerError, NotFoundError
from chainnotes.utils.logger import get_logger

logger = get_logger(__name__)

ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"


class InMemoryNoteRegistry(LedgerClient, IndexReader):
    """
    Note registry held in a dict keyed by (profile_id, note_id).

    Note ids are assigned per profile starting at 1. Deletes are soft: the
    record stays and is hidden from default queries.
    """

    def __init__(
        self,
        content_store: InMemoryContentStore | None = None,
        owners: dict[int, str] | None = None,
    ):
        self.content_store = content_store
        self.owners = owners or {}
        self.notes: dict[tuple[int, int], NoteEvent] = {}
        self._sequences: dict[int, int] = {}
        self._block_number = 0
        self._tx_counter = 0
        self._lock = asyncio.Lock()
        self.connected = False

    async def connect(self) -> None:
        self.connected = True

    # Ledger side

    def _next_transaction(self) -> tuple[str, int]:
        self._tx_counter += 1
        self._block_number += 1
        tx_hash = "0x" + hashlib.sha256(f"tx-{self._tx_counter}".encode()).hexdigest()
        return tx_hash, self._block_number

    def _require(self, profile_id: int, note_id: int) -> NoteEvent:
        note = self.notes.get((profile_id, note_id))
        if note is None or note.deleted:
            raise LedgerError(
                f"Note {profile_id}-{note_id} does not exist",
                context={"profile_id": profile_id, "note_id": note_id},
            )
        return note

    async def _create(self, profile_id: int | str, uri: str, target_uri: str | None):
        profile_id = int(profile_id)
        async with self._lock:
            note_id = self._sequences.get(profile_id, 0) + 1
            self._sequences[profile_id] = note_id
            tx_hash, block_number = self._next_transaction()
            now = datetime.now(timezone.utc)

            self.notes[(profile_id, note_id)] = NoteEvent(
                note_id=note_id,
                profile_id=profile_id,
                created_at=now,
                updated_at=now,
                block_number=block_number,
                owner=self.owners.get(profile_id, ZERO_ADDRESS),
                transaction_hash=tx_hash,
                updated_transaction_hash=tx_hash,
                to_uri=target_uri,
                uri=uri,
            )

        logger.debug(f"Created note {profile_id}-{note_id} in block {block_number}")
        return TransactionReceipt(
            transaction_hash=tx_hash, note_id=note_id, block_number=block_number
        )

    async def post_note(self, profile_id: int | str, uri: str) -> TransactionReceipt:
        return await self._create(profile_id, uri, None)

    async def post_note_for_any_uri(
        self, profile_id: int | str, uri: str, target_uri: str
    ) -> TransactionReceipt:
        return await self._create(profile_id, uri, target_uri)

    async def delete_note(self, profile_id: int | str, note_id: int | str) -> TransactionReceipt:
        async with self._lock:
            note = self._require(int(profile_id), int(note_id))
            tx_hash, block_number = self._next_transaction()
            note.deleted = True
            note.updated_at = datetime.now(timezone.utc)
            note.updated_transaction_hash = tx_hash
        return TransactionReceipt(transaction_hash=tx_hash, block_number=block_number)

    async def set_note_uri(
        self, profile_id: int | str, note_id: int | str, uri: str
    ) -> TransactionReceipt:
        async with self._lock:
            note = self._require(int(profile_id), int(note_id))
            tx_hash, block_number = self._next_transaction()
            note.uri = uri
            note.updated_at = datetime.now(timezone.utc)
            note.updated_transaction_hash = tx_hash
        return TransactionReceipt(transaction_hash=tx_hash, block_number=block_number)

    # Index side

    def _hydrate(self, note: NoteEvent) -> NoteEvent:
        event = note.model_copy(deep=True)
        if self.content_store and note.uri:
            try:
                event.metadata = NoteEventMetadata(content=self.content_store.get_json(note.uri))
            except NotFoundError:
                logger.warning(f"Payload {note.uri} of note {note.profile_id}-{note.note_id} missing")
        return event

    async def get_note(self, profile_id: int | str, note_id: int | str) -> NoteEvent | None:
        try:
            note = self.notes.get((int(profile_id), int(note_id)))
        except ValueError:
            return None
        if note is None or note.deleted:
            return None
        return self._hydrate(note)

    async def get_notes(self, query: NotesQuery) -> NotesPage:
        matches = [
            note
            for note in self.notes.values()
            if (query.include_deleted or not note.deleted)
            and (query.profile_id is None or note.profile_id == query.profile_id)
            and (query.to_uri is None or note.to_uri == query.to_uri)
        ]
        # Newest first, as the indexer returns them
        matches.sort(key=lambda n: (n.block_number or 0), reverse=True)

        start = int(query.cursor) if query.cursor else 0
        end = start + query.limit if query.limit else len(matches)
        page = matches[start:end]

        return NotesPage(
            count=len(matches),
            cursor=str(end) if end < len(matches) else None,
            list=[self._hydrate(note) for note in page],
        )
