"""
Shared test fixtures.

Everything runs against in-process collaborators: a static identity
resolver, an in-memory content store and an in-memory registry acting as
both ledger client and index reader.
"""

from datetime import datetime, timezone

import pytest

from chainnotes.config import Config, ContentStoreConfig, IndexerConfig, LedgerConfig, LoggingConfig
from chainnotes.core.content_store.memory import InMemoryContentStore
from chainnotes.core.identity.static import StaticIdentityResolver
from chainnotes.core.registry.memory import InMemoryNoteRegistry
from chainnotes.models.events import NoteEvent, NoteEventMetadata
from chainnotes.services.note_adapter import NoteAdapter

IDENTITY = "0xabc"
PROFILE_ID = 7
OTHER_IDENTITY = "0xdef"
OTHER_PROFILE_ID = 9


@pytest.fixture
def config() -> Config:
    """Configuration wired to in-memory providers."""
    return Config(
        content_store=ContentStoreConfig(provider="memory", retry_delay=0.0),
        indexer=IndexerConfig(provider="memory"),
        ledger=LedgerConfig(provider="memory"),
        logging=LoggingConfig(log_to_file=False),
    )


@pytest.fixture
def identity_resolver() -> StaticIdentityResolver:
    return StaticIdentityResolver(
        profiles={
            f"Ethereum:{IDENTITY}": PROFILE_ID,
            f"Ethereum:{OTHER_IDENTITY}": OTHER_PROFILE_ID,
        }
    )


@pytest.fixture
def content_store() -> InMemoryContentStore:
    return InMemoryContentStore()


@pytest.fixture
def registry(content_store) -> InMemoryNoteRegistry:
    return InMemoryNoteRegistry(content_store=content_store, owners={PROFILE_ID: "0xowner"})


@pytest.fixture
def adapter(identity_resolver, content_store, registry, config) -> NoteAdapter:
    """Adapter reading and writing through the shared in-memory registry."""
    return NoteAdapter(
        identity_resolver=identity_resolver,
        content_store=content_store,
        config=config,
        indexer=registry,
        ledger=registry,
    )


@pytest.fixture
def make_event():
    """Build raw note events with sensible defaults."""

    def _make_event(note_id: int = 1, content: dict | None = None, **overrides) -> NoteEvent:
        fields = {
            "note_id": note_id,
            "profile_id": PROFILE_ID,
            "created_at": datetime(2024, 1, 1, tzinfo=timezone.utc),
            "updated_at": datetime(2024, 1, 2, tzinfo=timezone.utc),
            "block_number": 100 + note_id,
            "owner": "0xowner",
            "transaction_hash": f"0xcreate{note_id}",
            "updated_transaction_hash": f"0xcreate{note_id}",
            "uri": f"ipfs://bafycontent{note_id}",
            "metadata": NoteEventMetadata(content=content) if content is not None else None,
        }
        fields.update(overrides)
        return NoteEvent(**fields)

    return _make_event
