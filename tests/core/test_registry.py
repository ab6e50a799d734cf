"""
Tests for the in-memory note registry.
"""

import pytest

from chainnotes.core.content_store.memory import InMemoryContentStore
from chainnotes.core.registry.memory import ZERO_ADDRESS, InMemoryNoteRegistry
from chainnotes.models.events import NotesQuery
from chainnotes.utils.exceptions import LedgerError


@pytest.fixture
def store():
    return InMemoryContentStore()


@pytest.fixture
def reg(store):
    return InMemoryNoteRegistry(content_store=store)


@pytest.mark.unit
@pytest.mark.asyncio
class TestInMemoryNoteRegistry:
    """Tests for InMemoryNoteRegistry."""

    async def test_note_ids_are_per_profile(self, reg):
        a = await reg.post_note(7, "ipfs://a")
        b = await reg.post_note(7, "ipfs://b")
        c = await reg.post_note(9, "ipfs://c")

        assert (a.note_id, b.note_id, c.note_id) == (1, 2, 1)
        assert len({a.transaction_hash, b.transaction_hash, c.transaction_hash}) == 3

    async def test_post_note_for_any_uri(self, reg):
        receipt = await reg.post_note_for_any_uri(7, "ipfs://a", "https://example.com")

        assert reg.notes[(7, receipt.note_id)].to_uri == "https://example.com"
        assert reg.notes[(7, receipt.note_id)].owner == ZERO_ADDRESS

    async def test_get_note_hydrates_payload(self, reg, store):
        uri = await store.put_json({"content": "hi"}, "x")
        await reg.post_note(7, uri)

        event = await reg.get_note(7, "1")

        assert event.content == {"content": "hi"}
        assert reg.notes[(7, 1)].metadata is None

    async def test_get_note_unknown_or_malformed(self, reg):
        assert await reg.get_note(7, 1) is None
        assert await reg.get_note(7, "abc") is None

    async def test_delete_is_soft(self, reg):
        await reg.post_note(7, "ipfs://a")

        receipt = await reg.delete_note(7, 1)

        assert reg.notes[(7, 1)].deleted is True
        assert reg.notes[(7, 1)].updated_transaction_hash == receipt.transaction_hash
        assert await reg.get_note(7, 1) is None
        assert (await reg.get_notes(NotesQuery(profile_id=7))).count == 0
        assert (await reg.get_notes(NotesQuery(profile_id=7, include_deleted=True))).count == 1

    async def test_delete_missing_raises(self, reg):
        with pytest.raises(LedgerError):
            await reg.delete_note(7, 1)

    async def test_set_note_uri(self, reg):
        created = await reg.post_note(7, "ipfs://a")

        updated = await reg.set_note_uri(7, "1", "ipfs://b")

        note = reg.notes[(7, 1)]
        assert note.uri == "ipfs://b"
        assert note.transaction_hash == created.transaction_hash
        assert note.updated_transaction_hash == updated.transaction_hash

    async def test_set_note_uri_on_deleted_raises(self, reg):
        await reg.post_note(7, "ipfs://a")
        await reg.delete_note(7, 1)

        with pytest.raises(LedgerError):
            await reg.set_note_uri(7, 1, "ipfs://b")

    async def test_pagination_newest_first(self, reg):
        for n in range(5):
            await reg.post_note(7, f"ipfs://{n}")

        first = await reg.get_notes(NotesQuery(profile_id=7, limit=2))
        second = await reg.get_notes(NotesQuery(profile_id=7, limit=2, cursor=first.cursor))
        last = await reg.get_notes(NotesQuery(profile_id=7, limit=2, cursor=second.cursor))

        assert [e.note_id for e in first.list] == [5, 4]
        assert [e.note_id for e in second.list] == [3, 2]
        assert [e.note_id for e in last.list] == [1]
        assert last.cursor is None
        assert first.count == 5

    async def test_filter_by_to_uri(self, reg):
        await reg.post_note_for_any_uri(7, "ipfs://a", "https://x.test")
        await reg.post_note(7, "ipfs://b")

        page = await reg.get_notes(NotesQuery(to_uri="https://x.test"))

        assert page.count == 1
        assert page.list[0].to_uri == "https://x.test"

    async def test_connect(self, reg):
        await reg.connect()

        assert reg.connected is True
