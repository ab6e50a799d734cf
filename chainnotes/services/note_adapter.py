"""
Note Adapter - reads and writes notes on the chain-backed note registry.

Read path:
    options -> resolve identity -> query index (single note or page)
    -> map every event to a Note

Write path:
    options + input -> validate -> resolve identity
    -> add:    upload payload, create note (optionally pointing at a URL)
    -> update: fetch note, merge payload, re-upload, set note URI
    -> remove: delete note

Not-found conditions come back as empty pages or SetResult failures.
Validation errors are raised. Upstream I/O errors propagate untouched.
"""

import asyncio
from collections.abc import Callable
from typing import Any

from chainnotes.config import Config
from chainnotes.core.content_store.base import ContentStore
from chainnotes.core.content_store.memory import InMemoryContentStore
from chainnotes.core.factory import (
    ContentStoreFactory,
    IdentityResolverFactory,
    IndexerFactory,
    LedgerFactory,
)
from chainnotes.core.identity.base import IdentityResolver
from chainnotes.core.indexer.base import IndexReader
from chainnotes.core.ledger.base import LedgerClient
from chainnotes.core.registry.memory import InMemoryNoteRegistry
from chainnotes.models.events import NoteEvent, NotesPage, NotesQuery
from chainnotes.models.note import Note, NoteInput
from chainnotes.models.options import NoteAction, NoteSetOptions, NotesOptions
from chainnotes.models.results import NotesResult, SetResult
from chainnotes.services.note_mapper import (
    MimeSniffer,
    UrlRewriter,
    event_to_note,
    merge_payload,
    prepare_for_storage,
)
from chainnotes.utils.exceptions import LedgerError
from chainnotes.utils.ipfs import replace_ipfs
from chainnotes.utils.logger import get_logger
from chainnotes.utils.mime import get_mime_type
from chainnotes.utils.note_id import NoteId

logger = get_logger(__name__)


class NoteAdapter:
    """
    Bidirectional adapter between the generic Note schema and the registry.

    The index reader and ledger client are either injected or created once
    through their factories on first use, behind a lock per handle. The
    ledger client is connected exactly once.
    """

    def __init__(
        self,
        identity_resolver: IdentityResolver,
        content_store: ContentStore,
        config: Config | None = None,
        indexer: IndexReader | None = None,
        ledger: LedgerClient | None = None,
        indexer_factory: Callable[[], IndexReader] | None = None,
        ledger_factory: Callable[[], LedgerClient] | None = None,
        rewrite_url: UrlRewriter | None = None,
        sniff_mime: MimeSniffer | None = None,
    ):
        """
        Initialize Note Adapter.

        Args:
            identity_resolver: Maps identity + platform to a profile handle
            content_store: Content-addressed store for note payloads
            config: Configuration object
            indexer: Ready index reader (skips lazy creation)
            ledger: Ready ledger client (still connected on first use)
            indexer_factory: Builds the index reader on first use
            ledger_factory: Builds the ledger client on first use
            rewrite_url: Content-store URL rewriter (defaults to the configured gateway)
            sniff_mime: MIME type inference for attachments
        """
        self.config = config or Config()
        self.identity_resolver = identity_resolver
        self.content_store = content_store

        self.indexer = indexer
        self.ledger = ledger
        self._indexer_factory = indexer_factory or (
            lambda: IndexerFactory.create(self.config.indexer)
        )
        self._ledger_factory = ledger_factory or (lambda: LedgerFactory.create(self.config.ledger))
        self._indexer_lock = asyncio.Lock()
        self._ledger_lock = asyncio.Lock()
        self._ledger_connected = False

        gateway = self.config.ipfs.gateway
        self.rewrite_url = rewrite_url or (lambda url: replace_ipfs(url, gateway))
        self.sniff_mime = sniff_mime or get_mime_type

    @classmethod
    def from_config(cls, config: Config) -> "NoteAdapter":
        """
        Build an adapter with every collaborator created from configuration.

        "memory" indexer and ledger providers share one in-process registry,
        hydrated from the content store when that is in-memory too.
        """
        content_store = ContentStoreFactory.create(config.content_store)

        registry = None
        if "memory" in (config.indexer.provider, config.ledger.provider):
            registry = InMemoryNoteRegistry(
                content_store=content_store
                if isinstance(content_store, InMemoryContentStore)
                else None
            )

        return cls(
            identity_resolver=IdentityResolverFactory.create(config.identity),
            content_store=content_store,
            config=config,
            indexer_factory=lambda: IndexerFactory.create(config.indexer, registry),
            ledger_factory=lambda: LedgerFactory.create(config.ledger, registry),
        )

    async def _get_indexer(self) -> IndexReader:
        async with self._indexer_lock:
            if self.indexer is None:
                logger.debug("Creating index reader")
                self.indexer = self._indexer_factory()
            return self.indexer

    async def _get_ledger(self) -> LedgerClient:
        async with self._ledger_lock:
            if self.ledger is None:
                logger.debug("Creating ledger client")
                self.ledger = self._ledger_factory()
            if not self._ledger_connected:
                await self.ledger.connect()
                self._ledger_connected = True
            return self.ledger

    async def _resolve_profile(self, identity: str | None, platform: str | None) -> int | None:
        if not identity:
            return None
        platform = platform or self.config.notes.default_platform
        profile_id = await self.identity_resolver.resolve(identity, platform)
        logger.debug(f"Resolved {platform}:{identity} -> {profile_id}")
        return profile_id

    # Read path

    async def get(self, options: NotesOptions | dict[str, Any] | None = None) -> NotesResult:
        """
        Read notes.

        With filter.id a single note is fetched and cursor/limit are ignored.
        Otherwise one page of non-deleted notes is returned, scoped by the
        resolved profile and filter.url when given.

        Args:
            options: Read options

        Returns:
            NotesResult; empty when the identity or the note cannot be found
        """
        if not isinstance(options, NotesOptions):
            options = NotesOptions.model_validate(options or {})

        profile_id = None
        if options.identity:
            profile_id = await self._resolve_profile(options.identity, options.platform)
            if profile_id is None:
                logger.info(f"No profile for identity {options.identity}, returning empty result")
                return NotesResult(total=0, list=[])

        indexer = await self._get_indexer()
        note_filter = options.filter

        if note_filter and note_filter.id:
            page = await self._get_single(indexer, note_filter.id, profile_id)
        else:
            query = NotesQuery(
                cursor=options.cursor,
                limit=options.limit,
                include_deleted=False,
                profile_id=profile_id,
                to_uri=note_filter.url if note_filter else None,
            )
            logger.info(
                "Querying notes",
                extra={"profile_id": profile_id, "to_uri": query.to_uri, "cursor": query.cursor},
            )
            page = await indexer.get_notes(query)

        notes = await asyncio.gather(
            *(self._map_event(event, profile_id, options.identity) for event in page.list)
        )

        return NotesResult(total=page.count, cursor=page.cursor, list=list(notes))

    async def _get_single(
        self, indexer: IndexReader, composite_id: str, profile_id: int | None
    ) -> NotesPage:
        if not NoteId.is_valid(composite_id):
            logger.info(f"Malformed note id {composite_id!r}, returning empty result")
            return NotesPage(count=0, list=[])

        note_ref = NoteId.parse(composite_id)
        owner = profile_id if profile_id is not None else note_ref.profile_id
        logger.info(f"Fetching note {owner}-{note_ref.note_id}")

        event = await indexer.get_note(owner, note_ref.note_id)
        if event is None:
            return NotesPage(count=0, list=[])
        return NotesPage(count=1, list=[event])

    async def _map_event(
        self, event: NoteEvent, profile_id: int | None, identity: str | None
    ) -> Note:
        return event_to_note(
            event,
            profile_id=profile_id,
            identity=identity,
            config=self.config.notes,
            rewrite_url=self.rewrite_url,
            sniff_mime=self.sniff_mime,
        )

    # Write path

    async def set(
        self,
        options: NoteSetOptions | dict[str, Any],
        note_input: NoteInput | dict[str, Any],
    ) -> SetResult:
        """
        Write a note.

        Args:
            options: Identity, platform and action (add by default)
            note_input: Note fields; "id" selects the note for update/remove

        Returns:
            SetResult with code 0 on success, 1 on business failure

        Raises:
            UnsupportedActionError: If the action is unknown
            ValidationError: If more than one related URL is given
        """
        if not isinstance(options, NoteSetOptions):
            options = NoteSetOptions.model_validate(options)
        if not isinstance(note_input, NoteInput):
            note_input = NoteInput.model_validate(note_input)

        # Caller misuse fails before any network call, identity lookup included
        action = NoteAction.parse(options.action)
        payload = note_input.to_payload()
        composite_id = payload.get("id")
        stored, target_uri = prepare_for_storage(payload)

        profile_id = await self._resolve_profile(options.identity, options.platform)
        if profile_id is None:
            return SetResult.failure("Profile not found")

        if action == NoteAction.ADD:
            return await self._add(options.identity, profile_id, stored, target_uri)
        if action == NoteAction.REMOVE:
            return await self._remove(profile_id, composite_id)
        return await self._update(profile_id, composite_id, stored)

    @staticmethod
    def _check_ownership(composite_id: str | None, profile_id: int) -> SetResult | None:
        if not composite_id:
            return SetResult.failure("Missing id")
        # Malformed ids share the ownership failure
        if not NoteId.is_valid(composite_id) or not NoteId.parse(composite_id).belongs_to(
            profile_id
        ):
            return SetResult.failure("Wrong id")
        return None

    async def _upload(self, payload: dict[str, Any], name: str) -> str:
        return await self.content_store.put_json(
            payload,
            name,
            max_retries=self.config.content_store.max_retries,
            wrap_with_directory=False,
        )

    async def _add(
        self,
        identity: str,
        profile_id: int,
        stored: dict[str, Any],
        target_uri: str | None,
    ) -> SetResult:
        ledger = await self._get_ledger()

        uri = await self._upload(stored, identity)
        logger.info(f"Uploaded note payload for profile {profile_id} to {uri}")

        if target_uri:
            receipt = await ledger.post_note_for_any_uri(profile_id, uri, target_uri)
        else:
            receipt = await ledger.post_note(profile_id, uri)

        if receipt.note_id is None:
            raise LedgerError(
                "Note creation receipt carries no note id",
                context={"transaction_hash": receipt.transaction_hash},
            )

        logger.info(
            f"Created note {profile_id}-{receipt.note_id}",
            extra={"transaction_hash": receipt.transaction_hash, "target_uri": target_uri},
        )
        return SetResult.success(data=receipt.note_id)

    async def _remove(self, profile_id: int, composite_id: str | None) -> SetResult:
        failure = self._check_ownership(composite_id, profile_id)
        if failure:
            logger.info(f"Remove rejected for profile {profile_id}: {failure.message}")
            return failure

        note_ref = NoteId.parse(composite_id)
        ledger = await self._get_ledger()
        receipt = await ledger.delete_note(profile_id, note_ref.note_id)

        logger.info(
            f"Deleted note {note_ref}", extra={"transaction_hash": receipt.transaction_hash}
        )
        return SetResult.success()

    async def _update(
        self, profile_id: int, composite_id: str | None, stored: dict[str, Any]
    ) -> SetResult:
        failure = self._check_ownership(composite_id, profile_id)
        if failure:
            logger.info(f"Update rejected for profile {profile_id}: {failure.message}")
            return failure

        note_ref = NoteId.parse(composite_id)
        indexer = await self._get_indexer()
        existing = await indexer.get_note(profile_id, note_ref.note_id)
        if existing is None:
            logger.info(f"Update rejected: note {note_ref} not found")
            return SetResult.failure("Note not found")

        merged = merge_payload(existing.content, stored)
        uri = await self._upload(merged, composite_id)

        ledger = await self._get_ledger()
        receipt = await ledger.set_note_uri(profile_id, note_ref.note_id, uri)

        logger.info(
            f"Updated note {note_ref} to {uri}",
            extra={"transaction_hash": receipt.transaction_hash},
        )
        return SetResult.success()

    async def close(self):
        """Close every client held by the adapter."""
        closed = set()
        for client in (self.indexer, self.ledger, self.content_store, self.identity_resolver):
            if client is not None and id(client) not in closed:
                closed.add(id(client))
                await client.close()
