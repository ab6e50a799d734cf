"""
Index reader backed by the Crossbell indexer REST API.
"""

from typing import Any

import httpx
from pydantic import ValidationError as PydanticValidationError

from chainnotes.core.indexer.base import IndexReader
from chainnotes.models.events import NoteEvent, NotesPage, NotesQuery
from chainnotes.utils.exceptions import IndexerError
from chainnotes.utils.logger import get_logger

logger = get_logger(__name__)


class CrossbellIndexer(IndexReader):
    """
    Read committed notes from the Crossbell indexer.

    Endpoints:
    - GET /characters/{characterId}/notes/{noteId}
    - GET /notes?characterId=&toUri=&cursor=&limit=&includeDeleted=
    """

    def __init__(
        self,
        base_url: str = "https://indexer.crossbell.io/v1",
        timeout: float = 30.0,
        client: httpx.AsyncClient | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.client = client or httpx.AsyncClient(timeout=timeout)

    @staticmethod
    def _decode(response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError as e:
            logger.error(f"Indexer returned invalid JSON from {response.request.url}")
            raise IndexerError(
                f"Indexer returned invalid JSON: {e}", context={"body": response.text[:200]}
            ) from e

    async def get_note(self, profile_id: int | str, note_id: int | str) -> NoteEvent | None:
        url = f"{self.base_url}/characters/{profile_id}/notes/{note_id}"
        try:
            response = await self.client.get(url)
            if response.status_code == 404:
                return None
            response.raise_for_status()
        except httpx.HTTPError as e:
            logger.error(
                f"Indexer note lookup failed: {e}",
                extra={"profile_id": str(profile_id), "note_id": str(note_id)},
            )
            raise IndexerError(f"Indexer note lookup failed: {e}") from e

        # Empty body means the note does not exist
        if not response.content.strip():
            return None
        data = self._decode(response)
        if not data:
            return None

        try:
            event = NoteEvent.model_validate(data)
        except PydanticValidationError as e:
            raise IndexerError(f"Unexpected note record from indexer: {e}") from e

        if event.deleted:
            return None
        return event

    async def get_notes(self, query: NotesQuery) -> NotesPage:
        params: dict[str, str | int] = {
            "includeDeleted": str(query.include_deleted).lower(),
        }
        if query.cursor:
            params["cursor"] = query.cursor
        if query.limit is not None:
            params["limit"] = query.limit
        if query.profile_id is not None:
            params["characterId"] = query.profile_id
        if query.to_uri:
            params["toUri"] = query.to_uri

        try:
            response = await self.client.get(f"{self.base_url}/notes", params=params)
            response.raise_for_status()
        except httpx.HTTPError as e:
            logger.error(f"Indexer note query failed: {e}", extra={"params": params})
            raise IndexerError(f"Indexer note query failed: {e}") from e

        data = self._decode(response)
        if not isinstance(data, dict):
            raise IndexerError(
                "Unexpected notes page from indexer", context={"body": response.text[:200]}
            )

        try:
            return NotesPage(
                count=data.get("count", 0),
                cursor=data.get("cursor") or None,
                list=[NoteEvent.model_validate(item) for item in data.get("list", [])],
            )
        except PydanticValidationError as e:
            raise IndexerError(f"Unexpected notes page from indexer: {e}") from e

    async def close(self):
        """Close HTTP client."""
        await self.client.aclose()
