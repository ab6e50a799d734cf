"""
Records exchanged with the ledger and the index reader.

Field aliases follow the indexer's camelCase JSON so responses validate
directly.
"""

import builtins
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class NoteEventMetadata(BaseModel):
    """Indexer-hydrated metadata of a note."""

    model_config = ConfigDict(extra="ignore")

    content: dict[str, Any] | None = Field(default=None, description="Stored note payload")


class NoteEvent(BaseModel):
    """Raw note record as committed on the ledger."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    note_id: int = Field(..., alias="noteId")
    profile_id: int | None = Field(default=None, alias="characterId")

    created_at: datetime | None = Field(default=None, alias="createdAt")
    updated_at: datetime | None = Field(default=None, alias="updatedAt")
    block_number: int | None = Field(default=None, alias="blockNumber")
    owner: str | None = Field(default=None)

    transaction_hash: str = Field(..., alias="transactionHash")
    updated_transaction_hash: str | None = Field(default=None, alias="updatedTransactionHash")

    to_uri: str | None = Field(default=None, alias="toUri", description="External target URL")
    uri: str | None = Field(default=None, description="Content-store locator of the payload")
    metadata: NoteEventMetadata | None = Field(default=None)

    deleted: bool = Field(default=False)

    @property
    def content(self) -> dict[str, Any]:
        """Stored payload, empty when the indexer could not hydrate it."""
        if self.metadata and self.metadata.content:
            return self.metadata.content
        return {}


class NotesQuery(BaseModel):
    """Paginated note query."""

    cursor: str | None = None
    limit: int | None = None
    include_deleted: bool = False
    profile_id: int | None = None
    to_uri: str | None = None


class NotesPage(BaseModel):
    """One page of raw note events."""

    count: int = 0
    cursor: str | None = None
    list: builtins.list[NoteEvent] = Field(default_factory=builtins.list)


class TransactionReceipt(BaseModel):
    """Receipt of a submitted ledger transaction."""

    transaction_hash: str
    note_id: int | None = Field(default=None, description="Assigned note id for creations")
    block_number: int | None = None
