"""
Generic note model.

A Note is the platform-agnostic projection of a note committed to the
registry. It is rebuilt from a ledger event on every read and never
persisted as-is; the stored payload is a flattened variant of it (see
services.note_mapper).
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class NoteContent(BaseModel):
    """Structured text content with an explicit MIME type."""

    content: str = Field(..., description="Text content")
    mime_type: str = Field(default="text/markdown", description="MIME type of content")


class Attachment(BaseModel):
    """File attached to a note."""

    model_config = ConfigDict(extra="allow")

    address: str | None = Field(default=None, description="Content-store locator or URL")
    mime_type: str | None = Field(default=None, description="MIME type, inferred when absent")


class NoteMetadata(BaseModel):
    """Ledger provenance of a note."""

    network: str = Field(..., description="Ledger network name")
    proof: str = Field(..., description="Composite id pointing back to the ledger event")
    block_number: int | None = Field(default=None, description="Block of the creation event")
    owner: str | None = Field(default=None, description="Owner address")
    transactions: list[str] = Field(
        default_factory=list,
        description="Creation transaction hash, then the update hash if different",
    )


class Note(BaseModel):
    """
    Normalized note exchanged with callers.

    Unknown fields from the stored payload (title, tags, ...) are carried
    through unchanged.
    """

    model_config = ConfigDict(extra="allow")

    id: str = Field(..., description="Composite id {profile_id}-{note_id}")

    date_created: datetime | None = Field(default=None)
    date_updated: datetime | None = Field(default=None)
    date_published: datetime | None = Field(default=None)

    authors: list[str] = Field(default_factory=list, description="Identity strings")

    title: str | None = Field(default=None)
    summary: NoteContent | None = Field(default=None)
    body: NoteContent | None = Field(default=None)
    attachments: list[Attachment] | None = Field(default=None)
    tags: list[str] | None = Field(default=None)

    related_urls: list[str] = Field(default_factory=list)

    source: str = Field(..., description="Originating registry")
    metadata: NoteMetadata


class NoteInput(BaseModel):
    """
    Caller input for writes.

    Carries structured body/summary; flattening into the legacy storage
    shape happens in the write path.
    """

    model_config = ConfigDict(extra="allow")

    id: str | None = Field(default=None, description="Composite id (update/remove)")
    title: str | None = Field(default=None)
    summary: NoteContent | None = Field(default=None)
    body: NoteContent | None = Field(default=None)
    attachments: list[Attachment] | None = Field(default=None)
    tags: list[str] | None = Field(default=None)
    related_urls: list[str] | None = Field(
        default=None, description="At most one external target URL"
    )

    def to_payload(self) -> dict[str, Any]:
        """Dump the fields the caller actually provided."""
        return self.model_dump(mode="json", exclude_none=True)
