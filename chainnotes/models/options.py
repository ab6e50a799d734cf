"""
Caller options for reads and writes.
"""

from enum import Enum

from pydantic import BaseModel, Field

from chainnotes.utils.exceptions import UnsupportedActionError


class NoteAction(str, Enum):
    """Write actions supported by the note registry."""

    ADD = "add"
    UPDATE = "update"
    REMOVE = "remove"

    @classmethod
    def parse(cls, value: "NoteAction | str | None") -> "NoteAction":
        """
        Parse an action tag, defaulting to ADD.

        Raises:
            UnsupportedActionError: If the tag is not a known action
        """
        if value is None:
            return cls.ADD
        try:
            return cls(value)
        except ValueError as e:
            raise UnsupportedActionError(
                f"Unsupported action: {value}", context={"action": value}
            ) from e


class NotesFilter(BaseModel):
    """Read filters."""

    id: str | None = Field(default=None, description="Composite id for single-note lookup")
    url: str | None = Field(default=None, description="Exact external target URL")


class NotesOptions(BaseModel):
    """Options for reading notes."""

    identity: str | None = Field(default=None, description="Identity owning the notes")
    platform: str | None = Field(default=None, description="Identity platform")
    filter: NotesFilter | None = Field(default=None)
    cursor: str | None = Field(default=None, description="Opaque pagination token")
    limit: int | None = Field(default=None, ge=1, description="Page size")


class NoteSetOptions(BaseModel):
    """Options for writing notes."""

    identity: str | None = Field(default=None, description="Identity performing the write")
    platform: str | None = Field(default=None, description="Identity platform")
    # Unknown tags are kept as strings and rejected by the dispatcher
    action: NoteAction | str | None = Field(default=None, description="add, update or remove")
