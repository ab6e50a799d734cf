"""
Result models returned by the note adapter.
"""

import builtins
from typing import Any

from pydantic import BaseModel, Field

from chainnotes.models.note import Note


class NotesResult(BaseModel):
    """Page of normalized notes."""

    total: int = Field(default=0, ge=0, description="Server-reported count for the query")
    cursor: str | None = Field(default=None, description="Present only when more pages may exist")
    list: builtins.list[Note] = Field(default_factory=builtins.list)


class SetResult(BaseModel):
    """
    Structured outcome of a write.

    code 0 is success; any other code is a business failure described by
    message.
    """

    code: int = Field(..., description="0 on success")
    message: str
    data: Any | None = Field(default=None, description="Action-specific payload")

    @classmethod
    def success(cls, data: Any | None = None) -> "SetResult":
        return cls(code=0, message="Success", data=data)

    @classmethod
    def failure(cls, message: str) -> "SetResult":
        return cls(code=1, message=message)

    @property
    def ok(self) -> bool:
        return self.code == 0
