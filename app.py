"""
chainnotes FastAPI Application

A thin REST surface over the note adapter.
Provides endpoints for reading and writing notes on the note registry.
"""

from contextlib import asynccontextmanager
from typing import Any

from fastapi import Depends, FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from chainnotes.config import Config
from chainnotes.models import NoteInput, NoteSetOptions, NotesFilter, NotesOptions
from chainnotes.models.results import NotesResult, SetResult
from chainnotes.services.note_adapter import NoteAdapter
from chainnotes.utils.exceptions import ValidationError
from chainnotes.utils.logger import get_logger, setup_logging

# Global adapter instance
adapter: NoteAdapter | None = None
logger = get_logger(__name__)


class SetNoteRequest(BaseModel):
    """Request model for writing a note."""

    options: NoteSetOptions
    input: dict[str, Any] = Field(default_factory=dict, description="Note fields")


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    adapter_initialized: bool


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup/shutdown."""
    global adapter

    config = Config.from_env()

    setup_logging(config.logging)

    logger.info("Starting chainnotes server")
    logger.info(
        f"Configuration: ContentStore={config.content_store.provider}, "
        f"Indexer={config.indexer.provider}, Ledger={config.ledger.provider}"
    )

    adapter = NoteAdapter.from_config(config)

    yield

    logger.info("Shutting down chainnotes server")
    await adapter.close()
    adapter = None
    logger.info("Cleanup complete")


app = FastAPI(
    title="chainnotes API",
    description="Read and write notes on a chain-backed note registry",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def get_adapter() -> NoteAdapter:
    if not adapter:
        raise HTTPException(status_code=503, detail="Adapter not initialized")
    return adapter


@app.get("/health", response_model=HealthResponse)
async def health_check():
    """Health check endpoint."""
    return HealthResponse(
        status="healthy" if adapter else "initializing",
        adapter_initialized=adapter is not None,
    )


@app.get("/notes", response_model=NotesResult, response_model_exclude_none=True)
async def get_notes(
    identity: str | None = None,
    platform: str | None = None,
    id: str | None = Query(default=None, description="Composite note id"),
    url: str | None = Query(default=None, description="External target URL"),
    cursor: str | None = None,
    limit: int | None = Query(default=None, ge=1, le=100),
    note_adapter: NoteAdapter = Depends(get_adapter),
):
    """
    Read notes.

    With `id` a single note is returned; otherwise one page of notes scoped
    by identity and/or target URL.
    """
    options = NotesOptions(
        identity=identity,
        platform=platform,
        filter=NotesFilter(id=id, url=url) if (id or url) else None,
        cursor=cursor,
        limit=limit,
    )
    return await note_adapter.get(options)


@app.post("/notes", response_model=SetResult, response_model_exclude_none=True)
async def set_note(request: SetNoteRequest, note_adapter: NoteAdapter = Depends(get_adapter)):
    """
    Add, update or remove a note.

    Business failures come back with code 1; malformed requests with 400.
    """
    try:
        return await note_adapter.set(request.options, NoteInput.model_validate(request.input))
    except ValidationError as e:
        logger.warning(f"Rejected note write: {e.message}")
        raise HTTPException(status_code=400, detail=e.message) from e
