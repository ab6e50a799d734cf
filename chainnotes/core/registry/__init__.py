"""In-process note registry serving as both ledger client and index reader."""

from chainnotes.core.registry.memory import InMemoryNoteRegistry

__all__ = [
    "InMemoryNoteRegistry",
]
