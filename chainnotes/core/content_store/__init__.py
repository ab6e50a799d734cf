"""
Content store abstraction for note payloads.

Supported stores:
- web3.storage (HTTP upload API)
- In-memory (local runs and tests)
"""

from chainnotes.core.content_store.base import ContentStore
from chainnotes.core.content_store.memory import InMemoryContentStore
from chainnotes.core.content_store.web3storage import Web3StorageContentStore

__all__ = [
    "ContentStore",
    "InMemoryContentStore",
    "Web3StorageContentStore",
]
