"""
Index reader abstraction for committed notes.

Supported indexers:
- Crossbell indexer (REST)
- In-memory registry (see core.registry)
"""

from chainnotes.core.indexer.base import IndexReader
from chainnotes.core.indexer.crossbell import CrossbellIndexer

__all__ = [
    "IndexReader",
    "CrossbellIndexer",
]
