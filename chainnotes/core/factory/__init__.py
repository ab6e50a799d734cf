"""
Factory modules for creating chainnotes components.

Provides factories for identity resolvers, content stores, index readers
and ledger clients.
"""

from chainnotes.core.factory.content_store_factory import ContentStoreFactory
from chainnotes.core.factory.identity_factory import IdentityResolverFactory
from chainnotes.core.factory.indexer_factory import IndexerFactory
from chainnotes.core.factory.ledger_factory import LedgerFactory

__all__ = [
    "IdentityResolverFactory",
    "ContentStoreFactory",
    "IndexerFactory",
    "LedgerFactory",
]
