"""
Ledger client contract for note registry transactions.

The in-tree implementation is the in-memory registry (core.registry);
chain-backed clients are injected by the caller.
"""

from chainnotes.core.ledger.base import LedgerClient

__all__ = [
    "LedgerClient",
]
