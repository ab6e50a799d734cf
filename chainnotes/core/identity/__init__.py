"""
Identity resolution contract.

Supported resolvers:
- Static (configured mapping)
"""

from chainnotes.core.identity.base import IdentityResolver
from chainnotes.core.identity.static import StaticIdentityResolver

__all__ = [
    "IdentityResolver",
    "StaticIdentityResolver",
]
