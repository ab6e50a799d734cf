"""
Abstract base class for identity resolvers.
Maps a human-readable identity on a platform to a numeric profile handle.
"""

from abc import ABC, abstractmethod


class IdentityResolver(ABC):
    """
    Abstract base for identity resolution.

    Resolution failure is not an error: implementations return None when the
    identity has no profile on the registry.
    """

    @abstractmethod
    async def resolve(self, identity: str, platform: str) -> int | None:
        """
        Resolve an identity to a profile handle.

        Args:
            identity: Identity string (address, handle, ...)
            platform: Platform the identity belongs to (e.g. "Ethereum")

        Returns:
            Profile handle, or None if the identity has no profile
        """
        pass

    async def close(self):
        """Close any open connections."""
        return None
