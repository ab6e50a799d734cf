"""
Identity resolver backed by a fixed mapping.
"""

from chainnotes.core.identity.base import IdentityResolver
from chainnotes.utils.logger import get_logger

logger = get_logger(__name__)


class StaticIdentityResolver(IdentityResolver):
    """
    Resolve identities from a "{platform}:{identity}" -> handle mapping.

    Matching is case-insensitive so checksummed and lowercased addresses
    resolve to the same profile.
    """

    def __init__(self, profiles: dict[str, int] | None = None):
        self.profiles = {key.lower(): int(value) for key, value in (profiles or {}).items()}

    @staticmethod
    def key(identity: str, platform: str) -> str:
        return f"{platform}:{identity}".lower()

    def register(self, identity: str, platform: str, profile_id: int) -> None:
        self.profiles[self.key(identity, platform)] = int(profile_id)

    async def resolve(self, identity: str, platform: str) -> int | None:
        profile_id = self.profiles.get(self.key(identity, platform))
        if profile_id is None:
            logger.debug(f"No profile for {platform}:{identity}")
        return profile_id
