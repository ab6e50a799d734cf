"""
Factory for creating identity resolvers.
"""

from chainnotes.config import IdentityConfig
from chainnotes.core.identity.base import IdentityResolver
from chainnotes.core.identity.static import StaticIdentityResolver
from chainnotes.utils.exceptions import ConfigurationError


class IdentityResolverFactory:
    """Factory for creating identity resolvers from configuration."""

    @staticmethod
    def create(config: IdentityConfig) -> IdentityResolver:
        """
        Create identity resolver from configuration.

        Raises:
            ConfigurationError: If provider is not supported
        """
        if config.provider == "static":
            return StaticIdentityResolver(profiles=config.profiles)
        else:
            raise ConfigurationError(f"Unsupported identity provider: {config.provider}")
