"""
Factory for creating content stores.
"""

from chainnotes.config import ContentStoreConfig
from chainnotes.core.content_store.base import ContentStore
from chainnotes.core.content_store.memory import InMemoryContentStore
from chainnotes.core.content_store.web3storage import Web3StorageContentStore
from chainnotes.utils.exceptions import ConfigurationError


class ContentStoreFactory:
    """Factory for creating content stores from configuration."""

    @staticmethod
    def create(config: ContentStoreConfig) -> ContentStore:
        """
        Create content store from configuration.

        Args:
            config: Content store configuration

        Returns:
            Content store instance

        Raises:
            ConfigurationError: If provider is not supported or the token is missing
        """
        if config.provider == "web3storage":
            if not config.api_token:
                raise ConfigurationError("web3.storage API token is required")
            return Web3StorageContentStore(
                api_token=config.api_token,
                endpoint=config.endpoint,
                max_retries=config.max_retries,
                retry_delay=config.retry_delay,
                wrap_with_directory=config.wrap_with_directory,
                timeout=config.timeout,
            )
        elif config.provider == "memory":
            return InMemoryContentStore()
        else:
            raise ConfigurationError(f"Unsupported content store provider: {config.provider}")
