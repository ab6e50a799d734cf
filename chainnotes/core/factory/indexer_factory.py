"""
Factory for creating index readers.
"""

from chainnotes.config import IndexerConfig
from chainnotes.core.indexer.base import IndexReader
from chainnotes.core.indexer.crossbell import CrossbellIndexer
from chainnotes.core.registry.memory import InMemoryNoteRegistry
from chainnotes.utils.exceptions import ConfigurationError


class IndexerFactory:
    """Factory for creating index readers from configuration."""

    @staticmethod
    def create(
        config: IndexerConfig, registry: InMemoryNoteRegistry | None = None
    ) -> IndexReader:
        """
        Create index reader from configuration.

        Args:
            config: Indexer configuration
            registry: Shared in-memory registry for the "memory" provider

        Returns:
            Index reader instance

        Raises:
            ConfigurationError: If provider is not supported
        """
        if config.provider == "crossbell":
            return CrossbellIndexer(base_url=config.base_url, timeout=config.timeout)
        elif config.provider == "memory":
            return registry or InMemoryNoteRegistry()
        else:
            raise ConfigurationError(f"Unsupported indexer provider: {config.provider}")
