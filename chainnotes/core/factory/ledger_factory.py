"""
Factory for creating ledger clients.
"""

from chainnotes.config import LedgerConfig
from chainnotes.core.ledger.base import LedgerClient
from chainnotes.core.registry.memory import InMemoryNoteRegistry
from chainnotes.utils.exceptions import ConfigurationError


class LedgerFactory:
    """Factory for creating ledger clients from configuration."""

    @staticmethod
    def create(config: LedgerConfig, registry: InMemoryNoteRegistry | None = None) -> LedgerClient:
        """
        Create ledger client from configuration.

        Chain-backed clients hold signing keys and are passed to the adapter
        directly instead of being built here.

        Raises:
            ConfigurationError: If provider is not supported
        """
        if config.provider == "memory":
            return registry or InMemoryNoteRegistry()
        else:
            raise ConfigurationError(f"Unsupported ledger provider: {config.provider}")
