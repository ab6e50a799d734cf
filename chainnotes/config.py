"""
Configuration for chainnotes.

Supports loading from:
1. Environment variables (highest priority)
2. YAML config file
3. Default values (fallback)
"""

import os
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field


class NotesConfig(BaseModel):
    """Note registry mapping configuration."""

    default_platform: str = "Ethereum"
    default_mime_type: str = "text/markdown"
    source: str = "Crossbell Note"
    network: str = "Crossbell"
    explorer_url: str = "https://scan.crossbell.io/tx/"


class IPFSConfig(BaseModel):
    """Gateway used to make content-store locators dereferenceable."""

    gateway: str = "https://ipfs.io/ipfs/"


class ContentStoreConfig(BaseModel):
    """Content store configuration."""

    provider: str = "web3storage"  # web3storage, memory
    endpoint: str = "https://api.web3.storage"
    api_token: str | None = None
    max_retries: int = 3
    retry_delay: float = 0.5
    wrap_with_directory: bool = False
    timeout: float = 60.0


class IndexerConfig(BaseModel):
    """Index reader configuration."""

    provider: str = "crossbell"  # crossbell, memory
    base_url: str = "https://indexer.crossbell.io/v1"
    timeout: float = 30.0


class LedgerConfig(BaseModel):
    """Ledger client configuration."""

    provider: str = "memory"
    rpc_url: str = "https://rpc.crossbell.io"


class IdentityConfig(BaseModel):
    """Identity resolver configuration."""

    provider: str = "static"
    # "{platform}:{identity}" -> profile handle
    profiles: dict[str, int] = Field(default_factory=dict)


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"
    log_to_file: bool = True
    log_dir: str = "logs"
    file_rotation: str = "10 MB"
    file_retention: str = "7 days"
    compression: str = "zip"
    serialize: bool = True


class Config(BaseModel):
    """Main configuration."""

    notes: NotesConfig = Field(default_factory=NotesConfig)
    ipfs: IPFSConfig = Field(default_factory=IPFSConfig)
    content_store: ContentStoreConfig = Field(default_factory=ContentStoreConfig)
    indexer: IndexerConfig = Field(default_factory=IndexerConfig)
    ledger: LedgerConfig = Field(default_factory=LedgerConfig)
    identity: IdentityConfig = Field(default_factory=IdentityConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def from_env(cls, env_file: str | Path | None = None) -> "Config":
        """
        Load configuration from environment variables.

        Priority: .env file -> system environment variables -> defaults

        Args:
            env_file: Optional path to .env file (default: .env in project root)

        Returns:
            Config instance

        Environment variables:
            CHAINNOTES_DEFAULT_PLATFORM: Platform used when a caller omits one
            CHAINNOTES_EXPLORER_URL: Transaction explorer prefix
            CHAINNOTES_IPFS_GATEWAY: Gateway prefix for ipfs:// locators
            CHAINNOTES_CONTENT_STORE_PROVIDER: Content store (web3storage, memory)
            CHAINNOTES_CONTENT_STORE_ENDPOINT: Upload API endpoint
            CHAINNOTES_CONTENT_STORE_TOKEN: Upload API token
            CHAINNOTES_CONTENT_STORE_MAX_RETRIES: Upload attempts
            CHAINNOTES_INDEXER_PROVIDER: Index reader (crossbell, memory)
            CHAINNOTES_INDEXER_URL: Indexer base URL
            CHAINNOTES_LEDGER_PROVIDER: Ledger client (memory)
            CHAINNOTES_LEDGER_RPC_URL: Ledger RPC URL
        """
        if env_file:
            load_dotenv(env_file)
        elif Path(".env").exists():
            load_dotenv()

        def get_env(key: str, default: Any = None) -> Any:
            """Get environment variable with type conversion."""
            value = os.getenv(key)
            if value is None:
                return default
            if value == "":
                return default
            # bool before int: bool is a subclass of int
            if isinstance(default, bool):
                return str(value).lower() in ("true", "1", "yes")
            if isinstance(default, int):
                return int(value)
            if isinstance(default, float):
                return float(value)
            return value

        return cls(
            notes=NotesConfig(
                default_platform=get_env("CHAINNOTES_DEFAULT_PLATFORM", "Ethereum"),
                default_mime_type=get_env("CHAINNOTES_DEFAULT_MIME_TYPE", "text/markdown"),
                explorer_url=get_env("CHAINNOTES_EXPLORER_URL", "https://scan.crossbell.io/tx/"),
            ),
            ipfs=IPFSConfig(
                gateway=get_env("CHAINNOTES_IPFS_GATEWAY", "https://ipfs.io/ipfs/"),
            ),
            content_store=ContentStoreConfig(
                provider=get_env("CHAINNOTES_CONTENT_STORE_PROVIDER", "web3storage"),
                endpoint=get_env("CHAINNOTES_CONTENT_STORE_ENDPOINT", "https://api.web3.storage"),
                api_token=get_env("CHAINNOTES_CONTENT_STORE_TOKEN"),
                max_retries=get_env("CHAINNOTES_CONTENT_STORE_MAX_RETRIES", 3),
                retry_delay=get_env("CHAINNOTES_CONTENT_STORE_RETRY_DELAY", 0.5),
                wrap_with_directory=get_env("CHAINNOTES_CONTENT_STORE_WRAP_WITH_DIRECTORY", False),
                timeout=get_env("CHAINNOTES_CONTENT_STORE_TIMEOUT", 60.0),
            ),
            indexer=IndexerConfig(
                provider=get_env("CHAINNOTES_INDEXER_PROVIDER", "crossbell"),
                base_url=get_env("CHAINNOTES_INDEXER_URL", "https://indexer.crossbell.io/v1"),
                timeout=get_env("CHAINNOTES_INDEXER_TIMEOUT", 30.0),
            ),
            ledger=LedgerConfig(
                provider=get_env("CHAINNOTES_LEDGER_PROVIDER", "memory"),
                rpc_url=get_env("CHAINNOTES_LEDGER_RPC_URL", "https://rpc.crossbell.io"),
            ),
            logging=LoggingConfig(
                level=get_env("CHAINNOTES_LOG_LEVEL", "INFO"),
                log_to_file=get_env("CHAINNOTES_LOG_TO_FILE", True),
                log_dir=get_env("CHAINNOTES_LOG_DIR", "logs"),
                file_rotation=get_env("CHAINNOTES_LOG_FILE_ROTATION", "10 MB"),
                file_retention=get_env("CHAINNOTES_LOG_FILE_RETENTION", "7 days"),
                compression=get_env("CHAINNOTES_LOG_COMPRESSION", "zip"),
                serialize=get_env("CHAINNOTES_LOG_SERIALIZE", True),
            ),
        )

    @classmethod
    def from_yaml(cls, yaml_path: str | Path) -> "Config":
        """
        Load configuration from YAML file.

        Args:
            yaml_path: Path to YAML configuration file

        Returns:
            Config instance

        Raises:
            FileNotFoundError: If YAML file doesn't exist
            yaml.YAMLError: If YAML is invalid
        """
        yaml_path = Path(yaml_path)
        if not yaml_path.exists():
            raise FileNotFoundError(f"Config file not found: {yaml_path}")

        with open(yaml_path) as f:
            data = yaml.safe_load(f) or {}

        return cls(**data)

    @classmethod
    def from_env_or_yaml(
        cls, yaml_path: str | Path | None = None, env_file: str | Path | None = None
    ) -> "Config":
        """
        Load configuration with priority: env vars > YAML > defaults.

        Args:
            yaml_path: Optional path to YAML config
            env_file: Optional path to .env file

        Returns:
            Config instance
        """
        if yaml_path and Path(yaml_path).exists():
            with open(yaml_path) as f:
                config_dict = yaml.safe_load(f) or {}
        else:
            config_dict = {}

        env_config = cls.from_env(env_file=env_file)

        final_dict = {**config_dict}

        # Only sections that differ from defaults override YAML
        default = cls()
        for section in ("notes", "ipfs", "content_store", "indexer", "ledger", "logging"):
            env_section = getattr(env_config, section)
            if env_section != getattr(default, section):
                final_dict[section] = env_section.model_dump()

        return cls(**final_dict) if final_dict else env_config


# Default config instance
default_config = Config()
