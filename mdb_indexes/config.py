"""
Configuration management for MDB_INDEXES.

Two equivalent front ends are provided: ``IndexOpsConfig`` reads the
environment directly and is validated on demand, ``IndexOpsSettings`` uses
pydantic-settings for field-level validation and ``.env`` support. Both are
optional; a database factory can be built from a Motor client directly.
"""

import os

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import (
    DEFAULT_MAX_POOL_SIZE,
    DEFAULT_MIN_POOL_SIZE,
    DEFAULT_SERVER_SELECTION_TIMEOUT_MS,
    MIN_SERVER_SELECTION_TIMEOUT_MS,
)
from .exceptions import ConfigurationError


class IndexOpsConfig:
    """
    Connection configuration for index operations.

    Example:
        # Using environment variables
        config = IndexOpsConfig()
        config.validate()
        factory = SimpleMongoDatabaseFactory.from_config(config)

        # Or using direct parameters
        config = IndexOpsConfig(mongo_uri="mongodb://localhost:27017", db_name="my_db")
    """

    def __init__(
        self,
        mongo_uri: str | None = None,
        db_name: str | None = None,
        max_pool_size: int | None = None,
        min_pool_size: int | None = None,
        server_selection_timeout_ms: int | None = None,
    ):
        """
        Initialize configuration.

        Args:
            mongo_uri: MongoDB connection URI (defaults to MONGO_URI env var)
            db_name: Database name (defaults to DB_NAME env var)
            max_pool_size: Maximum connection pool size (defaults to MONGO_MAX_POOL_SIZE)
            min_pool_size: Minimum connection pool size (defaults to MONGO_MIN_POOL_SIZE)
            server_selection_timeout_ms: Server selection timeout in ms
                (defaults to MONGO_SERVER_SELECTION_TIMEOUT_MS)
        """
        self.mongo_uri = mongo_uri or os.getenv("MONGO_URI", "")
        self.db_name = db_name or os.getenv("DB_NAME", "")
        self.max_pool_size = max_pool_size or int(
            os.getenv("MONGO_MAX_POOL_SIZE", str(DEFAULT_MAX_POOL_SIZE))
        )
        self.min_pool_size = min_pool_size or int(
            os.getenv("MONGO_MIN_POOL_SIZE", str(DEFAULT_MIN_POOL_SIZE))
        )
        self.server_selection_timeout_ms = server_selection_timeout_ms or int(
            os.getenv(
                "MONGO_SERVER_SELECTION_TIMEOUT_MS", str(DEFAULT_SERVER_SELECTION_TIMEOUT_MS)
            )
        )

    def validate(self) -> None:
        """
        Validate configuration values.

        Raises:
            ConfigurationError: If required configuration is missing or invalid
        """
        if not self.mongo_uri:
            raise ConfigurationError(
                "mongo_uri is required (set MONGO_URI environment variable or pass directly)",
                config_key="mongo_uri",
            )

        if not self.db_name:
            raise ConfigurationError(
                "db_name is required (set DB_NAME environment variable or pass directly)",
                config_key="db_name",
            )

        if self.max_pool_size < 1:
            raise ConfigurationError(
                f"max_pool_size must be >= 1, got {self.max_pool_size}",
                config_key="max_pool_size",
                config_value=self.max_pool_size,
            )

        if self.min_pool_size < 1:
            raise ConfigurationError(
                f"min_pool_size must be >= 1, got {self.min_pool_size}",
                config_key="min_pool_size",
                config_value=self.min_pool_size,
            )

        if self.min_pool_size > self.max_pool_size:
            raise ConfigurationError(
                f"min_pool_size ({self.min_pool_size}) cannot be greater than "
                f"max_pool_size ({self.max_pool_size})",
                config_key="min_pool_size",
                config_value=self.min_pool_size,
            )

        if self.server_selection_timeout_ms < MIN_SERVER_SELECTION_TIMEOUT_MS:
            raise ConfigurationError(
                f"server_selection_timeout_ms must be >= {MIN_SERVER_SELECTION_TIMEOUT_MS}, "
                f"got {self.server_selection_timeout_ms}",
                config_key="server_selection_timeout_ms",
                config_value=self.server_selection_timeout_ms,
            )


class IndexOpsSettings(BaseSettings):
    """
    Pydantic-based configuration with automatic validation.

    Usage:
        settings = IndexOpsSettings()
        factory = SimpleMongoDatabaseFactory.from_config(settings.to_config())
    """

    model_config = SettingsConfigDict(
        env_file=".env", case_sensitive=False, extra="ignore"
    )

    mongo_uri: str = Field(..., description="MongoDB connection URI")
    db_name: str = Field(..., min_length=1, description="Database name")
    max_pool_size: int = Field(
        DEFAULT_MAX_POOL_SIZE,
        ge=1,
        validation_alias=AliasChoices("max_pool_size", "MONGO_MAX_POOL_SIZE"),
        description="Maximum connection pool size",
    )
    min_pool_size: int = Field(
        DEFAULT_MIN_POOL_SIZE,
        ge=1,
        validation_alias=AliasChoices("min_pool_size", "MONGO_MIN_POOL_SIZE"),
        description="Minimum connection pool size",
    )
    server_selection_timeout_ms: int = Field(
        DEFAULT_SERVER_SELECTION_TIMEOUT_MS,
        ge=MIN_SERVER_SELECTION_TIMEOUT_MS,
        validation_alias=AliasChoices(
            "server_selection_timeout_ms", "MONGO_SERVER_SELECTION_TIMEOUT_MS"
        ),
        description="Server selection timeout in milliseconds",
    )

    def to_config(self) -> IndexOpsConfig:
        """Convert to an ``IndexOpsConfig`` (explicit values, no env lookup)."""
        return IndexOpsConfig(
            mongo_uri=self.mongo_uri,
            db_name=self.db_name,
            max_pool_size=self.max_pool_size,
            min_pool_size=self.min_pool_size,
            server_selection_timeout_ms=self.server_selection_timeout_ms,
        )
