"""
Database factories.

A database factory is the connection provider handed to index operations:
it resolves the database to work against and supplies the exception
translation policy for failures raised while doing so.
"""

import logging
from abc import ABC, abstractmethod

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo.errors import ConfigurationError as PyMongoConfigurationError

from ..config import IndexOpsConfig
from ..exceptions import ConfigurationError, InitializationError
from .connection import get_shared_mongo_client
from .translation import MongoExceptionTranslator, PersistenceExceptionTranslator

logger = logging.getLogger(__name__)


class MongoDatabaseFactory(ABC):
    """Provides databases and the policy for translating their failures."""

    @abstractmethod
    def get_database(self, name: str | None = None) -> AsyncIOMotorDatabase:
        """Return the named database, or the factory's default database."""

    @property
    @abstractmethod
    def exception_translator(self) -> PersistenceExceptionTranslator:
        """Translator applied to failures raised against this factory's databases."""


class SimpleMongoDatabaseFactory(MongoDatabaseFactory):
    """
    Database factory backed by a single Motor client.

    Example:
        client = AsyncIOMotorClient("mongodb://localhost:27017")
        factory = SimpleMongoDatabaseFactory(client, "my_db")
        index_ops = DefaultIndexOperations(factory, "users")
    """

    def __init__(
        self,
        client: AsyncIOMotorClient,
        db_name: str,
        exception_translator: PersistenceExceptionTranslator | None = None,
    ) -> None:
        """
        Args:
            client: Motor client to resolve databases from
            db_name: Name of the default database
            exception_translator: Translation policy (defaults to MongoExceptionTranslator)

        Raises:
            ConfigurationError: If client is None or db_name is empty
        """
        if client is None:
            raise ConfigurationError("MongoDB client must not be None", config_key="client")
        if not db_name:
            raise ConfigurationError(
                "Database name must not be empty", config_key="db_name", config_value=db_name
            )

        self._client = client
        self._db_name = db_name
        self._exception_translator = exception_translator or MongoExceptionTranslator()

    @classmethod
    def from_config(cls, config: IndexOpsConfig) -> "SimpleMongoDatabaseFactory":
        """
        Build a factory on the shared client described by ``config``.

        Raises:
            ConfigurationError: If the configuration does not validate
            InitializationError: If the driver rejects the connection settings
        """
        config.validate()
        try:
            client = get_shared_mongo_client(
                config.mongo_uri,
                max_pool_size=config.max_pool_size,
                min_pool_size=config.min_pool_size,
                server_selection_timeout_ms=config.server_selection_timeout_ms,
            )
        except (PyMongoConfigurationError, ValueError, TypeError) as e:
            raise InitializationError(
                f"Failed to create MongoDB client: {e}",
                mongo_uri=config.mongo_uri,
                db_name=config.db_name,
                context={"error_type": type(e).__name__},
            ) from e
        logger.info(f"Database factory created for '{config.db_name}'")
        return cls(client, config.db_name)

    @property
    def client(self) -> AsyncIOMotorClient:
        return self._client

    @property
    def db_name(self) -> str:
        return self._db_name

    def get_database(self, name: str | None = None) -> AsyncIOMotorDatabase:
        return self._client[name or self._db_name]

    @property
    def exception_translator(self) -> PersistenceExceptionTranslator:
        return self._exception_translator
