"""
Index operations on a single collection.

``DefaultIndexOperations`` resolves the collection from a database factory
on every call, runs one driver command against it, and raises driver
failures only in the form produced by the factory's exception translator.

Example:
    factory = SimpleMongoDatabaseFactory(client, "shop")
    index_ops = DefaultIndexOperations(factory, "orders")

    await index_ops.ensure_index(Index("created_at", Direction.DESC).expire(3600))
    for info in await index_ops.get_index_info():
        print(info.name, [f.key for f in info.index_fields])
"""

import inspect
import logging
import time
import warnings
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any

from motor.motor_asyncio import AsyncIOMotorCollection

from ..constants import DROP_ALL_INDEXES
from ..database.factory import MongoDatabaseFactory
from ..database.translation import potentially_convert_runtime_exception
from ..exceptions import MdbIndexesError
from ..observability import get_logger as get_contextual_logger
from ..observability import record_operation
from .converters import definition_to_index_options, document_to_index_info
from .definitions import IndexDefinition
from .info import IndexInfo

logger = logging.getLogger(__name__)
contextual_logger = get_contextual_logger(__name__)

CollectionCallback = Callable[[AsyncIOMotorCollection], Any]


class IndexOperations(ABC):
    """Index management for one collection."""

    @abstractmethod
    async def ensure_index(self, definition: IndexDefinition) -> str:
        """Create the index described by ``definition``; returns the index name."""

    async def create_index(self, definition: IndexDefinition) -> str:
        """Alias of ``ensure_index``."""
        return await self.ensure_index(definition)

    @abstractmethod
    async def drop_index(self, name: str) -> None:
        """Drop the index called ``name``."""

    @abstractmethod
    async def drop_all_indexes(self) -> None:
        """Drop every index except the one on ``_id``."""

    @abstractmethod
    async def get_index_info(self) -> list[IndexInfo]:
        """Metadata of every index on the collection, in server order."""


class DefaultIndexOperations(IndexOperations):
    """
    Index operations backed by a ``MongoDatabaseFactory``.

    Instances hold no per-call state and can be shared between tasks. The
    collection handle is looked up again for every operation.
    """

    def __init__(self, database_factory: MongoDatabaseFactory, collection_name: str) -> None:
        """
        Args:
            database_factory: Provider of the database and exception translator
            collection_name: Collection whose indexes are managed

        Raises:
            ValueError: If either argument is None
        """
        if database_factory is None:
            raise ValueError("Database factory must not be None")
        if collection_name is None:
            raise ValueError("Collection name must not be None")

        self._database_factory = database_factory
        self._collection_name = collection_name

    @property
    def collection_name(self) -> str:
        return self._collection_name

    async def ensure_index(self, definition: IndexDefinition) -> str:
        if definition is None:
            raise ValueError("Index definition must not be None")

        async def create(collection: AsyncIOMotorCollection) -> str:
            keys = list(definition.index_keys.items())
            # An empty options document still counts as present.
            if definition.index_options is not None:
                options = definition_to_index_options(definition)
                return await collection.create_index(keys, **options)
            return await collection.create_index(keys)

        name = await self._execute(create, "ensure_index")
        logger.info(f"Ensured index '{name}' on '{self._collection_name}'")
        return name

    async def drop_index(self, name: str) -> None:
        async def drop(collection: AsyncIOMotorCollection) -> None:
            await collection.drop_index(name)

        await self._execute(drop, "drop_index")
        logger.info(f"Dropped index '{name}' on '{self._collection_name}'")

    async def drop_all_indexes(self) -> None:
        await self.drop_index(DROP_ALL_INDEXES)

    async def reset_index_cache(self) -> None:
        """Deprecated. Has no effect."""
        warnings.warn(
            "reset_index_cache() has no effect and will be removed",
            DeprecationWarning,
            stacklevel=2,
        )
        await self._execute(lambda collection: None, "reset_index_cache")

    async def get_index_info(self) -> list[IndexInfo]:
        async def list_info(collection: AsyncIOMotorCollection) -> list[IndexInfo]:
            cursor = collection.list_indexes()
            try:
                return [document_to_index_info(document) async for document in cursor]
            finally:
                await cursor.close()

        return await self._execute(list_info, "get_index_info")

    async def execute(self, callback: CollectionCallback) -> Any:
        """
        Run ``callback`` against the collection and return its result.

        ``callback`` receives the Motor collection and may return a value or
        an awaitable. Exceptions it raises are passed through the factory's
        exception translator; unrecognised ones propagate unchanged.
        """
        return await self._execute(callback, "execute")

    async def _execute(self, callback: CollectionCallback, operation: str) -> Any:
        if callback is None:
            raise ValueError("Callback must not be None")

        start_time = time.time()
        success = False
        contextual_logger.debug(
            f"Running {operation}",
            extra={"collection_name": self._collection_name, "operation": operation},
        )

        try:
            collection = self._database_factory.get_database().get_collection(
                self._collection_name
            )
            result = callback(collection)
            if inspect.isawaitable(result):
                result = await result
            success = True
            return result
        # Translation policy decides; anything it does not recognise is re-raised as is.
        except Exception as e:
            translated = potentially_convert_runtime_exception(
                e, self._database_factory.exception_translator
            )
            if translated is e:
                raise
            if isinstance(translated, MdbIndexesError):
                translated.context.setdefault("collection_name", self._collection_name)
                translated.context.setdefault("operation", operation)
            contextual_logger.warning(
                f"{operation} failed on '{self._collection_name}': {type(translated).__name__}",
                extra={
                    "collection_name": self._collection_name,
                    "operation": operation,
                    "error_type": type(e).__name__,
                },
            )
            raise translated from e
        finally:
            duration_ms = (time.time() - start_time) * 1000
            record_operation(
                f"index_ops.{operation}",
                duration_ms,
                success,
                collection_name=self._collection_name,
            )
