"""
Database access layer.

Provides the database factory consumed by index operations, the shared
Motor client, and driver exception translation.
"""

from .connection import close_shared_client, get_shared_mongo_client, verify_shared_client
from .factory import MongoDatabaseFactory, SimpleMongoDatabaseFactory
from .translation import (
    MongoExceptionTranslator,
    PersistenceExceptionTranslator,
    potentially_convert_runtime_exception,
)

__all__ = [
    # Factories
    "MongoDatabaseFactory",
    "SimpleMongoDatabaseFactory",
    # Exception translation
    "PersistenceExceptionTranslator",
    "MongoExceptionTranslator",
    "potentially_convert_runtime_exception",
    # Shared client
    "get_shared_mongo_client",
    "verify_shared_client",
    "close_shared_client",
]
