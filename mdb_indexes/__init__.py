"""
MDB_INDEXES - MongoDB index operations

Async index management for MongoDB collections with driver errors
translated into a data-access exception hierarchy.
"""

# Database layer
from .database import (
    MongoDatabaseFactory,
    MongoExceptionTranslator,
    PersistenceExceptionTranslator,
    SimpleMongoDatabaseFactory,
)
# Exceptions
from .exceptions import (
    DataAccessError,
    NonTransientDataAccessError,
    TransientDataAccessError,
)
# Index management
from .indexes import (
    CompoundIndexDefinition,
    DefaultIndexOperations,
    Direction,
    GeospatialIndex,
    Index,
    IndexInfo,
    IndexOperations,
    TextIndexDefinition,
)

__version__ = "0.1.0"

__all__ = [
    # Indexes
    "IndexOperations",
    "DefaultIndexOperations",
    "Index",
    "GeospatialIndex",
    "TextIndexDefinition",
    "CompoundIndexDefinition",
    "Direction",
    "IndexInfo",
    # Database
    "MongoDatabaseFactory",
    "SimpleMongoDatabaseFactory",
    "PersistenceExceptionTranslator",
    "MongoExceptionTranslator",
    # Exceptions
    "DataAccessError",
    "TransientDataAccessError",
    "NonTransientDataAccessError",
]
