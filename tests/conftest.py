"""
Pytest configuration and shared fixtures for MDB_INDEXES tests.

This module provides:
- Mock Motor collection, database and database factory fixtures
- A fake listIndexes cursor
- Sample raw index documents
"""

from typing import Any, Dict, List
from unittest.mock import AsyncMock, MagicMock

import pytest
from motor.motor_asyncio import AsyncIOMotorCollection, AsyncIOMotorDatabase

from mdb_indexes.database.factory import MongoDatabaseFactory
from mdb_indexes.database.translation import MongoExceptionTranslator
from mdb_indexes.indexes.operations import DefaultIndexOperations
from mdb_indexes.observability.metrics import get_metrics_collector

# ============================================================================
# CURSOR DOUBLES
# ============================================================================


class FakeIndexCursor:
    """Async-iterable stand-in for a Motor command cursor."""

    def __init__(self, documents: List[Dict[str, Any]]):
        self._documents = list(documents)
        self.consumed = 0
        self.close = AsyncMock()

    def __aiter__(self):
        return self._iterate()

    async def _iterate(self):
        for document in self._documents:
            self.consumed += 1
            yield document


# ============================================================================
# MOCK MONGODB FIXTURES
# ============================================================================


@pytest.fixture
def make_index_cursor():
    """Factory for fake listIndexes cursors."""
    return FakeIndexCursor


@pytest.fixture
def mock_mongo_collection() -> MagicMock:
    """Create a mock Motor collection with index methods."""
    collection = MagicMock(spec=AsyncIOMotorCollection)
    collection.name = "test_collection"
    collection.create_index = AsyncMock(return_value="test_index")
    collection.drop_index = AsyncMock()
    collection.list_indexes = MagicMock(return_value=FakeIndexCursor([]))
    return collection


@pytest.fixture
def mock_mongo_database(mock_mongo_collection: MagicMock) -> MagicMock:
    """Create a mock Motor database that always returns the mock collection."""
    db = MagicMock(spec=AsyncIOMotorDatabase)
    db.name = "test_db"
    db.get_collection = MagicMock(return_value=mock_mongo_collection)
    return db


@pytest.fixture
def mock_database_factory(mock_mongo_database: MagicMock) -> MagicMock:
    """Create a database factory double using the real Mongo exception translator."""
    factory = MagicMock(spec=MongoDatabaseFactory)
    factory.get_database = MagicMock(return_value=mock_mongo_database)
    factory.exception_translator = MongoExceptionTranslator()
    return factory


@pytest.fixture
def index_ops(mock_database_factory: MagicMock) -> DefaultIndexOperations:
    """Index operations on 'test_collection' backed by the mock factory."""
    return DefaultIndexOperations(mock_database_factory, "test_collection")


@pytest.fixture(autouse=True)
def reset_metrics():
    """Keep the global metrics collector isolated between tests."""
    get_metrics_collector().reset()
    yield
    get_metrics_collector().reset()


# ============================================================================
# TEST DATA
# ============================================================================


@pytest.fixture
def sample_index_documents() -> List[Dict[str, Any]]:
    """Raw listIndexes output for a collection with several index kinds."""
    return [
        {"v": 2, "key": {"_id": 1}, "name": "_id_"},
        {"v": 2, "key": {"email": 1}, "name": "email_1", "unique": True},
        {
            "v": 2,
            "key": {"created_at": -1},
            "name": "created_at_-1",
            "expireAfterSeconds": 3600,
        },
        {
            "v": 2,
            "key": {"_fts": "text", "_ftsx": 1},
            "name": "content_text",
            "weights": {"body": 1, "title": 10},
            "default_language": "english",
            "language_override": "language",
            "textIndexVersion": 3,
        },
        {"v": 2, "key": {"location": "2dsphere"}, "name": "location_2dsphere"},
    ]
