"""
Unit tests for the shared client and database factories.
"""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from pymongo.errors import ConnectionFailure, InvalidURI

from mdb_indexes.config import IndexOpsConfig
from mdb_indexes.database import connection
from mdb_indexes.database.connection import (
    close_shared_client,
    get_shared_mongo_client,
    verify_shared_client,
)
from mdb_indexes.database.factory import SimpleMongoDatabaseFactory
from mdb_indexes.database.translation import (
    MongoExceptionTranslator,
    PersistenceExceptionTranslator,
)
from mdb_indexes.exceptions import ConfigurationError, InitializationError

CLIENT_PATH = "mdb_indexes.database.connection.AsyncIOMotorClient"


@pytest.fixture(autouse=True)
def reset_shared_client():
    """Drop the module-level shared client around each test."""
    connection._shared_client = None
    yield
    connection._shared_client = None


@pytest.fixture
def valid_config():
    return IndexOpsConfig(
        mongo_uri="mongodb://localhost:27017",
        db_name="test_db",
        max_pool_size=20,
        min_pool_size=2,
        server_selection_timeout_ms=3000,
    )


class TestSharedClient:
    """Test the process-wide Motor client."""

    def test_client_created_once(self):
        with patch(CLIENT_PATH) as client_class:
            first = get_shared_mongo_client("mongodb://localhost:27017")
            second = get_shared_mongo_client("mongodb://localhost:27017")

        assert first is second
        client_class.assert_called_once()

    def test_pool_settings_forwarded(self):
        with patch(CLIENT_PATH) as client_class:
            get_shared_mongo_client(
                "mongodb://localhost:27017",
                max_pool_size=7,
                min_pool_size=3,
                server_selection_timeout_ms=2500,
            )

        kwargs = client_class.call_args.kwargs
        assert kwargs["maxPoolSize"] == 7
        assert kwargs["minPoolSize"] == 3
        assert kwargs["serverSelectionTimeoutMS"] == 2500
        assert kwargs["appname"] == "MDB_INDEXES"

    def test_failed_creation_leaves_no_client(self):
        with patch(CLIENT_PATH, side_effect=InvalidURI("bad uri")):
            with pytest.raises(InvalidURI):
                get_shared_mongo_client("not-a-uri")

        assert connection._shared_client is None

    def test_close_resets_client(self):
        with patch(CLIENT_PATH) as client_class:
            get_shared_mongo_client("mongodb://localhost:27017")
            close_shared_client()

        client_class.return_value.close.assert_called_once()
        assert connection._shared_client is None

    @pytest.mark.asyncio
    async def test_verify_without_client(self):
        assert await verify_shared_client() is False

    @pytest.mark.asyncio
    async def test_verify_ping(self):
        with patch(CLIENT_PATH) as client_class:
            client_class.return_value.admin.command = AsyncMock(return_value={"ok": 1})
            get_shared_mongo_client("mongodb://localhost:27017")

            assert await verify_shared_client() is True

    @pytest.mark.asyncio
    async def test_verify_ping_failure(self):
        with patch(CLIENT_PATH) as client_class:
            client_class.return_value.admin.command = AsyncMock(
                side_effect=ConnectionFailure("refused")
            )
            get_shared_mongo_client("mongodb://localhost:27017")

            assert await verify_shared_client() is False


class TestSimpleMongoDatabaseFactory:
    """Test the Motor-backed database factory."""

    def test_none_client_rejected(self):
        with pytest.raises(ConfigurationError):
            SimpleMongoDatabaseFactory(None, "test_db")

    def test_empty_db_name_rejected(self):
        with pytest.raises(ConfigurationError) as exc_info:
            SimpleMongoDatabaseFactory(MagicMock(), "")

        assert exc_info.value.config_key == "db_name"

    def test_default_translator(self):
        factory = SimpleMongoDatabaseFactory(MagicMock(), "test_db")

        assert isinstance(factory.exception_translator, MongoExceptionTranslator)

    def test_custom_translator(self):
        translator = MagicMock(spec=PersistenceExceptionTranslator)

        factory = SimpleMongoDatabaseFactory(MagicMock(), "test_db", translator)

        assert factory.exception_translator is translator

    def test_get_database_default_and_named(self):
        client = MagicMock()
        factory = SimpleMongoDatabaseFactory(client, "test_db")

        factory.get_database()
        factory.get_database("other_db")

        assert [c.args[0] for c in client.__getitem__.call_args_list] == ["test_db", "other_db"]

    def test_from_config_uses_shared_client(self, valid_config):
        with patch(CLIENT_PATH) as client_class:
            factory = SimpleMongoDatabaseFactory.from_config(valid_config)

        assert factory.client is client_class.return_value
        assert factory.db_name == "test_db"
        assert client_class.call_args.kwargs["maxPoolSize"] == 20

    def test_from_config_validates(self):
        config = IndexOpsConfig(mongo_uri="mongodb://localhost:27017", db_name="test_db")
        config.min_pool_size = 100
        config.max_pool_size = 10

        with patch(CLIENT_PATH) as client_class:
            with pytest.raises(ConfigurationError):
                SimpleMongoDatabaseFactory.from_config(config)

        client_class.assert_not_called()

    def test_from_config_driver_rejection(self, valid_config):
        with patch(CLIENT_PATH, side_effect=InvalidURI("bad uri")):
            with pytest.raises(InitializationError) as exc_info:
                SimpleMongoDatabaseFactory.from_config(valid_config)

        assert exc_info.value.db_name == "test_db"
        assert isinstance(exc_info.value.__cause__, InvalidURI)
