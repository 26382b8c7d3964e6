"""
Unit tests for custom exceptions.

Tests the exception hierarchy, message formatting, and context handling.
"""

from mdb_indexes.exceptions import (
    ConfigurationError,
    DataAccessError,
    DataAccessResourceFailureError,
    DataIntegrityViolationError,
    DuplicateKeyViolationError,
    InitializationError,
    InvalidDataAccessApiUsageError,
    MdbIndexesError,
    NonTransientDataAccessError,
    TransientDataAccessError,
    UncategorizedMongoDbError,
)


class TestExceptionHierarchy:
    """Test exception class hierarchy."""

    def test_base_is_runtime_error(self):
        assert issubclass(MdbIndexesError, RuntimeError)

    def test_data_access_split(self):
        assert issubclass(TransientDataAccessError, DataAccessError)
        assert issubclass(NonTransientDataAccessError, DataAccessError)
        assert issubclass(DataAccessResourceFailureError, TransientDataAccessError)
        assert issubclass(DuplicateKeyViolationError, DataIntegrityViolationError)
        assert issubclass(DataIntegrityViolationError, NonTransientDataAccessError)
        assert issubclass(InvalidDataAccessApiUsageError, NonTransientDataAccessError)
        assert issubclass(UncategorizedMongoDbError, NonTransientDataAccessError)

    def test_transient_flag(self):
        assert DataAccessResourceFailureError("x").transient is True
        assert UncategorizedMongoDbError("x").transient is False


class TestExceptionMessages:
    """Test message and context formatting."""

    def test_message_without_context(self):
        error = MdbIndexesError("Something failed")

        assert str(error) == "Something failed"
        assert error.context == {}

    def test_message_with_context(self):
        error = MdbIndexesError("Failed", context={"collection_name": "users"})

        assert str(error) == "Failed (context: collection_name=users)"

    def test_data_access_error_code_in_context(self):
        error = DuplicateKeyViolationError(
            "E11000", code=11000, error_labels=["NoWritesPerformed"]
        )

        assert error.code == 11000
        assert error.error_labels == ["NoWritesPerformed"]
        assert error.context["code"] == 11000

    def test_data_access_error_without_code(self):
        error = DataAccessError("generic")

        assert error.code is None
        assert error.error_labels == []
        assert str(error) == "generic"

    def test_initialization_error_context(self):
        error = InitializationError(
            "Init failed", mongo_uri="mongodb://localhost:27017", db_name="test_db"
        )

        assert error.mongo_uri == "mongodb://localhost:27017"
        assert error.db_name == "test_db"
        assert "mongo_uri" in error.context
        assert "db_name" in error.context

    def test_configuration_error_with_key(self):
        error = ConfigurationError("Invalid value", config_key="max_pool_size", config_value=-1)

        assert error.config_key == "max_pool_size"
        assert error.config_value == -1
        assert error.context["config_value"] == -1
