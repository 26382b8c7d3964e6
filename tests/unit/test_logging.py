"""
Unit tests for contextual logging helpers.
"""

import logging

import pytest

from mdb_indexes.observability.logging import (
    clear_collection_context,
    clear_correlation_id,
    get_correlation_id,
    get_logger,
    get_logging_context,
    set_collection_context,
    set_correlation_id,
)


@pytest.fixture(autouse=True)
def clean_context():
    yield
    clear_correlation_id()
    clear_collection_context()


class TestLoggingContext:
    """Test correlation ID and collection context."""

    def test_generated_correlation_id(self):
        correlation_id = set_correlation_id()

        assert correlation_id
        assert get_correlation_id() == correlation_id

    def test_context_includes_collection(self):
        set_correlation_id("req-1")
        set_collection_context("users", db_name="shop")

        context = get_logging_context()

        assert context["correlation_id"] == "req-1"
        assert context["collection_name"] == "users"
        assert context["db_name"] == "shop"
        assert "timestamp" in context

    def test_cleared_context(self):
        set_collection_context("users")
        clear_collection_context()

        assert "collection_name" not in get_logging_context()

    def test_adapter_attaches_context(self, caplog):
        set_correlation_id("req-2")
        logger = get_logger("mdb_indexes.tests")

        with caplog.at_level(logging.INFO, logger="mdb_indexes.tests"):
            logger.info("listing indexes", extra={"operation": "get_index_info"})

        record = caplog.records[-1]
        assert record.correlation_id == "req-2"
        assert record.operation == "get_index_info"
