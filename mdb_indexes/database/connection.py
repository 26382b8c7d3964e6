"""
Shared MongoDB Client

Provides a process-wide Motor client so that every database factory built
from configuration shares one connection pool.

Usage:
    from mdb_indexes.database import get_shared_mongo_client

    client = get_shared_mongo_client(mongo_uri)
    db = client[db_name]
"""

import logging
import threading

from motor.motor_asyncio import AsyncIOMotorClient
from pymongo.errors import (
    ConfigurationError,
    ConnectionFailure,
    InvalidOperation,
    OperationFailure,
    ServerSelectionTimeoutError,
)

from ..constants import (
    APP_NAME,
    DEFAULT_MAX_IDLE_TIME_MS,
    DEFAULT_MAX_POOL_SIZE,
    DEFAULT_MIN_POOL_SIZE,
    DEFAULT_SERVER_SELECTION_TIMEOUT_MS,
)

logger = logging.getLogger(__name__)

# Global singleton instance
_shared_client: AsyncIOMotorClient | None = None
# threading.Lock: factories may be built from several threads at import time
_init_lock = threading.Lock()


def get_shared_mongo_client(
    mongo_uri: str,
    max_pool_size: int = DEFAULT_MAX_POOL_SIZE,
    min_pool_size: int = DEFAULT_MIN_POOL_SIZE,
    server_selection_timeout_ms: int = DEFAULT_SERVER_SELECTION_TIMEOUT_MS,
    max_idle_time_ms: int = DEFAULT_MAX_IDLE_TIME_MS,
) -> AsyncIOMotorClient:
    """
    Gets or creates the shared MongoDB client instance.

    Pool arguments only take effect on the call that creates the client.

    Args:
        mongo_uri: MongoDB connection URI
        max_pool_size: Maximum connection pool size
        min_pool_size: Minimum connection pool size
        server_selection_timeout_ms: Server selection timeout in milliseconds
        max_idle_time_ms: Maximum idle time before closing connections

    Returns:
        Shared AsyncIOMotorClient instance
    """
    global _shared_client

    if _shared_client is not None:
        return _shared_client

    with _init_lock:
        # Another thread may have initialized while we waited
        if _shared_client is not None:
            return _shared_client

        logger.info(
            f"Creating shared MongoDB client with max_pool_size={max_pool_size}, "
            f"min_pool_size={min_pool_size}"
        )

        try:
            _shared_client = AsyncIOMotorClient(
                mongo_uri,
                serverSelectionTimeoutMS=server_selection_timeout_ms,
                appname=APP_NAME,
                maxPoolSize=max_pool_size,
                minPoolSize=min_pool_size,
                maxIdleTimeMS=max_idle_time_ms,
            )
        except (ConfigurationError, ValueError, TypeError) as e:
            logger.error(f"Failed to create shared MongoDB client: {e}", exc_info=True)
            _shared_client = None
            raise

        return _shared_client


async def verify_shared_client() -> bool:
    """
    Verifies that the shared MongoDB client is connected.

    Returns:
        True if client is connected and responsive, False otherwise
    """
    if _shared_client is None:
        logger.warning("Shared MongoDB client is None - cannot verify")
        return False

    try:
        await _shared_client.admin.command("ping")
        logger.debug("Shared MongoDB client verification successful")
        return True
    except (
        ConnectionFailure,
        ServerSelectionTimeoutError,
        OperationFailure,
        InvalidOperation,
    ):
        logger.exception("Shared MongoDB client verification failed")
        return False


def close_shared_client() -> None:
    """
    Closes the shared MongoDB client.
    Should be called during application shutdown.
    """
    global _shared_client

    if _shared_client is not None:
        try:
            _shared_client.close()
            logger.info("Shared MongoDB client closed")
        except (InvalidOperation, AttributeError, RuntimeError) as e:
            logger.warning(f"Error closing shared MongoDB client: {e}")
        finally:
            _shared_client = None
