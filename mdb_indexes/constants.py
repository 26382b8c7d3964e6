"""
Constants for MDB_INDEXES.

This module contains all shared constants used across the codebase to avoid
magic numbers and improve maintainability.
"""

from typing import Final

# ============================================================================
# INDEX OPERATION CONSTANTS
# ============================================================================

DROP_ALL_INDEXES: Final[str] = "*"
"""Index name MongoDB interprets as "every index except _id_"."""

GEO_INDEX_TYPES: Final[frozenset] = frozenset({"2d", "2dsphere"})
"""Key values that identify a geospatial index field."""

TEXT_INDEX_TYPE: Final[str] = "text"
"""Key value that identifies a text index field."""

HASHED_INDEX_TYPE: Final[str] = "hashed"
"""Key value that identifies a hashed index field."""

WILDCARD_KEY: Final[str] = "$**"
"""Key (or key suffix) that identifies a wildcard index field."""

TEXT_INDEX_INTERNAL_KEYS: Final[frozenset] = frozenset({"_fts", "_ftsx"})
"""Key names the server uses internally to store text index fields."""

MIN_GEO_BITS: Final[int] = 1
MAX_GEO_BITS: Final[int] = 32
"""Precision bounds for 2d geospatial indexes."""

# ============================================================================
# ERROR CODES
# ============================================================================

DUPLICATE_KEY_CODES: Final[frozenset] = frozenset({11000, 11001, 12582})
"""Server error codes reported for unique index violations."""

PERMISSION_DENIED_CODES: Final[frozenset] = frozenset({13, 18})
"""Unauthorized and AuthenticationFailed."""

INVALID_API_USAGE_CODES: Final[frozenset] = frozenset({2, 9, 26, 27, 67, 72, 85, 86, 197})
"""BadValue, FailedToParse, NamespaceNotFound, IndexNotFound, CannotCreateIndex,
InvalidOptions, IndexOptionsConflict, IndexKeySpecsConflict,
InvalidIndexSpecificationOption."""

TRANSIENT_TRANSACTION_LABEL: Final[str] = "TransientTransactionError"
"""Error label the server attaches to failures that are safe to retry."""

# ============================================================================
# DATABASE CONSTANTS
# ============================================================================

# Connection pool defaults
DEFAULT_MAX_POOL_SIZE: Final[int] = 50
"""Default maximum MongoDB connection pool size."""

DEFAULT_MIN_POOL_SIZE: Final[int] = 10
"""Default minimum MongoDB connection pool size."""

DEFAULT_SERVER_SELECTION_TIMEOUT_MS: Final[int] = 5000
"""Default server selection timeout in milliseconds."""

DEFAULT_MAX_IDLE_TIME_MS: Final[int] = 45000
"""Default maximum idle time before closing connections (milliseconds)."""

MIN_SERVER_SELECTION_TIMEOUT_MS: Final[int] = 1000
"""Lowest accepted server selection timeout (milliseconds)."""

APP_NAME: Final[str] = "MDB_INDEXES"
"""Application name reported to the server in the connection handshake."""

# ============================================================================
# METRICS CONSTANTS
# ============================================================================

MAX_METRICS: Final[int] = 10000
"""Maximum number of tagged operation metrics kept before LRU eviction."""
