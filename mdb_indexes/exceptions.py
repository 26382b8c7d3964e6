"""
Custom exceptions for MDB_INDEXES.

The data-access hierarchy mirrors the distinction callers care about:
transient failures (worth retrying at a higher level) versus non-transient
ones. Driver exceptions never leave the index facade untranslated when the
configured translator recognises them.
"""

from typing import Any, Dict, List, Optional


class MdbIndexesError(RuntimeError):
    """
    Base exception for MDB_INDEXES errors.

    Attributes:
        message: Error message
        context: Optional dictionary with additional context (collection_name,
                 operation, etc.)
    """

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        """Return formatted error message with context if available."""
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} (context: {context_str})"
        return self.message


class InitializationError(MdbIndexesError):
    """
    Raised when a database factory cannot be set up.

    Attributes:
        message: Error message
        mongo_uri: MongoDB connection URI (if available)
        db_name: Database name (if available)
        context: Additional context information
    """

    def __init__(
        self,
        message: str,
        mongo_uri: Optional[str] = None,
        db_name: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        context = context or {}
        if mongo_uri:
            context["mongo_uri"] = mongo_uri
        if db_name:
            context["db_name"] = db_name
        super().__init__(message, context=context)
        self.mongo_uri = mongo_uri
        self.db_name = db_name


class ConfigurationError(MdbIndexesError):
    """
    Raised when configuration is invalid or missing.

    Attributes:
        message: Error message
        config_key: Configuration key that caused the error (if available)
        config_value: Configuration value that caused the error (if available)
        context: Additional context information
    """

    def __init__(
        self,
        message: str,
        config_key: Optional[str] = None,
        config_value: Optional[Any] = None,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        context = context or {}
        if config_key:
            context["config_key"] = config_key
        if config_value is not None:
            context["config_value"] = config_value
        super().__init__(message, context=context)
        self.config_key = config_key
        self.config_value = config_value


# ============================================================================
# DATA ACCESS HIERARCHY
# ============================================================================


class DataAccessError(MdbIndexesError):
    """
    Base class for translated database failures.

    Raised by exception translators in place of driver exceptions. The
    driver exception is always available as ``__cause__``.

    Attributes:
        message: Error message
        code: Server error code (if the driver reported one)
        error_labels: Server error labels (if any)
        context: Additional context information
    """

    transient: bool = False

    def __init__(
        self,
        message: str,
        code: Optional[int] = None,
        error_labels: Optional[List[str]] = None,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        context = context or {}
        if code is not None:
            context["code"] = code
        super().__init__(message, context=context)
        self.code = code
        self.error_labels = list(error_labels or [])


class TransientDataAccessError(DataAccessError):
    """A failure that may succeed if the operation is repeated."""

    transient = True


class DataAccessResourceFailureError(TransientDataAccessError):
    """The server could not be reached, or did not answer in time."""


class NonTransientDataAccessError(DataAccessError):
    """A failure that will recur unless its cause is fixed."""


class DataIntegrityViolationError(NonTransientDataAccessError):
    """A write or index build violated a data integrity constraint."""


class DuplicateKeyViolationError(DataIntegrityViolationError):
    """A unique index constraint was violated."""


class InvalidDataAccessApiUsageError(NonTransientDataAccessError):
    """The command was rejected as malformed (bad index spec, unknown index, ...)."""


class InvalidDataAccessResourceUsageError(NonTransientDataAccessError):
    """The client or cursor was used in a state that does not allow it."""


class PermissionDeniedDataAccessError(NonTransientDataAccessError):
    """The authenticated user is not allowed to run the command."""


class UncategorizedMongoDbError(NonTransientDataAccessError):
    """A driver failure no more specific category applies to."""
