"""
Exception translation for MongoDB driver errors.

A translator turns a PyMongo exception into the matching ``DataAccessError``
subclass, or returns ``None`` when it does not recognise the exception so
the caller can re-raise the original unchanged.
"""

import logging
from abc import ABC, abstractmethod

from pymongo.errors import (
    ConnectionFailure,
    CursorNotFound,
    DuplicateKeyError,
    ExecutionTimeout,
    InvalidName,
    InvalidOperation,
    OperationFailure,
    PyMongoError,
    WTimeoutError,
)

from ..constants import (
    DUPLICATE_KEY_CODES,
    INVALID_API_USAGE_CODES,
    PERMISSION_DENIED_CODES,
    TRANSIENT_TRANSACTION_LABEL,
)
from ..exceptions import (
    DataAccessError,
    DataAccessResourceFailureError,
    DuplicateKeyViolationError,
    InvalidDataAccessApiUsageError,
    InvalidDataAccessResourceUsageError,
    PermissionDeniedDataAccessError,
    TransientDataAccessError,
    UncategorizedMongoDbError,
)

logger = logging.getLogger(__name__)


class PersistenceExceptionTranslator(ABC):
    """Policy that maps store-specific exceptions onto ``DataAccessError``."""

    @abstractmethod
    def translate_exception_if_possible(self, exc: BaseException) -> DataAccessError | None:
        """
        Translate ``exc`` if it is recognised.

        Returns:
            The translated error, or None to signal that ``exc`` should
            propagate unchanged.
        """


class MongoExceptionTranslator(PersistenceExceptionTranslator):
    """Translates PyMongo exceptions. Anything else is left alone."""

    def translate_exception_if_possible(self, exc: BaseException) -> DataAccessError | None:
        if not isinstance(exc, PyMongoError):
            return None

        code = _error_code(exc)
        labels = _error_labels(exc)
        message = str(exc) or type(exc).__name__
        context = {"error_type": type(exc).__name__}

        if isinstance(exc, DuplicateKeyError) or code in DUPLICATE_KEY_CODES:
            return DuplicateKeyViolationError(message, code, labels, context)

        if isinstance(exc, (ConnectionFailure, ExecutionTimeout, WTimeoutError)):
            return DataAccessResourceFailureError(message, code, labels, context)

        if exc.has_error_label(TRANSIENT_TRANSACTION_LABEL):
            return TransientDataAccessError(message, code, labels, context)

        if isinstance(exc, CursorNotFound):
            return InvalidDataAccessResourceUsageError(message, code, labels, context)

        if isinstance(exc, OperationFailure):
            if code in PERMISSION_DENIED_CODES:
                return PermissionDeniedDataAccessError(message, code, labels, context)
            if code in INVALID_API_USAGE_CODES:
                return InvalidDataAccessApiUsageError(message, code, labels, context)

        if isinstance(exc, (InvalidOperation, InvalidName)):
            return InvalidDataAccessResourceUsageError(message, code, labels, context)

        return UncategorizedMongoDbError(message, code, labels, context)


def potentially_convert_runtime_exception(
    exc: Exception, translator: PersistenceExceptionTranslator
) -> Exception:
    """
    Return the translated form of ``exc``, or ``exc`` itself when the
    translator does not recognise it.
    """
    resolved = translator.translate_exception_if_possible(exc)
    if resolved is None:
        return exc
    logger.debug(f"Translated {type(exc).__name__} into {type(resolved).__name__}")
    return resolved


def _error_code(exc: PyMongoError) -> int | None:
    code = getattr(exc, "code", None)
    if code is not None:
        return code
    details = getattr(exc, "details", None)
    if isinstance(details, dict):
        return details.get("code")
    return None


def _error_labels(exc: PyMongoError) -> list[str]:
    # PyMongo keeps labels in a private set; there is no public accessor.
    return sorted(getattr(exc, "_error_labels", ()))
