"""
Observability components.

Provides contextual logging and operation metrics.
"""

from .logging import (
    ContextualLoggerAdapter,
    clear_collection_context,
    clear_correlation_id,
    get_correlation_id,
    get_logger,
    get_logging_context,
    set_collection_context,
    set_correlation_id,
)
from .metrics import (
    MetricsCollector,
    OperationMetrics,
    get_metrics_collector,
    record_operation,
)

__all__ = [
    # Metrics
    "MetricsCollector",
    "OperationMetrics",
    "get_metrics_collector",
    "record_operation",
    # Logging
    "get_correlation_id",
    "set_correlation_id",
    "clear_correlation_id",
    "set_collection_context",
    "clear_collection_context",
    "get_logging_context",
    "ContextualLoggerAdapter",
    "get_logger",
]
