"""Logging infrastructure.

Structured logging with:
- JSONL format for log aggregation
- Automatic context injection (correlation_id, ...)
- QueueHandler + QueueListener for non-blocking I/O

Basic usage:
    from demo_service.infra.logging import set_log_context
    import logging

    logger = logging.getLogger(__name__)

    set_log_context(correlation_id="abc-123")
    logger.info("Processing request")  # Automatically includes correlation_id
"""

from demo_service.infra.logging.config import configure_logging, setup_logging, shutdown
from demo_service.infra.logging.context import (
    ContextInjectingFilter,
    clear_log_context,
    get_log_context,
    remove_from_log_context,
    set_log_context,
)
from demo_service.infra.logging.formatters import JSONFormatter

__all__ = [
    "ContextInjectingFilter",
    "JSONFormatter",
    "clear_log_context",
    "configure_logging",
    "get_log_context",
    "remove_from_log_context",
    "set_log_context",
    "setup_logging",
    "shutdown",
]
