"""Logging infrastructure for fluentsql.

JSON log records with request context and OpenTelemetry trace correlation.
"""

from fluentsql.logging.filters import (
    ContextFilter,
    clear_request_context,
    set_logging_context,
    set_request_context,
)
from fluentsql.logging.logger import QueryLogFormatter, get_logger, setup_logging

__all__ = [
    "get_logger",
    "setup_logging",
    "QueryLogFormatter",
    "ContextFilter",
    "set_logging_context",
    "set_request_context",
    "clear_request_context",
]
