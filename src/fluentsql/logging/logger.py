"""Logging setup for fluentsql.

Builder operations log with a small, fixed vocabulary of ``extra`` fields
(table, dialect, predicate count, limit clause and so on). The formatter
groups those fields into a ``query`` section, error fields into an
``error`` section and the filter's ``log_context`` into a ``context``
section, and adds OpenTelemetry trace and span ids when a span is active.
"""

from __future__ import annotations

import json
import logging
import logging.config
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Tuple

from opentelemetry import trace

PACKAGE_LOGGER = "fluentsql"

QUERY_FIELDS: Tuple[str, ...] = (
    "dialect",
    "table",
    "field_count",
    "field",
    "operator",
    "predicate_count",
    "limit_clause",
    "replaced",
)
ERROR_FIELDS: Tuple[str, ...] = ("error_code", "error_type", "details")


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def _pick(record: logging.LogRecord, names: Tuple[str, ...]) -> Dict[str, Any]:
    return {name: getattr(record, name) for name in names if hasattr(record, name)}


def _span_ids() -> Dict[str, str]:
    span_context = trace.get_current_span().get_span_context()
    if not span_context.is_valid:
        return {}
    return {
        "trace_id": format(span_context.trace_id, "032x"),
        "span_id": format(span_context.span_id, "016x"),
    }


class QueryLogFormatter(logging.Formatter):
    """Render a record as one JSON object.

    Shape::

        {"timestamp", "level", "logger", "message",
         "context": {...}, "query": {...}, "error": {...},
         "trace_id", "span_id", "exception"}

    Empty sections are left out.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        sections = {
            "context": getattr(record, "log_context", None) or {},
            "query": _pick(record, QUERY_FIELDS),
            "error": _pick(record, ERROR_FIELDS),
        }
        entry.update({name: body for name, body in sections.items() if body})
        entry.update(_span_ids())

        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(entry, default=str)


def setup_logging(level: Optional[str] = None) -> None:
    """Send ``fluentsql`` logs to stdout as JSON.

    Only the package logger is configured; the host application's root
    logger is left alone and package records do not propagate to it.

    Args:
        level: Log level name. Defaults to ``log_level`` from settings,
            in which case ``app_env`` also becomes the ``environment``
            logging context.
    """
    if level is None:
        from fluentsql.logging.filters import set_logging_context
        from fluentsql.settings import get_settings

        settings = get_settings()
        level = settings.log_level
        set_logging_context(environment=settings.app_env)

    level = level.upper()
    logging.config.dictConfig({
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {"query_json": {"()": QueryLogFormatter}},
        "filters": {"query_context": {"()": "fluentsql.logging.filters.ContextFilter"}},
        "handlers": {
            "fluentsql_stdout": {
                "class": "logging.StreamHandler",
                "formatter": "query_json",
                "filters": ["query_context"],
                "stream": "ext://sys.stdout",
            }
        },
        "loggers": {
            PACKAGE_LOGGER: {
                "level": level,
                "handlers": ["fluentsql_stdout"],
                "propagate": False,
            }
        },
    })
