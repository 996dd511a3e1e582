"""Logging filters for context injection.

The filter gathers everything that describes *where* a record came from
(package, version, deployment environment, caller request) into a single
``log_context`` mapping on the record, which the formatter emits as the
``context`` section.
"""

from __future__ import annotations

import logging
from contextvars import ContextVar
from typing import Any, Dict, Optional

from fluentsql.__version__ import __version__

request_id_var: ContextVar[Optional[str]] = ContextVar("request_id", default=None)

_static_context: Dict[str, Any] = {}


class ContextFilter(logging.Filter):
    """Attach ``log_context`` to every record passing through a handler.

    Values already present in a record's ``log_context`` win over the
    static context, so a caller can override them per record through
    ``extra={"log_context": {...}}``.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        context: Dict[str, Any] = {
            "sdk_name": "fluentsql",
            "sdk_version": __version__,
        }
        context.update(_static_context)

        request_id = request_id_var.get()
        if request_id is not None:
            context["request_id"] = request_id

        context.update(getattr(record, "log_context", None) or {})
        record.log_context = context
        return True


def set_logging_context(
    environment: Optional[str] = None,
    extra: Optional[Dict[str, Any]] = None,
) -> None:
    """Replace the static context attached to every log record."""
    _static_context.clear()
    if environment is not None:
        _static_context["environment"] = environment
    if extra:
        _static_context.update(extra)


def set_request_context(request_id: Optional[str] = None) -> None:
    """Tag records logged from the current thread or task with a request id."""
    if request_id is not None:
        request_id_var.set(request_id)


def clear_request_context() -> None:
    request_id_var.set(None)
