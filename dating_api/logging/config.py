# dating_api/logging/config.py

"""
structlog configuration for the API process.

Called once from ``dating_api.main.create_app``. Emits JSON lines in
production (``LOG_FORMAT=json``) and colored console output otherwise, and
routes standard-library logging (uvicorn, SQLAlchemy) to stdout at the same
level.
"""

from __future__ import annotations

import logging
import sys
from typing import Any, MutableMapping, Optional

import structlog
from opentelemetry import trace

from dating_api.config import Settings, get_settings

from . import DEFAULT_LOGGER_NAME, get_logger


def add_open_telemetry_spans(
    _: Any, __: str, event_dict: MutableMapping[str, Any]
) -> MutableMapping[str, Any]:
    """
    Processor that injects the current trace and span ids into the entry,
    so log lines can be joined with traces when a tracer is installed.
    """
    span = trace.get_current_span()
    if not span.is_recording():
        event_dict["trace_id"] = None
        event_dict["span_id"] = None
        return event_dict

    ctx = span.get_span_context()
    event_dict["trace_id"] = format(ctx.trace_id, "032x")
    event_dict["span_id"] = format(ctx.span_id, "016x")
    return event_dict


def _parse_level(value: Optional[str]) -> int:
    """
    Map a level name ('DEBUG', 'info') to a logging constant, INFO if unknown.
    """
    if not value:
        return logging.INFO
    level = getattr(logging, value.strip().upper(), None)
    return level if isinstance(level, int) else logging.INFO


def configure_logging(settings: Optional[Settings] = None) -> Any:
    """
    Configure structlog and stdlib logging, and return the service logger.
    """
    settings = settings or get_settings()
    level = _parse_level(settings.LOG_LEVEL)

    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        add_open_telemetry_spans,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if settings.LOG_FORMAT == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # Third-party libraries log through the standard library.
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=level,
    )

    return get_logger(DEFAULT_LOGGER_NAME)


__all__ = ["add_open_telemetry_spans", "configure_logging"]
