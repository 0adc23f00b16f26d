# users_api/shared/logging_config.py
import logging
import sys
from typing import Optional

import structlog
from opentelemetry import trace

from users_api.shared.config import settings


def add_trace_context(_, __, event_dict):
    """Tags the event with the ids of the span it was logged under, if any."""
    ctx = trace.get_current_span().get_span_context()
    if ctx.is_valid:
        event_dict["trace_id"] = format(ctx.trace_id, "032x")
        event_dict["span_id"] = format(ctx.span_id, "016x")
    return event_dict


def configure_logging(level: Optional[str] = None, fmt: Optional[str] = None):
    """
    One structlog pipeline for the whole process. ``level`` and ``fmt``
    default to LOG_LEVEL and LOG_FORMAT.
    """
    level = (level or settings.LOG_LEVEL).upper()
    renderer = (
        structlog.processors.JSONRenderer()
        if (fmt or settings.LOG_FORMAT) == "json"
        else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            add_trace_context,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(logging.getLevelName(level)),
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # uvicorn and fastapi log through the standard library
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level)
