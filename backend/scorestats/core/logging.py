"""structlog configuration shared by the API process and tests."""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

from scorestats.config import settings


def setup_logging(debug: bool = False) -> None:
    """Configure structlog once at startup.

    JSON lines in production; colored console output when ``debug`` is set
    or ``log_json`` is disabled.
    """
    level = logging.DEBUG if debug else getattr(logging, settings.log_level.upper(), logging.INFO)

    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    if settings.log_json and not debug:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
        cache_logger_on_first_use=True,
    )

    # Keep uvicorn's access log from duplicating TimingMiddleware output
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
