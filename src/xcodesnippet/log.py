"""Logging configuration for xcodesnippet."""

import logging
import sys
from enum import StrEnum
from typing import TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from xcodesnippet.config import AppContext


class LogFormat(StrEnum):
    """Log output formats."""

    PRETTY = "pretty"
    JSON = "json"


def configure_logging(app_context: "AppContext") -> None:
    """Configure structlog from the application context.

    Log events go to stderr so command output on stdout stays parseable.
    """
    level = logging.getLevelNamesMapping().get(
        app_context.log_level.upper(), logging.INFO
    )

    renderer: structlog.types.Processor
    if app_context.log_format == LogFormat.JSON:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )
