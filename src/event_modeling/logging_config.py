"""Structured logging configuration.

Every module logs through ``structlog.get_logger(__name__)``. This module
configures structlog once, at process start, from a LoggingConfig: events
below the configured level are dropped, and the rest are rendered as JSON
lines or as human-readable console output on stderr.

Usage:
    from event_modeling.config import load_config
    from event_modeling.logging_config import configure_logging

    configure_logging(load_config().logging)
"""

import logging
import sys
from typing import Any

import structlog

from event_modeling.config import LoggingConfig


def configure_logging(config: LoggingConfig) -> None:
    """Configure structlog according to ``config``.

    Args:
        config: Validated logging configuration
    """
    level = logging.getLevelName(config.log_level.upper())

    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
    ]
    if config.log_format.lower() == "json":
        processors.append(structlog.processors.dict_tracebacks)
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )
