"""Structured logging configuration for Social Graph.

Every package logger is a structlog wrapper around a stdlib logger under
the ``social_graph`` namespace. That namespace carries a NullHandler, so the
engine stays silent until an application calls ``setup_logging()``.
"""

import logging
import sys
from typing import Any

import structlog
from structlog.types import Processor

from social_graph.config import get_settings

PACKAGE_LOGGER = "social_graph"

logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())


def setup_logging() -> None:
    """Configure structured logging for the application.

    Sets up structlog with appropriate processors based on environment:
    - Development: Colored console output with timestamps
    - Staging/Production: JSON output for log aggregation

    Also configures standard library logging to use structlog and binds
    the application name to every event.
    """
    settings = get_settings()
    is_dev = settings.app.env == "development"

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if is_dev:
        processors: list[Processor] = [
            *shared_processors,
            structlog.dev.ConsoleRenderer(colors=True),
        ]
    else:
        processors = [
            *shared_processors,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    log_level = getattr(logging, settings.app.log_level)

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=log_level,
        force=True,
    )

    bind_context(app=settings.app.name)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance.

    Args:
        name: Stdlib logger name, normally ``__name__``. If None, the
            package logger is used.

    Returns:
        A lazily bound structlog logger that emits through stdlib logging.

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.info("Added user", username="alice")
    """
    return structlog.wrap_logger(
        logging.getLogger(name or PACKAGE_LOGGER),
        wrapper_class=structlog.stdlib.BoundLogger,
    )


class LogContext:
    """Context manager for adding temporary context to logs.

    Example:
        >>> with LogContext(graph="demo"):
        ...     logger.info("Running analytics")  # includes graph
    """

    def __init__(self, **context: Any) -> None:
        self.context = context
        self._token: Any = None

    def __enter__(self) -> "LogContext":
        self._token = structlog.contextvars.bind_contextvars(**self.context)
        return self

    def __exit__(self, *args: Any) -> None:
        structlog.contextvars.unbind_contextvars(*self.context.keys())


def bind_context(**context: Any) -> None:
    """Bind context variables that will be included in all subsequent logs.

    Args:
        **context: Key-value pairs to include in log context.
    """
    structlog.contextvars.bind_contextvars(**context)


def unbind_context(*keys: str) -> None:
    """Remove context variables from logging context.

    Args:
        *keys: Keys to remove from context.
    """
    structlog.contextvars.unbind_contextvars(*keys)


def clear_context() -> None:
    """Clear all context variables."""
    structlog.contextvars.clear_contextvars()
