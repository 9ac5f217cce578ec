"""
Typepred Logging - Structured logging for the predicate library.

Manifesto:
    A predicate library has almost nothing to say, so what it does say must be
    easy to filter: every event is a structured, named record at debug level
    (``predicate_registered``, ``predicate_guarded``, ``tag_class_fallback``).

    The library never configures logging on import. Applications call
    ``configure_logging()`` (or ``configure_logging_from_settings()``) once at
    startup.

Architecture:
    ::

        configure_logging(level="DEBUG", json_format=True, service="app")
            ↓
        structlog processor chain:
          1. TimeStamper (iso)
          2. add_log_level
          3. add_service_metadata
          4. JSONRenderer (or ConsoleRenderer for a tty)

        get_logger(name) binds ``logger_name`` as initial context.

Examples:
    >>> from typepred.core.logging import configure_logging, get_logger
    >>> configure_logging(level="DEBUG", json_format=True, service="ingest")
    >>> logger = get_logger(__name__)
    >>> logger.debug("predicate_guarded", predicate="is_iterable")

Tags:
    logging, structlog, observability, typepred

Doc-Types:
    - API Reference
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog
from structlog.types import EventDict, Processor, WrappedLogger

_SERVICE_NAME = "typepred"


def _add_service_metadata(
    logger: WrappedLogger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Add service-level metadata to all logs."""
    event_dict.setdefault("service.name", _SERVICE_NAME)
    return event_dict


def configure_logging(
    level: str = "WARNING",
    json_format: bool | None = None,
    service: str = "typepred",
    add_timestamp: bool = True,
) -> None:
    """Configure structured logging for the application.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        json_format: True for JSON, False for console, None for auto (JSON if not tty)
        service: Service name to include in logs
        add_timestamp: Include ISO timestamp in logs
    """
    global _SERVICE_NAME
    _SERVICE_NAME = service

    if json_format is None:
        json_format = not sys.stdout.isatty()

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
        _add_service_metadata,
    ]

    if add_timestamp:
        shared_processors.insert(0, structlog.processors.TimeStamper(fmt="iso"))

    if json_format:
        renderer: Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=True)

    structlog.configure(
        processors=shared_processors + [renderer],
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, level.upper())
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str | None = None) -> Any:
    """Get a structured logger.

    Args:
        name: Logger name (usually __name__)
    """
    if name is None:
        return structlog.get_logger()
    # Bound lazily so later configure_logging() calls still apply
    return structlog.get_logger(name, logger_name=name)


__all__ = [
    "configure_logging",
    "get_logger",
]
