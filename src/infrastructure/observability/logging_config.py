"""
Structured logging configuration using structlog.

Produces JSON-formatted log lines enriched with timestamps, log levels,
the service name and the browsing session bound to the current request.
Plain ``logging`` loggers in the domain and application layers are routed
through the same renderer via the stdlib bridge.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

# ======================================================================
# Constants
# ======================================================================

SERVICE_NAME: str = "artwork-catalog"

# Chatty third-party loggers kept at WARNING unless DEBUG is requested.
_NOISY_LOGGERS: tuple[str, ...] = ("httpx", "httpcore")


# ======================================================================
# Custom processors
# ======================================================================


def add_service_name(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """Inject the service name into every log event."""
    event_dict.setdefault("service", SERVICE_NAME)
    return event_dict


# ======================================================================
# Setup
# ======================================================================


def setup_logging(log_level: str = "INFO") -> None:
    """
    Configure structlog and the stdlib logging bridge for JSON output.

    Call this once at application startup (the FastAPI ``lifespan`` does).

    Parameters
    ----------
    log_level:
        Minimum severity level as a string (``DEBUG``, ``INFO``, ``WARNING``,
        ``ERROR``, ``CRITICAL``).
    """

    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        add_service_name,  # type: ignore[list-item]
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    # stdlib records get the same chain before rendering
    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(numeric_level)

    noisy_level = numeric_level if numeric_level <= logging.DEBUG else logging.WARNING
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(noisy_level)


# ======================================================================
# Request-scoped context
# ======================================================================


def bind_session(session_id: str, request_id: str | None = None) -> None:
    """Attach the session (and request) id to every log line of this request."""
    structlog.contextvars.clear_contextvars()
    context: dict[str, Any] = {"session_id": session_id}
    if request_id is not None:
        context["request_id"] = request_id
    structlog.contextvars.bind_contextvars(**context)


# ======================================================================
# Logger factory
# ======================================================================


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    Return a bound structlog logger pre-populated with the given *name*.

    Additional context can be attached via ``.bind()``::

        log = get_logger("catalog.selection")
        log = log.bind(target=20)
        log.info("bulk_selection_finished", added=20)
    """
    return structlog.get_logger(name)  # type: ignore[no-any-return]
