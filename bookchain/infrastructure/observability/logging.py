"""Structured logging configuration with structlog.

Production emits one JSON object per line; every other environment
gets colored console output.

Log Entry Format (production):
    {
        "event": "checkout_appended",
        "level": "info",
        "timestamp": "2024-01-01T00:00:00.000000Z",
        "correlation_id": "uuid",
        ...additional context
    }

Usage:
    from bookchain.infrastructure.observability import configure_structlog

    configure_structlog(environment="production")

    import structlog
    log = structlog.get_logger()
    log.info("event_name", key="value")
"""

import logging
import os
from typing import cast

import structlog
from structlog.typing import Processor

from bookchain.infrastructure.observability.correlation import correlation_id_processor

# Environment variable for log level (default: INFO)
LOG_LEVEL_ENV = "LOG_LEVEL"
DEFAULT_LOG_LEVEL = "INFO"


def _get_log_level(level_name: str | None = None) -> int:
    """Resolve a log level name to its logging integer.

    Args:
        level_name: Explicit level name; falls back to $LOG_LEVEL.

    Returns:
        The logging level integer, INFO for unknown names.
    """
    name = (level_name or os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL)).upper()
    level = getattr(logging, name, logging.INFO)
    return level if isinstance(level, int) else logging.INFO


def configure_structlog(
    environment: str = "production", log_level: str | None = None
) -> None:
    """Configure structlog for the application.

    Should be called once at application startup.

    Args:
        environment: 'production' for JSON output, anything else for console.
        log_level: Level name overriding $LOG_LEVEL.
    """
    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        cast(Processor, correlation_id_processor),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if environment == "production":
        # Tracebacks must be flattened to strings before JSON rendering
        final_processors: list[Processor] = [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        final_processors = [structlog.dev.ConsoleRenderer(colors=True)]

    structlog.configure(
        processors=shared_processors + final_processors,
        wrapper_class=structlog.make_filtering_bound_logger(_get_log_level(log_level)),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger_for_service(
    service_name: str, component: str = "chain"
) -> structlog.BoundLogger:
    """Get a logger with service and component already bound.

    Args:
        service_name: The name of the service (typically class name).
        component: The component type (default: "chain").
    """
    return structlog.get_logger().bind(
        service=service_name,
        component=component,
    )
