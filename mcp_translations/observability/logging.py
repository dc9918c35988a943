"""Structured logging configuration using structlog.

Provides JSON logging for machine consumption and console logging for
development, with automatic context binding.

Events are emitted through standard library loggers under the
``mcp_translations`` namespace, which carries a NullHandler. Nothing is
written anywhere until the host application configures logging, either
with setup_logging() or its own handlers. Output never goes to stdout,
which MCP servers reserve for the JSON-RPC stream.
"""

import logging
import sys
from typing import TYPE_CHECKING, Any, cast

import structlog

if TYPE_CHECKING:
    from mcp_translations.config.settings import Settings

PACKAGE_LOGGER = "mcp_translations"

LEVELS: dict[str, int] = {
    "DEBUG": 10,
    "INFO": 20,
    "WARNING": 30,
    "ERROR": 40,
    "CRITICAL": 50,
}

logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())


def setup_logging(level: str = "INFO", format: str = "console") -> None:
    """Configure structured logging to stderr.

    Args:
        level: Minimum log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format: Output format - "json" for log shipping, "console" for development
    """
    level_num = LEVELS.get(level.upper(), 20)

    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    if format == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    logging.basicConfig(format="%(message)s", stream=sys.stderr, level=level_num, force=True)

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level_num),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )


def configure_logging(settings: "Settings") -> None:
    """Apply the logging section of the given settings."""
    setup_logging(level=settings.logging.level, format=settings.logging.format)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a logger instance bound to the given name.

    The wrapped logger is always the stdlib logger of that name, so events
    follow stdlib handlers even when structlog itself is unconfigured.

    Args:
        name: Logger name (typically __name__ of the module)

    Returns:
        A bound structlog logger
    """
    return cast(structlog.stdlib.BoundLogger, structlog.wrap_logger(logging.getLogger(name)))
