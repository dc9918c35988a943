"""Observability: structured logging.

Provides standardized logging primitives using structlog.
"""

from mcp_translations.observability.logging import (
    configure_logging,
    get_logger,
    setup_logging,
)

__all__ = ["configure_logging", "get_logger", "setup_logging"]
