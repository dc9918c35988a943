"""Configuration models."""

from mcp_translations.config.models.observability import LoggingConfig

__all__ = ["LoggingConfig"]
