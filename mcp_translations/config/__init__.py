"""Configuration loading for mcp-translations.

Usage:
    from mcp_translations.config import get_settings

    settings = get_settings()
    path = settings.config_path
"""

from functools import lru_cache

from mcp_translations.config.settings import Settings


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the singleton settings instance.

    Configuration is loaded in this order:
    1. Pydantic model defaults (in code)
    2. MCP_TRANSLATIONS_* environment variables

    The result is cached for the lifetime of the process.
    Call `get_settings.cache_clear()` to reload configuration.
    """
    return Settings()


def reload_settings() -> Settings:
    """Clear the settings cache and reload configuration."""
    get_settings.cache_clear()
    return get_settings()


__all__ = ["get_settings", "reload_settings", "Settings"]
