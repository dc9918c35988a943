"""Key normalization and naming conventions."""

DEFAULT_CONFIG_NAME = "github-mcp-server-config"
DEFAULT_ENV_PREFIX = "GITHUB_MCP"
CONFIG_SUFFIX = ".json"


def normalize_key(key: str) -> str:
    """Normalize a key to upper snake case.

    Example:
        >>> normalize_key("tool-description")
        'TOOL_DESCRIPTION'
    """
    return key.replace("-", "_").upper()


def env_var_name(key: str, prefix: str = DEFAULT_ENV_PREFIX) -> str:
    """Return the environment variable that overrides ``key``."""
    normalized = normalize_key(key)
    if not prefix:
        return normalized
    return f"{prefix.rstrip('_').upper()}_{normalized}"
