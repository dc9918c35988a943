"""In-memory implementation of ConfigBackend."""

from pathlib import Path

from mcp_translations.backends.base import ConfigBackend
from mcp_translations.keys import normalize_key


class InMemoryConfigBackend(ConfigBackend):
    """In-memory implementation of ConfigBackend for testing.

    Values passed at construction take the place of both the environment
    and the config file. Nothing is read from disk or os.environ.
    """

    def __init__(self, values: dict[str, str] | None = None) -> None:
        self._values = {normalize_key(k): v for k, v in (values or {}).items()}
        self._defaults: dict[str, str] = {}

    def set_default(self, key: str, value: str) -> None:
        self._defaults[normalize_key(key)] = value

    def get_string(self, key: str) -> str:
        normalized = normalize_key(key)
        if normalized in self._values:
            return self._values[normalized]
        return self._defaults.get(normalized, "")

    def load_optional_file(self, path: Path) -> bool:  # noqa: ARG002
        return False

    def set(self, key: str, value: str) -> None:
        """Set an override value directly."""
        self._values[normalize_key(key)] = value
