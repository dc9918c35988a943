"""ConfigBackend abstract interface."""

from abc import ABC, abstractmethod
from pathlib import Path


class ConfigBackend(ABC):
    """Abstract interface for the layered source behind a resolver.

    A backend answers string lookups for normalized keys, combining whatever
    sources it owns with defaults registered by the caller.
    """

    @abstractmethod
    def set_default(self, key: str, value: str) -> None:
        """Register the fallback value for a key."""
        pass

    @abstractmethod
    def get_string(self, key: str) -> str:
        """Get the effective value for a key, or "" if nothing is known."""
        pass

    @abstractmethod
    def load_optional_file(self, path: Path) -> bool:
        """Load file-level values if the file exists.

        Returns:
            True if values were loaded, False if the file was absent or unusable
        """
        pass
