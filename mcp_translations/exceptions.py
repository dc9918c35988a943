"""Exception hierarchy for translation resolution.

All exceptions inherit from TranslationError. Only the loader and the dump
routine raise; resolving a key never does.
"""

from pathlib import Path


class TranslationError(Exception):
    """Base exception for all translation errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ConfigFileError(TranslationError):
    """Raised when the config file exists but cannot be read or parsed."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path


class TranslationDumpError(TranslationError):
    """Raised when the resolved translations cannot be written to disk."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path
