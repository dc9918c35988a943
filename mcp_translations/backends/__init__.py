"""Config backends that supply override values to a resolver."""

from mcp_translations.backends.base import ConfigBackend
from mcp_translations.backends.inmemory import InMemoryConfigBackend
from mcp_translations.backends.layered import LayeredConfigBackend

__all__ = [
    "ConfigBackend",
    "InMemoryConfigBackend",
    "LayeredConfigBackend",
]
