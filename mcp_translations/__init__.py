"""mcp-translations: overridable strings for MCP servers.

Tool descriptions and other user-facing strings are written with a default
in code and can be overridden per deployment through a JSON file or
GITHUB_MCP_* environment variables.
"""

from mcp_translations.helper import (
    TranslationHelper,
    TranslationHelperFunc,
    dump_translation_key_map,
    null_translation_helper,
    translation_helper,
)
from mcp_translations.keys import normalize_key

__all__ = [
    "TranslationHelper",
    "TranslationHelperFunc",
    "dump_translation_key_map",
    "normalize_key",
    "null_translation_helper",
    "translation_helper",
]
