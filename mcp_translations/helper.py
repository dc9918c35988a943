"""Translation helper: resolve default strings into overridden values.

A helper resolves each key once, from (highest priority first) its cache,
the GITHUB_MCP_<KEY> environment variable, the optional
github-mcp-server-config.json file, and finally the caller's default.

Usage:
    from mcp_translations import translation_helper

    t, dump = translation_helper()
    description = t("TOOL_GET_ME_DESCRIPTION", "Get details of the current user")
    ...
    dump()  # writes every resolved key to github-mcp-server-config.json
"""

import json
from collections.abc import Callable
from pathlib import Path

from mcp_translations.backends.base import ConfigBackend
from mcp_translations.backends.layered import LayeredConfigBackend
from mcp_translations.config import get_settings
from mcp_translations.config.settings import Settings
from mcp_translations.exceptions import TranslationDumpError
from mcp_translations.keys import normalize_key
from mcp_translations.observability.logging import get_logger

logger = get_logger(__name__)

TranslationHelperFunc = Callable[[str, str], str]


def null_translation_helper(_key: str, default_value: str) -> str:
    """Return the default unchanged, ignoring overrides."""
    return default_value


def dump_translation_key_map(translation_key_map: dict[str, str], path: Path) -> None:
    """Write the translation map to path as indented JSON.

    Raises:
        TranslationDumpError: If the map can't be serialized or the file
            can't be created or written
    """
    try:
        json_data = json.dumps(translation_key_map, indent=2, ensure_ascii=False)
    except (TypeError, ValueError) as e:
        raise TranslationDumpError(f"error marshaling map to JSON: {e}", path=path) from e

    try:
        with Path(path).open("w", encoding="utf-8") as f:
            f.write(json_data)
    except (OSError, UnicodeEncodeError) as e:
        raise TranslationDumpError(f"error writing to file {path}: {e}", path=path) from e


class TranslationHelper:
    """Resolves and records translation keys.

    Each instance owns its cache: once a key is resolved, later calls return
    the same value regardless of the default passed or of changes to the
    environment. Not thread-safe.
    """

    def __init__(
        self,
        backend: ConfigBackend | None = None,
        *,
        settings: Settings | None = None,
        config_path: Path | None = None,
        dump_path: Path | None = None,
    ) -> None:
        """Create a helper and load the optional config file.

        Args:
            backend: Source of override values. Defaults to a
                LayeredConfigBackend using the settings' env prefix.
            settings: Settings to take conventions from. Defaults to
                get_settings().
            config_path: Input file, overriding settings.config_path
            dump_path: Output file, overriding settings.resolved_dump_path
        """
        if settings is None:
            settings = get_settings()

        self._translation_key_map: dict[str, str] = {}
        self._backend = backend or LayeredConfigBackend(env_prefix=settings.env_prefix)
        self.config_path = config_path or settings.config_path
        self.dump_path = dump_path or settings.resolved_dump_path

        self._backend.load_optional_file(self.config_path)

    def __call__(self, key: str, default_value: str) -> str:
        """Resolve key, falling back to default_value."""
        normalized_key = normalize_key(key)
        if normalized_key in self._translation_key_map:
            return self._translation_key_map[normalized_key]

        self._backend.set_default(normalized_key, default_value)
        resolved = self._backend.get_string(normalized_key)
        self._translation_key_map[normalized_key] = resolved

        if resolved != default_value:
            logger.debug("translation_overridden", key=normalized_key)
        return resolved

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and normalize_key(key) in self._translation_key_map

    def __len__(self) -> int:
        return len(self._translation_key_map)

    @property
    def translations(self) -> dict[str, str]:
        """Snapshot of every key resolved so far."""
        return dict(self._translation_key_map)

    def dump(self) -> None:
        """Write resolved translations to dump_path.

        Raises:
            TranslationDumpError: If writing fails
        """
        dump_translation_key_map(self._translation_key_map, self.dump_path)
        logger.info(
            "translations_dumped",
            path=str(self.dump_path),
            keys=len(self._translation_key_map),
        )

    def finalize(self) -> None:
        """Write resolved translations, terminating the process on failure."""
        try:
            self.dump()
        except TranslationDumpError as e:
            logger.critical(
                "translation_dump_failed", path=str(self.dump_path), error=e.message
            )
            raise SystemExit(1) from e


def translation_helper(
    backend: ConfigBackend | None = None,
    *,
    settings: Settings | None = None,
) -> tuple[TranslationHelperFunc, Callable[[], None]]:
    """Create a resolve function and its finalize function.

    Both share one TranslationHelper, and therefore one cache.
    """
    helper = TranslationHelper(backend, settings=settings)
    return helper, helper.finalize
