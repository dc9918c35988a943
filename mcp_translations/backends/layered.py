"""Layered implementation of ConfigBackend over a JSON file and the environment."""

import os
from collections.abc import Mapping
from pathlib import Path

from mcp_translations.backends.base import ConfigBackend
from mcp_translations.config.loader import load_optional_config
from mcp_translations.exceptions import ConfigFileError
from mcp_translations.keys import DEFAULT_ENV_PREFIX, env_var_name, normalize_key
from mcp_translations.observability.logging import get_logger

logger = get_logger(__name__)


class LayeredConfigBackend(ConfigBackend):
    """Resolves keys from the environment, then a config file, then defaults.

    Priority order (highest to lowest):
    1. <PREFIX>_<KEY> environment variables (empty values count as unset)
    2. values loaded from the optional JSON file
    3. defaults registered with set_default
    """

    def __init__(
        self,
        env_prefix: str = DEFAULT_ENV_PREFIX,
        environ: Mapping[str, str] | None = None,
    ) -> None:
        self.env_prefix = env_prefix
        self._environ = environ if environ is not None else os.environ
        self._file_values: dict[str, str] = {}
        self._defaults: dict[str, str] = {}

    def set_default(self, key: str, value: str) -> None:
        self._defaults[normalize_key(key)] = value

    def get_string(self, key: str) -> str:
        normalized = normalize_key(key)

        env_value = self._environ.get(env_var_name(normalized, self.env_prefix))
        if env_value:
            return env_value

        if normalized in self._file_values:
            return self._file_values[normalized]

        return self._defaults.get(normalized, "")

    def load_optional_file(self, path: Path) -> bool:
        """Load values from the JSON file at path.

        A missing file is ignored silently. A malformed file is logged and
        treated as empty.
        """
        try:
            values = load_optional_config(path)
        except ConfigFileError as e:
            logger.warning("config_file_malformed", path=str(path), error=e.message)
            return False

        if values is None:
            logger.debug("config_file_absent", path=str(path))
            return False

        self._file_values.update(values)
        logger.debug("config_file_loaded", path=str(path), keys=len(values))
        return True
