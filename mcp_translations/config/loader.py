"""JSON configuration loader for translation overrides."""

import json
import math
from decimal import Decimal
from pathlib import Path
from typing import Any

from mcp_translations.exceptions import ConfigFileError
from mcp_translations.keys import CONFIG_SUFFIX, normalize_key
from mcp_translations.observability.logging import get_logger

logger = get_logger(__name__)


def get_config_path(config_dir: Path, config_name: str) -> Path:
    """Build the config file path from a directory and a base name."""
    return Path(config_dir) / f"{config_name}{CONFIG_SUFFIX}"


def load_json(file_path: Path) -> dict[str, Any]:
    """Load a JSON file that must contain an object.

    Args:
        file_path: Path to the JSON file

    Returns:
        Dictionary containing the JSON data

    Raises:
        FileNotFoundError: If the file doesn't exist
        ConfigFileError: If the file can't be read, isn't valid JSON,
            or its top level isn't an object
    """
    if not file_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {file_path}")

    try:
        with file_path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigFileError(f"Invalid JSON in {file_path}: {e}", path=file_path) from e
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigFileError(f"Could not read {file_path}: {e}", path=file_path) from e

    if not isinstance(data, dict):
        raise ConfigFileError(
            f"Expected a JSON object in {file_path}, got {type(data).__name__}",
            path=file_path,
        )
    return data


def format_float(value: float) -> str | None:
    """Format a float in plain decimal notation, without a trailing ".0".

    Example:
        >>> format_float(1.0), format_float(1e20), format_float(2.5e-7)
        ('1', '100000000000000000000', '0.00000025')

    Returns None for NaN and infinities.
    """
    if not math.isfinite(value):
        return None
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def coerce_value(value: Any) -> str | None:
    """Coerce a scalar JSON value to a string.

    Returns None for values that have no string form (null, objects, arrays,
    non-finite numbers).
    """
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return format_float(value)
    return None


def flatten_values(data: dict[str, Any]) -> dict[str, str]:
    """Normalize keys and coerce values of a loaded config object."""
    result: dict[str, str] = {}
    for key, value in data.items():
        coerced = coerce_value(value)
        if coerced is None:
            logger.warning("config_value_skipped", key=key, type=type(value).__name__)
            continue
        result[normalize_key(key)] = coerced
    return result


def load_optional_config(file_path: Path) -> dict[str, str] | None:
    """Load translation overrides from an optional JSON file.

    Returns:
        Normalized key -> value mapping, or None if the file doesn't exist

    Raises:
        ConfigFileError: If the file exists but is malformed
    """
    try:
        data = load_json(file_path)
    except FileNotFoundError:
        return None
    return flatten_values(data)
