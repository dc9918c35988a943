"""Shared test fixtures for the mcp-translations test suite."""

import json
import os
from collections.abc import Callable, Generator
from pathlib import Path
from typing import Any

import pytest

CONFIG_FILE = "github-mcp-server-config.json"


@pytest.fixture
def work_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test with a fresh temporary working directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def write_config(work_dir: Path) -> Callable[[Any], Path]:
    """Factory fixture to write the config file in the working directory.

    Dicts and lists are serialized as JSON; strings are written verbatim.

    Usage:
        def test_something(write_config):
            write_config({"TOOL_DESCRIPTION": "Overridden"})
    """

    def _write_config(content: Any) -> Path:
        path = work_dir / CONFIG_FILE
        text = content if isinstance(content, str) else json.dumps(content)
        path.write_text(text)
        return path

    return _write_config


class EnvOverrideContext:
    """Context manager for temporarily setting environment variables."""

    def __init__(self, overrides: dict[str, str]) -> None:
        self.overrides = overrides
        self.original_env: dict[str, str | None] = {}

    def __enter__(self) -> None:
        for key, value in self.overrides.items():
            self.original_env[key] = os.environ.get(key)
            os.environ[key] = value

    def __exit__(self, *args: Any) -> None:
        for key in self.overrides:
            original = self.original_env[key]
            if original is None:
                os.environ.pop(key, None)
            else:
                os.environ[key] = original


@pytest.fixture
def env_override() -> Generator[Callable[[dict[str, str]], EnvOverrideContext], None, None]:
    """Context manager for temporarily setting environment variables.

    Usage:
        def test_something(env_override):
            with env_override({"GITHUB_MCP_TOOL_DESCRIPTION": "x"}):
                # test code here
    """

    def _env_override(overrides: dict[str, str]) -> EnvOverrideContext:
        return EnvOverrideContext(overrides)

    yield _env_override


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove override and settings variables inherited from the shell."""
    for key in list(os.environ):
        if key.startswith(("GITHUB_MCP_", "MCP_TRANSLATIONS_")):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Generator[None, None, None]:
    """Clear the settings cache before and after each test.

    This ensures test isolation for configuration tests.
    """
    from mcp_translations.config import get_settings

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
