"""Unit tests for LayeredConfigBackend."""

from pathlib import Path

import pytest
from structlog.testing import capture_logs

from mcp_translations.backends import LayeredConfigBackend


class TestPriority:
    """Tests for lookup priority."""

    def test_default_when_nothing_set(self) -> None:
        """Registered default is returned when no source has the key."""
        backend = LayeredConfigBackend(environ={})
        backend.set_default("FOO", "fallback")
        assert backend.get_string("FOO") == "fallback"

    def test_unknown_key_is_empty(self) -> None:
        """Keys with no default and no source resolve to an empty string."""
        backend = LayeredConfigBackend(environ={})
        assert backend.get_string("MISSING") == ""

    def test_file_beats_default(self, tmp_path: Path) -> None:
        """File values override defaults."""
        config = tmp_path / "config.json"
        config.write_text('{"FOO": "from-file"}')

        backend = LayeredConfigBackend(environ={})
        assert backend.load_optional_file(config) is True
        backend.set_default("FOO", "fallback")
        assert backend.get_string("FOO") == "from-file"

    def test_env_beats_file(self, tmp_path: Path) -> None:
        """Environment values override file values."""
        config = tmp_path / "config.json"
        config.write_text('{"FOO": "from-file"}')

        backend = LayeredConfigBackend(environ={"GITHUB_MCP_FOO": "from-env"})
        backend.load_optional_file(config)
        backend.set_default("FOO", "fallback")
        assert backend.get_string("FOO") == "from-env"

    def test_empty_env_value_ignored(self) -> None:
        """An empty environment variable counts as unset."""
        backend = LayeredConfigBackend(environ={"GITHUB_MCP_FOO": ""})
        backend.set_default("FOO", "fallback")
        assert backend.get_string("FOO") == "fallback"

    def test_custom_prefix(self) -> None:
        """Only variables with the configured prefix are consulted."""
        environ = {"GITHUB_MCP_FOO": "wrong", "MY_SERVER_FOO": "right"}
        backend = LayeredConfigBackend(env_prefix="MY_SERVER", environ=environ)
        assert backend.get_string("foo") == "right"

    def test_reads_os_environ_by_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Without an explicit mapping the process environment is used."""
        monkeypatch.setenv("GITHUB_MCP_FOO_BAR", "override")
        backend = LayeredConfigBackend()
        assert backend.get_string("foo-bar") == "override"


class TestLoadOptionalFile:
    """Tests for load_optional_file."""

    def test_missing_file_is_silent(self, tmp_path: Path) -> None:
        """Absent file loads nothing and logs no warning."""
        backend = LayeredConfigBackend(environ={})
        with capture_logs() as logs:
            loaded = backend.load_optional_file(tmp_path / "missing.json")

        assert loaded is False
        assert not [log for log in logs if log["log_level"] == "warning"]

    def test_malformed_file_warns_and_is_ignored(self, tmp_path: Path) -> None:
        """Malformed file is logged and treated as empty."""
        config = tmp_path / "config.json"
        config.write_text("{not json")

        backend = LayeredConfigBackend(environ={})
        with capture_logs() as logs:
            loaded = backend.load_optional_file(config)

        assert loaded is False
        assert any(
            log["event"] == "config_file_malformed" and log["log_level"] == "warning"
            for log in logs
        )
        backend.set_default("FOO", "fallback")
        assert backend.get_string("FOO") == "fallback"

    def test_file_keys_normalized(self, tmp_path: Path) -> None:
        """File keys match regardless of case or hyphens."""
        config = tmp_path / "config.json"
        config.write_text('{"tool-description": "from-file"}')

        backend = LayeredConfigBackend(environ={})
        backend.load_optional_file(config)
        assert backend.get_string("TOOL_DESCRIPTION") == "from-file"
