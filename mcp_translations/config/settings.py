"""Root settings model for translation resolution."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from mcp_translations.config.models.observability import LoggingConfig
from mcp_translations.keys import (
    CONFIG_SUFFIX,
    DEFAULT_CONFIG_NAME,
    DEFAULT_ENV_PREFIX,
)


class Settings(BaseSettings):
    """Settings that control where overrides are read from and written to.

    These are loaded from MCP_TRANSLATIONS_* environment variables. The
    override namespace itself (GITHUB_MCP_* by default) is separate and is
    never read through this model.
    """

    model_config = SettingsConfigDict(
        env_prefix="MCP_TRANSLATIONS_",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    config_name: str = Field(
        default=DEFAULT_CONFIG_NAME,
        description="Base name of the JSON config file, without extension",
    )
    config_dir: Path = Field(
        default=Path("."),
        description="Directory searched for the config file",
    )
    env_prefix: str = Field(
        default=DEFAULT_ENV_PREFIX,
        description="Prefix of environment variables that override values",
    )
    dump_path: Path | None = Field(
        default=None,
        description="Where finalize writes resolved values",
    )
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig,
        description="Logging configuration",
    )

    @property
    def config_path(self) -> Path:
        """Path of the optional input file."""
        return self.config_dir / f"{self.config_name}{CONFIG_SUFFIX}"

    @property
    def resolved_dump_path(self) -> Path:
        """Path finalize writes to; the input file unless overridden."""
        return self.dump_path if self.dump_path is not None else self.config_path
