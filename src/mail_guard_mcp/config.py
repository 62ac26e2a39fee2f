"""Configuration settings for mail-guard-mcp using pydantic-settings."""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field
from pydantic_core import ValidationError
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from mail_guard_mcp.email.connectors.config import IMAPConfig, SMTPConfig
from mail_guard_mcp.exceptions import ConfigError
from mail_guard_mcp.listener.models import ListenerConfig
from mail_guard_mcp.protection.models import SecurityConfig
from mail_guard_mcp.triage.models import FolderConfig

ENV_PREFIX = "MGUARD_"
CONFIG_FILE_ENV = "MGUARD_CONFIG_FILE"


class NotificationConfig(BaseModel):
    """Where security check reports are delivered."""

    quarantine_report_to: str | None = Field(
        default=None,
        description="Address that receives a report when messages are quarantined",
    )


class YamlConfigSettingsSource(PydanticBaseSettingsSource):
    """Settings source that loads configuration from a YAML file.

    Looks for config file in the following order:
    1. MGUARD_CONFIG_FILE environment variable
    2. ./mguard.yaml (current directory)
    3. $XDG_CONFIG_HOME/mail-guard-mcp/config.yaml (defaults to ~/.config)
    """

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Get field value from YAML config."""
        yaml_data = self._load_yaml_config()
        field_value = yaml_data.get(field_name)
        return field_value, field_name, False

    def __call__(self) -> dict[str, Any]:
        """Return all settings from YAML config."""
        return self._load_yaml_config()

    def _load_yaml_config(self) -> dict[str, Any]:
        """Load and cache YAML config file."""
        if not hasattr(self, "_yaml_data"):
            self._yaml_data = self._read_yaml_file()
        return self._yaml_data

    def _read_yaml_file(self) -> dict[str, Any]:
        """Read YAML config from the first existing config path."""
        xdg_config = os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config")
        config_paths = [
            os.environ.get(CONFIG_FILE_ENV),
            Path.cwd() / "mguard.yaml",
            Path(xdg_config) / "mail-guard-mcp" / "config.yaml",
        ]

        for path in config_paths:
            if not path:
                continue
            path_obj = Path(path)
            if not path_obj.exists():
                continue
            try:
                with open(path_obj) as f:
                    data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                mark = getattr(e, "problem_mark", None)
                raise ConfigError(
                    f"Invalid YAML syntax: {getattr(e, 'problem', None) or e}",
                    file_path=str(path_obj),
                    line=mark.line + 1 if mark else None,
                    col=mark.column + 1 if mark else None,
                ) from e
            except PermissionError as e:
                raise ConfigError(
                    "Cannot read config file, permission denied",
                    file_path=str(path_obj),
                ) from e
            except OSError as e:
                raise ConfigError(
                    f"Cannot read config file: {e}",
                    file_path=str(path_obj),
                ) from e

            if data is None:
                return {}
            if not isinstance(data, dict):
                raise ConfigError(
                    "Top level of the config file must be a mapping",
                    file_path=str(path_obj),
                )
            return data

        return {}


def _parse_validation_error(error: ValidationError) -> str:
    """Convert Pydantic ValidationError to user-friendly message."""
    errors = error.errors()
    if not errors:
        return "Unknown validation error"

    err = errors[0]
    loc = err.get("loc", ())
    field_name = ".".join(str(part) for part in loc)

    if err.get("type") == "missing" and loc:
        section = str(loc[0])
        if section in ("imap", "smtp"):
            return (
                f"Section '{section}' is missing required field '{loc[-1]}'. "
                "Required fields: username, password"
                + (", from_address" if section == "smtp" else "")
            )
        return f"Missing required field '{field_name}'"

    if loc:
        return f"Invalid value for '{field_name}': {err.get('msg', '')}"
    return str(error)


class Settings(BaseSettings):
    """Application settings loaded from environment variables with MGUARD_ prefix.

    Configuration via YAML file:
        imap:
          host: "127.0.0.1"
          port: 1143
          username: "me@example.com"
        folders:
          quarantine: "Quarantine"
        security:
          known_safe_senders: ["boss@example.com"]
        listener:
          enabled: true
          poll_interval: 60

    Secrets are best passed through the environment, using ``__`` to reach
    nested fields (e.g. MGUARD_IMAP__PASSWORD).
    """

    model_config = SettingsConfigDict(env_prefix=ENV_PREFIX, env_nested_delimiter="__")

    imap: IMAPConfig | None = None
    smtp: SMTPConfig | None = None
    folders: FolderConfig = Field(default_factory=FolderConfig)
    security: SecurityConfig = Field(default_factory=SecurityConfig)
    listener: ListenerConfig = Field(default_factory=ListenerConfig)
    notifications: NotificationConfig = Field(default_factory=NotificationConfig)

    def require_imap(self) -> IMAPConfig:
        """Return the IMAP config or raise ConfigError if it is missing."""
        if self.imap is None:
            raise ConfigError(
                "IMAP is not configured. Add an 'imap' section to the config file "
                "or set MGUARD_IMAP__USERNAME and MGUARD_IMAP__PASSWORD."
            )
        return self.imap

    def require_smtp(self) -> SMTPConfig:
        """Return the SMTP config or raise ConfigError if it is missing."""
        if self.smtp is None:
            raise ConfigError(
                "SMTP is not configured. Add an 'smtp' section to the config file "
                "or set MGUARD_SMTP__USERNAME, MGUARD_SMTP__PASSWORD and "
                "MGUARD_SMTP__FROM_ADDRESS."
            )
        return self.smtp

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Customize settings sources to include YAML config."""
        return (
            init_settings,
            env_settings,
            YamlConfigSettingsSource(settings_cls),
            dotenv_settings,
            file_secret_settings,
        )


def get_settings_eager() -> Settings:
    """Load settings with eager validation at startup.

    Raises:
        ConfigError: If configuration is invalid, with a user-friendly message.
    """
    try:
        return Settings()
    except ValidationError as e:
        raise ConfigError(_parse_validation_error(e)) from e
