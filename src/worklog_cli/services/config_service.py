"""Configuration service for managing Worklog CLI configuration.

``ConfigService`` is the single source of truth for configuration. It handles:

- Loading and saving config.json
- First-run initialisation with defaults
- Reading and updating values by dotted key
"""

from __future__ import annotations

from datetime import time
from functools import lru_cache
from pathlib import Path
from typing import Any

from platformdirs import user_config_dir, user_data_dir
from pydantic import BaseModel, ValidationError

from worklog_cli.models.config_models import AppConfig
from worklog_cli.models.exceptions import ConfigError
from worklog_cli.utils.logger import get_logger


class ConfigService:
    """Service for managing application configuration."""

    def __init__(self):
        self.config_dir = Path(user_config_dir("worklog_cli"))
        self.config_path = self.config_dir / "config.json"
        self.data_dir = Path(user_data_dir("worklog_cli"))

        # Ensure directories exist
        self.config_dir.mkdir(parents=True, exist_ok=True)
        self.data_dir.mkdir(parents=True, exist_ok=True)

        self._config: AppConfig | None = None

    @property
    def config(self) -> AppConfig:
        """Get or load the current configuration."""
        if self._config is None:
            self._config = self.load_config()
        return self._config

    def default_config(self) -> AppConfig:
        return AppConfig(data_path=str(self.data_dir / "worklog.db"))

    def load_config(self) -> AppConfig:
        """Load configuration from storage, writing defaults on first run."""
        if self._config is not None:
            return self._config

        try:
            with open(self.config_path, encoding="utf-8") as f:
                self._config = AppConfig.model_validate_json(f.read())
        except FileNotFoundError:
            # Expected on first run
            self._config = self.default_config()
            self.save_config()
        except (OSError, ValidationError) as e:
            raise ConfigError(f"Failed to load config: {e}") from e

        return self._config

    def save_config(self) -> None:
        """Save the current configuration to storage."""
        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_path, "w", encoding="utf-8") as f:
                f.write(self.config.model_dump_json(indent=4))
        except OSError as e:
            raise ConfigError(f"Failed to save config: {e}") from e

    def reset_config(self) -> AppConfig:
        """Reset configuration to defaults."""
        self._config = self.default_config()
        self.save_config()
        get_logger("config").info("configuration reset to defaults")
        return self._config

    def _replace(self, **changes: Any) -> AppConfig:
        try:
            self._config = AppConfig.model_validate(
                {**self.config.model_dump(), **changes}
            )
        except ValidationError as e:
            raise ConfigError(f"Invalid configuration: {e}") from e
        self.save_config()
        return self._config

    def update_data_path(self, data_path: str | Path) -> AppConfig:
        self._replace(data_path=str(Path(data_path).expanduser()))
        get_logger("config").info("data path updated to %s", self._config.data_path)
        return self._config

    def update_day_change_threshold(self, threshold: time | None) -> AppConfig:
        self._replace(day_change_threshold=threshold)
        get_logger("config").info(
            "day change threshold updated to %s", self._config.day_change_threshold
        )
        return self._config

    def get(self, key: str) -> Any:
        """Get a configuration value by dot-separated key.

        Raises:
            ConfigError: If the key does not name a configuration value
        """
        value: Any = self.config
        for k in key.split("."):
            if not isinstance(value, BaseModel) or k not in type(value).model_fields:
                raise ConfigError(f"Unknown configuration key '{key}'")
            value = getattr(value, k)
        return value

    def set(self, key: str, value: Any) -> AppConfig:
        """Set a configuration value by dot-separated key.

        Raises:
            ConfigError: If the resulting configuration is invalid
        """
        keys = key.split(".")
        config_dict = self.config.model_dump(mode="json")

        current = config_dict
        for k in keys[:-1]:
            if not isinstance(current.get(k), dict):
                raise ConfigError(f"Unknown configuration key '{key}'")
            current = current[k]
        if keys[-1] not in current:
            raise ConfigError(f"Unknown configuration key '{key}'")
        current[keys[-1]] = value

        try:
            self._config = AppConfig.model_validate(config_dict)
        except ValidationError as e:
            raise ConfigError(f"Invalid value for '{key}': {e}") from e
        self.save_config()
        return self._config


@lru_cache
def get_config_service() -> ConfigService:
    """Get the process-wide ConfigService."""
    return ConfigService()
