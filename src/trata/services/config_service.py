"""Configuration service for the trata CLI.

Single source of truth for the persisted timer configuration. It handles:

- Loading and saving config.json in the platform config directory
- Dotted-key access (``timer.work_duration``) for the ``config`` commands
- Turning malformed files or values into ``ConfigError``
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any

from platformdirs import user_config_dir
from pydantic import BaseModel, ValidationError

from trata.models.config_models import AppConfig
from trata.models.exceptions import ConfigError
from trata.utils.logger import get_logger


class ConfigService:
    """Loads, caches and saves the application configuration."""

    def __init__(self):
        """Initialize the config service."""
        self.config_dir = Path(user_config_dir("trata"))
        self.config_path = self.config_dir / "config.json"

        self.config_dir.mkdir(parents=True, exist_ok=True)

        self._config: AppConfig | None = None

    @property
    def config(self) -> AppConfig:
        """Get or load the current configuration."""
        if self._config is None:
            self._config = self.load_config()
        return self._config

    def load_config(self) -> AppConfig:
        """Load configuration from disk, falling back to defaults when no file exists."""
        if self._config is not None:
            return self._config

        try:
            with open(self.config_path, encoding="utf-8") as f:
                self._config = AppConfig.model_validate_json(f.read())
        except FileNotFoundError:
            # First run
            self._config = AppConfig()
        except ValidationError as e:
            get_logger().error("invalid config file %s: %s", self.config_path, e)
            raise ConfigError(f"Invalid config file {self.config_path}: {e}") from e

        return self._config

    def save_config(self) -> None:
        """Save the current configuration to disk."""
        self.config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.config_path, "w", encoding="utf-8") as f:
            f.write(self.config.model_dump_json(indent=4))

    def reset_config(self) -> AppConfig:
        """Reset configuration to defaults and persist them."""
        self._config = AppConfig()
        self.save_config()
        return self._config

    def get(self, key: str) -> Any:
        """Get a configuration value by dot-separated key."""
        value: Any = self.config
        for k in key.split("."):
            if not isinstance(value, BaseModel) or k not in type(value).model_fields:
                raise ConfigError(f"Unknown configuration key '{key}'")
            value = getattr(value, k)
        return value

    def set(self, key: str, value: Any) -> AppConfig:
        """Set a configuration value by dot-separated key, re-validating the whole config."""
        # Raises for unknown keys before anything is modified
        self.get(key)

        keys = key.split(".")
        config_dict = self.config.model_dump()
        current = config_dict
        for k in keys[:-1]:
            current = current[k]
        current[keys[-1]] = value

        try:
            new_config = AppConfig.model_validate(config_dict)
        except ValidationError as e:
            raise ConfigError(f"Invalid value for '{key}': {value!r}") from e

        self._config = new_config
        self.save_config()
        get_logger().info("config updated: %s=%r", key, value)
        return new_config


@lru_cache(maxsize=1)
def get_config_service() -> ConfigService:
    """Get the shared ConfigService instance."""
    return ConfigService()
