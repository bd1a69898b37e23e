"""Configuration management for publicsuffix."""

import json
import logging
from pathlib import Path
from typing import Any

from .constants import CONFIG_FILE, CONFIG_VERSION, DEFAULT_SETTINGS
from .models import FindOptions, ParserOptions

logger = logging.getLogger(__name__)

_BOOL_SETTINGS = ("private_domains", "ignore_private")


class ConfigError(Exception):
    """Raised when configuration is invalid."""
    pass


class ConfigManager:
    """Manages lookup configuration loading, validation, and persistence."""

    def __init__(self, config_path: Path | None = None):
        self.config_path = Path(config_path) if config_path else CONFIG_FILE
        self._config: dict[str, Any] = {}
        self.load()

    def _create_default_config(self) -> dict[str, Any]:
        """Generate default configuration."""
        return {
            "version": CONFIG_VERSION,
            "settings": DEFAULT_SETTINGS.copy(),
        }

    def _validate_settings(self, settings: dict[str, Any]) -> list[str]:
        """Validate settings values and return list of errors."""
        errors = []

        for key in _BOOL_SETTINGS:
            if key in settings and not isinstance(settings[key], bool):
                errors.append(f"Setting '{key}' must be a boolean")

        list_path = settings.get("list_path")
        if list_path is not None and not isinstance(list_path, str):
            errors.append("Setting 'list_path' must be a string or null")

        return errors

    def _validate_config(self, config: dict[str, Any]) -> list[str]:
        """Validate configuration and return list of errors."""
        errors = []

        if not isinstance(config.get("version"), int):
            errors.append("Missing or invalid 'version' field")

        settings = config.get("settings")
        if not isinstance(settings, dict):
            errors.append("Missing or invalid 'settings' field")
        else:
            errors.extend(self._validate_settings(settings))

        return errors

    def load(self) -> None:
        """Load configuration from file, creating defaults if needed."""
        if not self.config_path.exists():
            logger.info("Config file not found, creating defaults at %s", self.config_path)
            self._config = self._create_default_config()
            self.save()
            return

        try:
            with open(self.config_path, "r", encoding="utf-8") as f:
                loaded_config = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in config file: {e}") from e

        if not isinstance(loaded_config, dict):
            raise ConfigError("Configuration validation failed: top level must be an object")

        errors = self._validate_config(loaded_config)
        if errors:
            for error in errors:
                logger.error("Config validation error: %s", error)
            raise ConfigError(f"Configuration validation failed: {'; '.join(errors)}")

        self._config = loaded_config
        logger.debug("Configuration loaded from %s", self.config_path)

    def save(self) -> None:
        """Save current configuration to file."""
        self.config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.config_path, "w", encoding="utf-8") as f:
            json.dump(self._config, f, indent=2)
        logger.debug("Configuration saved to %s", self.config_path)

    @property
    def config(self) -> dict[str, Any]:
        """Return a copy of the current configuration."""
        return self._config.copy()

    @property
    def settings(self) -> dict[str, Any]:
        """Return lookup settings, with defaults for missing keys."""
        settings = DEFAULT_SETTINGS.copy()
        settings.update(self._config.get("settings", {}))
        return settings

    def update_settings(self, **kwargs: Any) -> None:
        """Update settings with provided values after validation."""
        errors = self._validate_settings(kwargs)
        if errors:
            raise ConfigError("; ".join(errors))
        self._config.setdefault("settings", {}).update(kwargs)

    def parser_options(self) -> ParserOptions:
        """Return parser options derived from the settings."""
        return ParserOptions(private_domains=self.settings["private_domains"])

    def find_options(self) -> FindOptions:
        """Return find options derived from the settings."""
        return FindOptions(ignore_private=self.settings["ignore_private"])
