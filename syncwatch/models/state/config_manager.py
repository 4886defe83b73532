"""Persistent settings storage backed by a YAML file."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError as PydanticValidationError

from syncwatch.models.state.app_settings import (
    AppSettings,
    ConfigError,
    ConfigLoadError,
    ConfigSaveError,
)

logger = logging.getLogger(__name__)

CONFIG_PATH_ENV = "SYNCWATCH_CONFIG"
BASE_URL_ENV = "SYNCWATCH_BASE_URL"
TOKEN_ENV = "SYNCWATCH_TOKEN"

_ENV_OVERRIDES = {
    BASE_URL_ENV: "base_url",
    TOKEN_ENV: "api_token",
}


class ConfigManager:
    """Load, save and reset :class:`AppSettings`.

    The settings file lives at ``~/.config/syncwatch/settings.yaml`` unless
    ``SYNCWATCH_CONFIG`` points elsewhere. Environment variables
    ``SYNCWATCH_BASE_URL`` and ``SYNCWATCH_TOKEN`` override file values
    on load but are never written back.
    """

    @staticmethod
    def config_path() -> Path:
        override = os.environ.get(CONFIG_PATH_ENV)
        if override:
            return Path(override).expanduser()
        return Path.home() / ".config" / "syncwatch" / "settings.yaml"

    @classmethod
    def load(cls) -> AppSettings:
        """Load settings, returning defaults when no file exists.

        Raises:
            ConfigLoadError: The file exists but cannot be read or validated.
        """
        path = cls.config_path()
        data: dict[str, Any] = {}
        if path.exists():
            try:
                raw = yaml.safe_load(path.read_text(encoding="utf-8"))
            except (OSError, yaml.YAMLError) as exc:
                raise ConfigLoadError(f"Cannot read {path}: {exc}") from exc
            if raw is None:
                raw = {}
            if not isinstance(raw, dict):
                raise ConfigLoadError(f"{path} must contain a mapping")
            data.update(raw)

        for env_name, field_name in _ENV_OVERRIDES.items():
            value = os.environ.get(env_name)
            if value:
                data[field_name] = value

        try:
            return AppSettings.model_validate(data)
        except PydanticValidationError as exc:
            raise ConfigLoadError(f"Invalid settings in {path}: {exc}") from exc

    @classmethod
    def save(cls, settings: AppSettings) -> Path:
        """Write settings to disk.

        Raises:
            ConfigSaveError: The file cannot be written.
        """
        path = cls.config_path()
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            payload = settings.model_dump(mode="json")
            path.write_text(yaml.safe_dump(payload, sort_keys=True), encoding="utf-8")
        except OSError as exc:
            raise ConfigSaveError(f"Cannot write {path}: {exc}") from exc
        logger.debug("Saved settings to %s", path)
        return path

    @classmethod
    def reset(cls) -> AppSettings:
        """Restore defaults on disk and return them."""
        settings = AppSettings()
        cls.save(settings)
        return settings


__all__ = [
    "AppSettings",
    "ConfigError",
    "ConfigLoadError",
    "ConfigManager",
    "ConfigSaveError",
]
