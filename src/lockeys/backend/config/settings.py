"""Settings loader combining the YAML defaults with environment overrides."""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .schema import ConfigurationError, Settings

CONFIG_DIRECTORY = Path(__file__).resolve().parent / "data"
SETTINGS_FILE = CONFIG_DIRECTORY / "settings.yaml"

# Environment variable -> settings field.
_ENV_OVERRIDES = {
    "LOCKEYS_DEFAULT_LOCALE": "default_locale",
    "LOCKEYS_CATALOGUE_DIR": "catalogue_directory",
    "LOCKEYS_ALLOWED_ORIGINS": "allowed_origins",
    "LOCKEYS_LOG_LEVEL": "log_level",
}


def _load_yaml(path: Path) -> dict[str, Any]:
    with path.open("r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle) or {}
    if not isinstance(data, dict):
        raise ConfigurationError("Settings file must define a mapping at the top level")
    return data


def settings_path() -> Path:
    """Return the settings file in effect, honouring ``LOCKEYS_SETTINGS_FILE``."""

    override = os.getenv("LOCKEYS_SETTINGS_FILE")
    if override:
        return Path(override).expanduser()
    return SETTINGS_FILE


@lru_cache(maxsize=1)
def load_settings() -> Settings:
    """Load and cache the service settings."""

    path = settings_path()
    if not path.exists():
        raise FileNotFoundError(f"Settings file not found: {path}")

    raw_settings = _load_yaml(path)
    for env, field in _ENV_OVERRIDES.items():
        value = os.getenv(env)
        if value is not None and value.strip():
            raw_settings[field] = value

    try:
        return Settings.model_validate(raw_settings)
    except ValidationError as error:
        raise ConfigurationError(f"Settings validation failed: {error}") from error


__all__ = [
    "CONFIG_DIRECTORY",
    "ConfigurationError",
    "SETTINGS_FILE",
    "Settings",
    "load_settings",
    "settings_path",
]
