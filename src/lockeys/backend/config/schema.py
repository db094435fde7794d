"""Pydantic models describing the service settings schema."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ConfigurationError(ValueError):
    """Raised when configuration values violate schema expectations."""


class ImmutableModel(BaseModel):
    """Base class that freezes instances and rejects unknown fields."""

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)


class Settings(ImmutableModel):
    """Runtime settings controlling catalogue discovery and the HTTP surface."""

    default_locale: str = "en"
    catalogue_package: str = "lockeys.translations"
    catalogue_directory: Path | None = None
    allowed_origins: tuple[str, ...] = Field(default_factory=tuple)
    log_level: str = "INFO"

    @field_validator("default_locale", mode="before")
    @classmethod
    def _normalise_default_locale(cls, value: Any) -> str:
        if not isinstance(value, str) or not value.strip():
            raise ConfigurationError("default_locale must be a non-empty string")
        return value.strip().lower().replace("_", "-").split("-")[0]

    @field_validator("catalogue_package")
    @classmethod
    def _validate_package(cls, value: str) -> str:
        if not value or any(not part.isidentifier() for part in value.split(".")):
            raise ConfigurationError(f"Invalid catalogue package name: {value!r}")
        return value

    @field_validator("catalogue_directory", mode="before")
    @classmethod
    def _coerce_directory(cls, value: Any) -> Path | None:
        if value is None or (isinstance(value, str) and not value.strip()):
            return None
        return Path(value).expanduser()

    @field_validator("allowed_origins", mode="before")
    @classmethod
    def _coerce_origins(cls, value: Any) -> tuple[str, ...]:
        if value is None:
            return ()
        if isinstance(value, str):
            value = value.split(",")
        if not isinstance(value, (list, tuple)):
            raise ConfigurationError("allowed_origins must be a list of origins")
        return tuple(
            origin.strip() for origin in value if isinstance(origin, str) and origin.strip()
        )

    @field_validator("log_level", mode="before")
    @classmethod
    def _validate_log_level(cls, value: Any) -> str:
        level = str(value or "").strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ConfigurationError(f"Unknown log level: {value!r}")
        return level


__all__ = ["ConfigurationError", "ImmutableModel", "Settings"]
