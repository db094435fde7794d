"""Tests for the YAML-backed settings loader."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from lockeys.backend.config.settings import (
    SETTINGS_FILE,
    ConfigurationError,
    load_settings,
    settings_path,
)


def test_packaged_settings_load_with_defaults() -> None:
    settings = load_settings()

    assert settings_path() == SETTINGS_FILE
    assert settings.default_locale == "en"
    assert settings.catalogue_package == "lockeys.translations"
    assert settings.catalogue_directory is None
    assert settings.allowed_origins == ()
    assert settings.log_level == "INFO"


def test_settings_are_cached_and_frozen() -> None:
    settings = load_settings()

    assert load_settings() is settings
    with pytest.raises(ValidationError):
        settings.default_locale = "fr"  # type: ignore[misc]


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("LOCKEYS_DEFAULT_LOCALE", "fr_CA")
    monkeypatch.setenv("LOCKEYS_ALLOWED_ORIGINS", "https://a.test, https://b.test,")
    monkeypatch.setenv("LOCKEYS_LOG_LEVEL", "debug")
    monkeypatch.setenv("LOCKEYS_CATALOGUE_DIR", str(tmp_path))

    settings = load_settings()

    assert settings.default_locale == "fr"
    assert settings.allowed_origins == ("https://a.test", "https://b.test")
    assert settings.log_level == "DEBUG"
    assert settings.catalogue_directory == tmp_path


def test_settings_file_override(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    path = tmp_path / "settings.yaml"
    path.write_text("default_locale: es\nallowed_origins:\n  - https://x.test\n", encoding="utf-8")
    monkeypatch.setenv("LOCKEYS_SETTINGS_FILE", str(path))

    settings = load_settings()

    assert settings.default_locale == "es"
    assert settings.allowed_origins == ("https://x.test",)


def test_missing_settings_file_raises(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("LOCKEYS_SETTINGS_FILE", str(tmp_path / "missing.yaml"))

    with pytest.raises(FileNotFoundError):
        load_settings()


@pytest.mark.parametrize(
    "content",
    [
        "- not\n- a mapping\n",
        "log_level: LOUD\n",
        "default_locale: ''\n",
        "catalogue_package: 'not a package'\n",
        "unknown_setting: true\n",
    ],
)
def test_invalid_settings_raise_configuration_error(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path, content: str
) -> None:
    path = tmp_path / "settings.yaml"
    path.write_text(content, encoding="utf-8")
    monkeypatch.setenv("LOCKEYS_SETTINGS_FILE", str(path))

    with pytest.raises(ConfigurationError):
        load_settings()
