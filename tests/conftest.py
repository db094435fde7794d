"""Test configuration utilities and shared fixtures."""

import sys
from pathlib import Path

# Ensure the ``src`` directory is importable when tests are executed without an
# editable install.
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

import pytest  # noqa: E402
from flask import Flask  # noqa: E402
from flask.testing import FlaskClient  # noqa: E402

from lockeys.backend.app import create_app  # noqa: E402
from lockeys.backend.app.localization import reset_caches  # noqa: E402

TRANSLATIONS_ROOT = SRC / "lockeys" / "translations"

_ENVIRONMENT = (
    "LOCKEYS_SETTINGS_FILE",
    "LOCKEYS_DEFAULT_LOCALE",
    "LOCKEYS_CATALOGUE_DIR",
    "LOCKEYS_ALLOWED_ORIGINS",
    "LOCKEYS_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch: pytest.MonkeyPatch):
    """Start every test from the packaged settings and empty caches."""

    for name in _ENVIRONMENT:
        monkeypatch.delenv(name, raising=False)
    reset_caches()
    yield
    reset_caches()


@pytest.fixture()
def app() -> Flask:
    """Return a configured Flask application for integration tests."""

    application = create_app()
    application.config.update(TESTING=True)
    return application


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    """Provide a test client bound to the configured Flask app."""

    return app.test_client()


@pytest.fixture()
def catalogue_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the loader at an empty temporary catalogue directory."""

    directory = tmp_path / "catalogues"
    directory.mkdir()
    monkeypatch.setenv("LOCKEYS_CATALOGUE_DIR", str(directory))
    reset_caches()
    return directory
