"""Integration tests for the translations API."""

from __future__ import annotations

from pathlib import Path

from flask.testing import FlaskClient

from lockeys.backend.app.localization import parse_strings

TRANSLATIONS_ROOT = Path(__file__).resolve().parents[2] / "src" / "lockeys" / "translations"


def _load_value(locale: str, key: str) -> str:
    text = TRANSLATIONS_ROOT.joinpath(f"{locale}.strings").read_text(encoding="utf-8")
    return parse_strings(text)[key]


def test_translations_endpoint_returns_default_catalogue(client: FlaskClient) -> None:
    response = client.get("/api/v1/translations/")
    assert response.status_code == 200
    payload = response.get_json()

    assert payload["locale"] == "en"
    assert payload["available_locales"] == ["en", "es", "fr"]
    assert payload["messages"]["inbox.empty"] == _load_value("en", "inbox.empty")


def test_translations_endpoint_respects_locale_path(client: FlaskClient) -> None:
    response = client.get("/api/v1/translations/fr")
    assert response.status_code == 200
    payload = response.get_json()

    assert payload["locale"] == "fr"
    assert payload["messages"]["inbox.empty"] == _load_value("fr", "inbox.empty")


def test_translations_endpoint_respects_query_and_header(client: FlaskClient) -> None:
    by_query = client.get("/api/v1/translations/?locale=fr-CA").get_json()
    by_header = client.get(
        "/api/v1/translations/", headers={"Accept-Language": "fr-FR,fr;q=0.9"}
    ).get_json()

    assert by_query["locale"] == "fr"
    assert by_header["locale"] == "fr"


def test_translations_endpoint_unknown_locale_uses_default(client: FlaskClient) -> None:
    payload = client.get("/api/v1/translations/el").get_json()

    assert payload["locale"] == "en"
