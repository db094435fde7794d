"""Expose translation catalogues and key resolution to API consumers."""

from __future__ import annotations

import logging
from http import HTTPStatus
from typing import Any

from flask import Blueprint, jsonify, request
from pydantic import ValidationError
from werkzeug.exceptions import BadRequest

from lockeys.backend.app import keys
from lockeys.backend.app.http import localized_problem
from lockeys.backend.app.localization import available_locales, get_resolver, load_translations
from lockeys.backend.app.localization.resolver import TemplateResolver
from lockeys.backend.app.models import (
    MAX_BATCH_ITEMS,
    BatchResolveRequest,
    BatchResolveResponse,
    ResolveItem,
    ResolveRequest,
    ResolveResult,
    format_validation_error,
)

blueprint = Blueprint("translations", __name__, url_prefix="/api/v1/translations")
resolve_blueprint = Blueprint("resolve", __name__, url_prefix="/api/v1/resolve")

logger = logging.getLogger(__name__)


def _locale_hint(explicit: str | None = None) -> str | None:
    """Pick the locale from the body, the query string, then ``Accept-Language``."""

    if explicit:
        return explicit
    query = request.args.get("locale")
    if query:
        return query
    return request.accept_languages.best_match(available_locales())


def _read_json_object() -> dict[str, Any]:
    """Return the JSON object body; malformed or non-object bodies are a ``BadRequest``."""

    payload = request.get_json(force=True)
    if not isinstance(payload, dict):
        raise BadRequest("Request body must be a JSON object")
    return payload


def _payload_locale(payload: dict[str, Any]) -> str | None:
    locale = payload.get("locale")
    return locale if isinstance(locale, str) else None


def _resolve_item(resolver: TemplateResolver, item: ResolveItem) -> ResolveResult:
    text, found = resolver.render(item.key, item.substitutions)
    return ResolveResult(key=item.key, locale=resolver.locale, text=text, found=found)


@blueprint.get("/")
def get_default_translations():
    """Return translations for the requested or default locale."""

    payload = load_translations(_locale_hint())
    return jsonify(payload), HTTPStatus.OK


@blueprint.get("/<locale>")
def get_locale_translations(locale: str):
    """Return translations for a specific locale slug."""

    payload = load_translations(locale)
    return jsonify(payload), HTTPStatus.OK


@resolve_blueprint.post("")
def resolve_key():
    """Resolve a single key, filling any supplied placeholder values."""

    payload = _read_json_object()

    try:
        body = ResolveRequest.model_validate(payload)
    except ValidationError as error:
        return localized_problem(
            "validation_error",
            keys.VALIDATION_FAILED,
            status=HTTPStatus.BAD_REQUEST,
            locale=_locale_hint(_payload_locale(payload)),
            substitutions={"details": format_validation_error(error)},
        ).to_response()

    resolver = get_resolver(_locale_hint(body.locale))
    result = _resolve_item(resolver, body)
    if not result.found:
        logger.info("Unresolved key %r requested for locale %s", body.key, resolver.locale)
    return jsonify(result.model_dump()), HTTPStatus.OK


@resolve_blueprint.post("/batch")
def resolve_batch():
    """Resolve several keys against one locale, preserving request order."""

    payload = _read_json_object()

    items = payload.get("items")
    if isinstance(items, list) and len(items) > MAX_BATCH_ITEMS:
        return localized_problem(
            "batch_too_large",
            keys.BATCH_TOO_LARGE,
            status=HTTPStatus.BAD_REQUEST,
            locale=_locale_hint(_payload_locale(payload)),
            substitutions={"limit": MAX_BATCH_ITEMS},
        ).to_response()

    try:
        body = BatchResolveRequest.model_validate(payload)
    except ValidationError as error:
        return localized_problem(
            "validation_error",
            keys.VALIDATION_FAILED,
            status=HTTPStatus.BAD_REQUEST,
            locale=_locale_hint(_payload_locale(payload)),
            substitutions={"details": format_validation_error(error)},
        ).to_response()

    resolver = get_resolver(_locale_hint(body.locale))
    response = BatchResolveResponse(
        locale=resolver.locale,
        results=[_resolve_item(resolver, item) for item in body.items],
    )
    return jsonify(response.model_dump()), HTTPStatus.OK
