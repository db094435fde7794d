"""Application factory for the lockeys localization service."""

from __future__ import annotations

import logging
from http import HTTPStatus
from warnings import warn

from flask import Flask, jsonify, request
from flask_cors import CORS
from werkzeug.exceptions import BadRequest, NotFound

from lockeys.backend.config.settings import Settings, load_settings
from lockeys.backend.version import get_project_version

from . import keys
from .http import localized_problem, problem_response
from .localization import available_locales
from .routes import register_routes

logger = logging.getLogger(__name__)


def _configure_logging(settings: Settings) -> None:
    """Apply the configured level to the package logger."""

    package_logger = logging.getLogger("lockeys")
    package_logger.setLevel(settings.log_level)
    if not logging.getLogger().handlers and not package_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s")
        )
        package_logger.addHandler(handler)


def create_app() -> Flask:
    """Create and configure the Flask application instance."""

    settings = load_settings()
    _configure_logging(settings)

    app = Flask(__name__)
    app.config["LOCKEYS_SETTINGS"] = settings

    allowed_origins = sorted(set(settings.allowed_origins))
    if not allowed_origins:
        warn(
            "No allowed origins configured; cross-origin requests will be rejected.",
            stacklevel=1,
        )

    CORS(
        app,
        resources={r"/api/*": {"origins": allowed_origins}},
        supports_credentials=False,
        methods=["GET", "OPTIONS", "POST"],
        allow_headers=["Content-Type", "Accept-Language"],
    )

    register_routes(app)

    @app.route("/health", methods=["GET"])
    def health_check():
        """Simple health check endpoint for infrastructure monitoring."""

        payload = {
            "status": "ok",
            "version": get_project_version(),
            "default_locale": settings.default_locale,
            "available_locales": list(available_locales()),
        }
        return jsonify(payload)

    @app.errorhandler(BadRequest)
    def handle_bad_request(error: BadRequest):
        """Return consistent JSON responses for malformed payloads."""

        return localized_problem(
            "bad_request",
            keys.BAD_REQUEST,
            status=HTTPStatus.BAD_REQUEST,
            locale=request.args.get("locale")
            or request.accept_languages.best_match(available_locales()),
        ).to_response()

    @app.errorhandler(NotFound)
    def handle_not_found(error: NotFound):
        return localized_problem(
            "not_found",
            keys.NOT_FOUND,
            status=HTTPStatus.NOT_FOUND,
            locale=request.args.get("locale"),
        ).to_response()

    @app.errorhandler(ValueError)
    def handle_value_error(error: ValueError):
        """Surface catalogue and configuration errors to clients."""

        logger.error("Request failed with %s: %s", type(error).__name__, error)
        return problem_response(
            "validation_error", status=HTTPStatus.BAD_REQUEST, message=str(error)
        ).to_response()

    return app


__all__ = ["create_app"]
