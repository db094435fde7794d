"""Problem-style error payloads shared by the Flask blueprints."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from flask import jsonify

from lockeys.backend.app.localization import get_resolver


@dataclass(frozen=True)
class ProblemResponse:
    """Serialisable ``{"error", "message"}`` payload with its status code."""

    error: str
    status: int
    message: str | None = None
    extra: Mapping[str, Any] | None = None

    def as_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"error": self.error}
        if self.message:
            payload["message"] = self.message
        if self.extra:
            payload.update(self.extra)
        return payload

    def to_response(self) -> tuple[Any, int]:
        return jsonify(self.as_dict()), self.status


def problem_response(
    error: str,
    *,
    status: int,
    message: str | None = None,
    **extra: Any,
) -> ProblemResponse:
    """Build a :class:`ProblemResponse`, collecting keyword extras."""

    additional: Mapping[str, Any] | None = extra or None
    return ProblemResponse(error=error, status=status, message=message, extra=additional)


def localized_problem(
    error: str,
    key: str,
    *,
    status: int,
    locale: str | None = None,
    substitutions: Mapping[str, Any] | None = None,
    **extra: Any,
) -> ProblemResponse:
    """Build a problem response whose message comes from the catalogue."""

    resolver = get_resolver(locale)
    message = resolver.resolve(key, substitutions)
    return problem_response(error, status=status, message=message, locale=resolver.locale, **extra)


__all__ = ["ProblemResponse", "localized_problem", "problem_response"]
