"""Pydantic models describing the public API surface."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

__all__ = [
    "MAX_BATCH_ITEMS",
    "BatchResolveRequest",
    "BatchResolveResponse",
    "ResolveItem",
    "ResolveRequest",
    "ResolveResult",
    "format_validation_error",
]

MAX_BATCH_ITEMS = 100


class ResolveItem(BaseModel):
    """Single key to resolve, with optional placeholder values."""

    model_config = ConfigDict(extra="forbid")

    key: str = Field(..., min_length=1)
    substitutions: dict[str, Any] | None = None
    comment: str | None = None

    @field_validator("key")
    @classmethod
    def _reject_blank_key(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("key must not be blank")
        return value


class ResolveRequest(ResolveItem):
    """Payload accepted by ``POST /api/v1/resolve``."""

    locale: str | None = None


class BatchResolveRequest(BaseModel):
    """Payload accepted by ``POST /api/v1/resolve/batch``."""

    model_config = ConfigDict(extra="forbid")

    locale: str | None = None
    items: list[ResolveItem] = Field(..., min_length=1)


class ResolveResult(BaseModel):
    """Outcome of resolving one key."""

    key: str
    locale: str
    text: str
    found: bool


class BatchResolveResponse(BaseModel):
    """Outcome of a batch resolution, in request order."""

    locale: str
    results: list[ResolveResult]


def format_validation_error(error: ValidationError) -> str:
    """Return a concise human-readable description of validation issues."""

    messages: list[str] = []
    for issue in error.errors():
        location = ".".join(str(part) for part in issue.get("loc", ()))
        message = issue.get("msg", "Invalid value")
        if location:
            messages.append(f"{location}: {message}")
        else:
            messages.append(message)
    return "; ".join(messages)
