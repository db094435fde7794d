"""Translation catalogue helpers backed by packaged locale resources."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from functools import cache
from importlib import resources
from importlib.resources.abc import Traversable
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping

from lockeys.backend.config.settings import load_settings

from .strings_format import CatalogueFormatError, parse_strings

logger = logging.getLogger(__name__)

# Preferred resource suffix first.
CATALOGUE_SUFFIXES = (".strings", ".json")


@dataclass(frozen=True)
class Catalogue:
    """Immutable ``key -> template`` mapping for a single locale."""

    locale: str
    messages: Mapping[str, str]
    source: str | None = None

    def __contains__(self, key: object) -> bool:
        return key in self.messages

    def __len__(self) -> int:
        return len(self.messages)

    def get(self, key: str) -> str | None:
        return self.messages.get(key)


def _catalogue_root() -> Traversable | None:
    settings = load_settings()
    if settings.catalogue_directory is not None:
        return settings.catalogue_directory

    try:
        return resources.files(settings.catalogue_package)
    except ModuleNotFoundError:
        logger.warning("Catalogue package %s is not importable", settings.catalogue_package)
        return None


def _default_locale() -> str:
    return load_settings().default_locale


@cache
def available_locales() -> tuple[str, ...]:
    """Return the locales with a published catalogue resource."""

    root = _catalogue_root()
    if root is None or not root.is_dir():
        return (_default_locale(),)

    locales = {
        Path(entry.name).stem
        for entry in root.iterdir()
        if entry.is_file() and Path(entry.name).suffix in CATALOGUE_SUFFIXES
    }
    return tuple(sorted(locales)) or (_default_locale(),)


def _find_resource(locale: str) -> Traversable | None:
    root = _catalogue_root()
    if root is None:
        return None

    for suffix in CATALOGUE_SUFFIXES:
        resource = root.joinpath(f"{locale}{suffix}")
        if resource.is_file():
            return resource
    return None


def _decode_json(text: str, name: str) -> dict[str, str]:
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as error:
        raise CatalogueFormatError(
            f"{name}: invalid JSON on line {error.lineno} ({error.msg})"
        ) from error

    if not isinstance(payload, dict):
        raise CatalogueFormatError(f"{name}: catalogue must be a JSON object")

    messages: dict[str, str] = {}
    for key, value in payload.items():
        if not isinstance(value, str):
            raise CatalogueFormatError(f"{name}: value for {key!r} must be a string")
        messages[key] = value
    return messages


def read_catalogue_messages(resource: Traversable) -> dict[str, str]:
    """Parse a single catalogue resource according to its suffix."""

    text = resource.read_text(encoding="utf-8")
    if resource.name.endswith(".json"):
        return _decode_json(text, resource.name)

    try:
        return parse_strings(text)
    except CatalogueFormatError as error:
        raise CatalogueFormatError(f"{resource.name}: {error}") from error


@cache
def load_catalogue(locale: str) -> Catalogue:
    """Return the cached catalogue for an already normalised locale."""

    resource = _find_resource(locale)
    if resource is None:
        logger.warning("No catalogue resource found for locale %s", locale)
        return Catalogue(locale=locale, messages=MappingProxyType({}))

    messages = read_catalogue_messages(resource)
    logger.info("Loaded %d messages for locale %s from %s", len(messages), locale, resource.name)
    return Catalogue(
        locale=locale,
        messages=MappingProxyType(messages),
        source=resource.name,
    )


def normalise_locale(locale: str | None) -> str:
    """Normalise a requested locale tag to a supported catalogue key."""

    default = _default_locale()
    if not locale or not locale.strip():
        return default

    normalized = locale.strip().lower().replace("_", "-").split("-")[0]
    return normalized if normalized in available_locales() else default


def load_translations(locale: str | None = None) -> dict[str, Any]:
    """Expose the catalogue for API consumers."""

    normalized = normalise_locale(locale)
    catalogue = load_catalogue(normalized)

    return {
        "locale": normalized,
        "available_locales": list(available_locales()),
        "messages": dict(catalogue.messages),
    }


def reset_caches() -> None:
    """Forget every loaded catalogue and the settings they were read with."""

    from .resolver import get_resolver

    available_locales.cache_clear()
    load_catalogue.cache_clear()
    get_resolver.cache_clear()
    load_settings.cache_clear()


__all__ = [
    "CATALOGUE_SUFFIXES",
    "Catalogue",
    "available_locales",
    "load_catalogue",
    "load_translations",
    "normalise_locale",
    "read_catalogue_messages",
    "reset_caches",
]
