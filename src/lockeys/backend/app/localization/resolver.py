"""Resolve localized templates by key and fill their ``${name}`` placeholders."""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any, Iterator, Mapping

from .catalog import load_catalogue, normalise_locale
from .providers import CatalogueStringProvider, StringProvider

logger = logging.getLogger(__name__)

PLACEHOLDER_OPEN = "${"
PLACEHOLDER_CLOSE = "}"


def iter_placeholders(template: str) -> Iterator[tuple[int, int, str]]:
    """Yield ``(start, end, name)`` for every ``${...}`` candidate in order.

    Candidates may overlap (``"${a${b}"`` yields both ``a${b`` and ``b``);
    callers decide which ones to honour.
    """

    start = template.find(PLACEHOLDER_OPEN)
    while start != -1:
        name_start = start + len(PLACEHOLDER_OPEN)
        close = template.find(PLACEHOLDER_CLOSE, name_start)
        if close == -1:
            return
        yield start, close + len(PLACEHOLDER_CLOSE), template[name_start:close]
        start = template.find(PLACEHOLDER_OPEN, start + 1)


def placeholders(template: str) -> list[str]:
    """Return placeholder names in order of first appearance."""

    names: list[str] = []
    for _, _, name in iter_placeholders(template):
        if PLACEHOLDER_OPEN not in name and name not in names:
            names.append(name)
    return names


def _stringify(value: Any) -> str:
    return value if isinstance(value, str) else str(value)


def substitute(template: str, substitutions: Mapping[str, Any] | None = None) -> str:
    """Replace known ``${name}`` placeholders in a single pass.

    Substituted text is never scanned again, so a value that itself looks like
    a placeholder is emitted verbatim. Placeholders without a matching entry
    are left untouched.
    """

    if not substitutions:
        return template

    parts: list[str] = []
    cursor = 0
    for start, end, name in iter_placeholders(template):
        if start < cursor or name not in substitutions:
            continue
        parts.append(template[cursor:start])
        parts.append(_stringify(substitutions[name]))
        cursor = end

    if not parts:
        return template
    parts.append(template[cursor:])
    return "".join(parts)


class TemplateResolver:
    """Look up templates through a :class:`StringProvider` and fill them in."""

    def __init__(self, provider: StringProvider) -> None:
        self.provider = provider

    @property
    def locale(self) -> str:
        return self.provider.locale

    def lookup(self, key: str) -> str | None:
        """Return the raw template for ``key`` or ``None`` when it is unknown."""

        return self.provider.lookup(key)

    def resolve(
        self,
        key: str,
        substitutions: Mapping[str, Any] | None = None,
        comment: str | None = None,
    ) -> str:
        """Return the display string for ``key``.

        Unknown keys resolve to the key itself. ``comment`` is a note for
        translators and catalogue tooling only; it never changes the result.
        """

        text, _ = self.render(key, substitutions)
        return text

    def render(
        self, key: str, substitutions: Mapping[str, Any] | None = None
    ) -> tuple[str, bool]:
        """Return the display string and whether ``key`` was in the catalogue."""

        template = self.provider.lookup(key)
        found = template is not None
        if template is None:
            logger.debug("Missing translation for %r in locale %s", key, self.locale)
            template = key
        return substitute(template, substitutions), found

    __call__ = resolve

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.provider!r})"


@lru_cache(maxsize=32)
def get_resolver(locale: str | None = None) -> TemplateResolver:
    """Return a shared resolver for the requested or default locale."""

    catalogue = load_catalogue(normalise_locale(locale))
    return TemplateResolver(CatalogueStringProvider(catalogue))


def resolve(
    key: str,
    substitutions: Mapping[str, Any] | None = None,
    comment: str | None = None,
    *,
    locale: str | None = None,
) -> str:
    """Resolve ``key`` against the catalogue for ``locale``."""

    return get_resolver(locale).resolve(key, substitutions, comment)


__all__ = [
    "PLACEHOLDER_CLOSE",
    "PLACEHOLDER_OPEN",
    "TemplateResolver",
    "get_resolver",
    "iter_placeholders",
    "placeholders",
    "resolve",
    "substitute",
]
