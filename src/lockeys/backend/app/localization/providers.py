"""String providers answering key lookups for a single locale."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Protocol, runtime_checkable

from .catalog import Catalogue


@runtime_checkable
class StringProvider(Protocol):
    """Lookup capability injected into :class:`TemplateResolver`.

    Implementations return the template stored under ``key`` or ``None`` when
    the key is unknown. They must not mutate their backing data after
    construction so that resolvers can be shared between threads.
    """

    locale: str

    def lookup(self, key: str) -> str | None:
        ...


class MappingStringProvider:
    """Provider backed by a plain mapping, copied into a read-only view."""

    def __init__(self, messages: Mapping[str, str], locale: str = "en") -> None:
        self.locale = locale
        self._messages: Mapping[str, str] = MappingProxyType(dict(messages))

    def lookup(self, key: str) -> str | None:
        return self._messages.get(key)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(locale={self.locale!r}, size={len(self._messages)})"


class CatalogueStringProvider:
    """Provider backed by a loaded :class:`Catalogue`."""

    def __init__(self, catalogue: Catalogue) -> None:
        self.catalogue = catalogue
        self.locale = catalogue.locale

    def lookup(self, key: str) -> str | None:
        return self.catalogue.get(key)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(locale={self.locale!r}, source={self.catalogue.source!r})"


__all__ = ["CatalogueStringProvider", "MappingStringProvider", "StringProvider"]
