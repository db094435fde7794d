"""Localized template lookup backed by per-locale catalogue resources."""

from .catalog import (
    Catalogue,
    available_locales,
    load_catalogue,
    load_translations,
    normalise_locale,
    reset_caches,
)
from .providers import CatalogueStringProvider, MappingStringProvider, StringProvider
from .resolver import TemplateResolver, get_resolver, placeholders, resolve, substitute
from .strings_format import CatalogueFormatError, dump_strings, parse_strings

__all__ = [
    "Catalogue",
    "CatalogueFormatError",
    "CatalogueStringProvider",
    "MappingStringProvider",
    "StringProvider",
    "TemplateResolver",
    "available_locales",
    "dump_strings",
    "get_resolver",
    "load_catalogue",
    "load_translations",
    "normalise_locale",
    "parse_strings",
    "placeholders",
    "reset_caches",
    "resolve",
    "substitute",
]
