"""Report format problems in catalogue resources.

Each catalogue is checked in isolation: it must parse, every template must be
non-empty, and every ``${`` must be closed. Keys are never compared across
locales.
"""

from __future__ import annotations

import argparse
from typing import Mapping, Sequence

from .catalog import available_locales, load_catalogue
from .resolver import PLACEHOLDER_OPEN, iter_placeholders
from .strings_format import CatalogueFormatError


def _unterminated_placeholder(template: str) -> bool:
    # Scanning stops at the first ${ without a closing brace.
    closed = sum(1 for _ in iter_placeholders(template))
    return template.count(PLACEHOLDER_OPEN) > closed


def validate_messages(messages: Mapping[str, str]) -> list[str]:
    """Return issues found in a single ``key -> template`` mapping."""

    issues: list[str] = []
    for key, template in messages.items():
        if not template.strip():
            issues.append(f"{key}: empty template")
        elif _unterminated_placeholder(template):
            issues.append(f"{key}: unterminated placeholder")
    return issues


def validate_locale(locale: str) -> list[str]:
    """Load and check the catalogue for ``locale``."""

    try:
        catalogue = load_catalogue(locale)
    except CatalogueFormatError as error:
        return [str(error)]

    if catalogue.source is None:
        return ["no catalogue resource found"]
    return validate_messages(catalogue.messages)


def validate_all_locales(locales: Sequence[str] | None = None) -> dict[str, list[str]]:
    """Validate the requested (or all published) locales, keyed by locale."""

    targets = locales or available_locales()
    return {locale: validate_locale(locale) for locale in targets}


def _build_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Check catalogue resources for parse errors and malformed templates."
    )
    parser.add_argument(
        "locales",
        nargs="*",
        help="Specific locales to check (defaults to every published catalogue)",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for running the checks from the command line."""

    parser = _build_argument_parser()
    args = parser.parse_args(argv)

    exit_code = 0
    for locale, issues in validate_all_locales(args.locales).items():
        if issues:
            exit_code = 1
            print(f"[{locale}] {len(issues)} issue(s) detected:")
            for issue in issues:
                print(f"  - {issue}")
        else:
            print(f"[{locale}] OK")

    return exit_code


if __name__ == "__main__":  # pragma: no cover - CLI invocation
    raise SystemExit(main())
