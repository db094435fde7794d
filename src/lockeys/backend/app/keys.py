"""Catalogue keys for strings rendered by the HTTP layer.

Routes refer to these names instead of repeating raw key literals so a typo
fails at import time rather than surfacing as an untranslated key.
"""

from __future__ import annotations

from typing import Final

BAD_REQUEST: Final = "errors.bad_request"
VALIDATION_FAILED: Final = "errors.validation_failed"
BATCH_TOO_LARGE: Final = "errors.batch_too_large"
NOT_FOUND: Final = "errors.not_found"

__all__ = ["BAD_REQUEST", "BATCH_TOO_LARGE", "NOT_FOUND", "VALIDATION_FAILED"]
