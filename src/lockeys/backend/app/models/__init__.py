"""Request/response models for the localization API."""

from .api import (
    MAX_BATCH_ITEMS,
    BatchResolveRequest,
    BatchResolveResponse,
    ResolveItem,
    ResolveRequest,
    ResolveResult,
    format_validation_error,
)

__all__ = [
    "MAX_BATCH_ITEMS",
    "BatchResolveRequest",
    "BatchResolveResponse",
    "ResolveItem",
    "ResolveRequest",
    "ResolveResult",
    "format_validation_error",
]
