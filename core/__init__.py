"""Core utilities for gdocs-markup."""

from core.config import MarkupConfig, get_markup_config, reload_markup_config
from core.errors import (
    APIError,
    ConversionError,
    GDocsMarkupError,
    OffsetInvariantError,
    PermissionDeniedError,
    RateLimitError,
    ResourceNotFoundError,
    ValidationError,
    handle_http_error,
)
from core.utils import (
    TransientNetworkError,
    handle_http_errors,
    validate_content,
    validate_document_id,
    validate_format_type,
    validate_start_index,
)

__all__ = [
    "APIError",
    "ConversionError",
    "GDocsMarkupError",
    "get_markup_config",
    "handle_http_error",
    "handle_http_errors",
    "MarkupConfig",
    "OffsetInvariantError",
    "PermissionDeniedError",
    "RateLimitError",
    "reload_markup_config",
    "ResourceNotFoundError",
    "TransientNetworkError",
    "validate_content",
    "validate_document_id",
    "validate_format_type",
    "validate_start_index",
    "ValidationError",
]
