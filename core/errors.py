"""
Custom error types for gdocs-markup.

Provides user-friendly error messages and structured error handling for the
markup converter and the document writer layer.
"""

from dataclasses import dataclass
from typing import Any

# =============================================================================
# Base Exception Hierarchy
# =============================================================================


class GDocsMarkupError(Exception):
    """Base exception for all gdocs-markup errors."""

    pass


# =============================================================================
# Validation Errors
# =============================================================================


class ValidationError(GDocsMarkupError):
    """Raised when input validation fails."""

    pass


# =============================================================================
# Conversion Errors
# =============================================================================


class ConversionError(GDocsMarkupError):
    """Raised when the converter produces an internally inconsistent result."""

    pass


@dataclass
class OffsetInvariantError(ConversionError):
    """Raised when the assembled text length and the running offset disagree."""

    start_index: int = 0
    end_index: int = 0
    text_length: int = 0
    message: str = ""

    def __post_init__(self):
        if not self.message:
            self.message = (
                f"Offset drift: running offset {self.end_index} != "
                f"start {self.start_index} + text length {self.text_length}"
            )

    def __str__(self) -> str:
        return self.message


# =============================================================================
# API Errors
# =============================================================================


class APIError(GDocsMarkupError):
    """Raised for general Google Docs API errors."""

    def __init__(self, message: str, status_code: int | None = None, details: Any | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.details = details


class ResourceNotFoundError(APIError):
    """Raised when a requested document doesn't exist (404)."""

    pass


class PermissionDeniedError(APIError):
    """Raised when the user lacks permission for an operation (403)."""

    pass


class RateLimitError(APIError):
    """Raised when API rate limits are exceeded (429)."""

    pass


def handle_http_error(error: Exception, document_id: str | None = None, status_code: int | None = None) -> APIError:
    """
    Convert a Google API HTTP error into the matching APIError subclass.
    """
    error_str = str(error)
    if status_code is None:
        for candidate in (404, 403, 401, 429):
            if str(candidate) in error_str:
                status_code = candidate
                break

    if status_code == 404:
        return ResourceNotFoundError(
            f"Document not found: {document_id or 'unknown'}", status_code=404, details=error
        )
    elif status_code == 403:
        return PermissionDeniedError(
            "Permission denied. You may not have access to this document.", status_code=403, details=error
        )
    elif status_code == 401:
        return APIError("Authentication expired. Please re-authenticate.", status_code=401, details=error)
    elif status_code == 429:
        return RateLimitError("Rate limit exceeded. Please wait and try again.", status_code=429, details=error)
    else:
        return APIError(f"Google API error: {error_str}", status_code=status_code, details=error)
