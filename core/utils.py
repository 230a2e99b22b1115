import asyncio
import functools
import inspect
import logging
import re
import ssl

from googleapiclient.errors import HttpError

from core.errors import APIError, GDocsMarkupError, ValidationError, handle_http_error

logger = logging.getLogger(__name__)

SUPPORTED_FORMAT_TYPES = ("markdown", "html", "plain")


def validate_content(content: str | None, param_name: str = "content") -> str:
    """Validate markup content handed to the converter."""
    if content is None:
        raise ValidationError(f"{param_name} is required")

    if not isinstance(content, str):
        raise ValidationError(f"{param_name} must be a string")

    if not content:
        raise ValidationError(f"{param_name} cannot be empty")

    return content


def validate_start_index(start_index: int | None, param_name: str = "start_index") -> int:
    """Validate a document insertion index (non-negative integer)."""
    if start_index is None:
        raise ValidationError(f"{param_name} is required")

    if isinstance(start_index, bool) or not isinstance(start_index, int):
        raise ValidationError(f"{param_name} must be an integer")

    if start_index < 0:
        raise ValidationError(f"{param_name} must be non-negative")

    return start_index


def validate_document_id(document_id: str, param_name: str = "document_id") -> str:
    """Validate a Google Docs document ID."""
    if not document_id:
        raise ValidationError(f"{param_name} is required")

    document_id = document_id.strip()
    if not document_id:
        raise ValidationError(f"{param_name} cannot be empty")

    if not re.match(r"^[\w\-]+$", document_id):
        raise ValidationError(f"{param_name} contains invalid characters")

    return document_id


def validate_format_type(format_type: str | None, param_name: str = "format_type") -> str | None:
    """Validate an explicit content format; None means auto-detect."""
    if format_type is None:
        return None

    if not isinstance(format_type, str):
        raise ValidationError(f"{param_name} must be a string")

    normalized = format_type.strip().lower()
    if normalized not in SUPPORTED_FORMAT_TYPES:
        raise ValidationError(f"{param_name} must be one of {', '.join(SUPPORTED_FORMAT_TYPES)}, got '{format_type}'")

    return normalized


class TransientNetworkError(Exception):
    """Custom exception for transient network errors after retries."""

    pass


def handle_http_errors(tool_name: str, is_read_only: bool = False):
    """
    A decorator to handle Google API HttpErrors and transient SSL errors in a standardized way.

    It wraps a writer coroutine, catches HttpError, logs a detailed error message,
    and raises the matching APIError subclass with a user-friendly message.

    If is_read_only is True, it will also catch ssl.SSLError and retry with
    exponential backoff. After exhausting retries, it raises a TransientNetworkError.

    Args:
        tool_name (str): The name of the operation being decorated (e.g., 'replace_doc_content').
        is_read_only (bool): If True, the operation is considered safe to retry on
                             transient network errors. Defaults to False.
    """

    def decorator(func):
        signature = inspect.signature(func)

        @functools.wraps(func)
        async def wrapper(*args, **kwargs):
            max_retries = 3
            base_delay = 1

            for attempt in range(max_retries):
                try:
                    return await func(*args, **kwargs)
                except ssl.SSLError as e:
                    if is_read_only and attempt < max_retries - 1:
                        delay = base_delay * (2**attempt)
                        logger.warning(
                            f"SSL error in {tool_name} on attempt {attempt + 1}: {e}. Retrying in {delay} seconds..."
                        )
                        await asyncio.sleep(delay)
                    else:
                        logger.error(f"SSL error in {tool_name} on final attempt: {e}. Raising exception.")
                        raise TransientNetworkError(
                            f"A transient SSL error occurred in '{tool_name}' after {max_retries} attempts. "
                            "This is likely a temporary network or certificate issue. Please try again shortly."
                        ) from e
                except ValidationError as e:
                    logger.warning(f"Input error in {tool_name}: {e}")
                    raise
                except HttpError as error:
                    document_id = signature.bind_partial(*args, **kwargs).arguments.get("document_id")
                    api_error = handle_http_error(error, document_id=document_id, status_code=error.resp.status)
                    if error.resp.status in (401, 403):
                        message = (
                            f"API error in {tool_name}: {api_error}. "
                            "You might need to re-authenticate with the Docs write scope."
                        )
                    else:
                        message = f"API error in {tool_name}: {api_error}"

                    logger.error(f"API error in {tool_name}: {error}", exc_info=True)
                    raise type(api_error)(message, status_code=api_error.status_code, details=error) from error
                except TransientNetworkError:
                    raise
                except GDocsMarkupError:
                    raise
                except Exception as e:
                    message = f"An unexpected error occurred in {tool_name}: {e}"
                    logger.exception(message)
                    raise APIError(message) from e

        return wrapper

    return decorator
