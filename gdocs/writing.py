"""
Google Docs Writing Helpers

Applies converted markup to live documents. Each helper receives an already
authenticated Docs API service object (`googleapiclient.discovery.build("docs",
"v1", ...)`), converts the content and sends the resulting operations in a single
batchUpdate call.
"""

import asyncio
import logging
from typing import Any

from core.utils import handle_http_errors, validate_content, validate_document_id
from gdocs.markdown_parser import ConversionResult, MarkupToDocsConverter

logger = logging.getLogger(__name__)

# Index of the first character of a Google Docs body
BODY_START_INDEX = 1


def _doc_link(document_id: str) -> str:
    return f"https://docs.google.com/document/d/{document_id}/edit"


def get_body_end_index(document: dict) -> int:
    """Return the endIndex of the last structural element of the document body."""
    content = document.get("body", {}).get("content", [])
    if not content:
        return BODY_START_INDEX
    return content[-1].get("endIndex", BODY_START_INDEX)


@handle_http_errors("get_document", is_read_only=True)
async def _get_document(service: Any, document_id: str) -> dict:
    return await asyncio.to_thread(service.documents().get(documentId=document_id).execute)


async def _apply_result(service: Any, document_id: str, result: ConversionResult) -> dict:
    requests = result.requests
    logger.debug(f"Sending batchUpdate with {len(requests)} request(s) to document {document_id}")
    return await asyncio.to_thread(
        service.documents().batchUpdate(documentId=document_id, body={"requests": requests}).execute
    )


@handle_http_errors("create_formatted_doc")
async def create_formatted_doc(
    service: Any,
    title: str,
    content: str,
    format_type: str | None = None,
    converter: MarkupToDocsConverter | None = None,
) -> str:
    """
    Creates a new Google Doc and fills it with formatted content.

    Args:
        service: Authenticated Docs API service.
        title: Title of the new document.
        content: Markdown, HTML or plain text.
        format_type: "markdown", "html" or "plain"; None to auto-detect.

    Returns:
        str: Confirmation message with document ID, detected format and link.
    """
    logger.info(f"[create_formatted_doc] Title='{title}', format={format_type or 'auto'}")

    converter = converter or MarkupToDocsConverter.from_config()
    result = converter.convert(validate_content(content), BODY_START_INDEX, format_type)

    doc = await asyncio.to_thread(service.documents().create(body={"title": title}).execute)
    document_id = doc.get("documentId")
    await _apply_result(service, document_id, result)

    link = _doc_link(document_id)
    logger.info(f"Created Google Doc '{title}' (ID: {document_id}) with {result.format_type} content. Link: {link}")
    return f"Created Google Doc '{title}' (ID: {document_id}). Format: {result.format_type}. Link: {link}"


@handle_http_errors("insert_formatted_content")
async def insert_formatted_content(
    service: Any,
    document_id: str,
    content: str,
    index: int | None = None,
    format_type: str | None = None,
    converter: MarkupToDocsConverter | None = None,
) -> str:
    """
    Inserts formatted content into an existing Google Doc.

    Args:
        service: Authenticated Docs API service.
        document_id: ID of the document to update.
        content: Markdown, HTML or plain text.
        index: Insertion index; None appends at the end of the body.
        format_type: "markdown", "html" or "plain"; None to auto-detect.

    Returns:
        str: Confirmation message with insertion details.
    """
    document_id = validate_document_id(document_id)
    content = validate_content(content)
    logger.info(f"[insert_formatted_content] Doc={document_id}, index={index}, format={format_type or 'auto'}")

    if index is None:
        document = await _get_document(service, document_id)
        # The body always ends with a newline that can't be written past
        index = max(BODY_START_INDEX, get_body_end_index(document) - 1)

    converter = converter or MarkupToDocsConverter.from_config()
    result = converter.convert(content, index, format_type)
    await _apply_result(service, document_id, result)

    return (
        f"Inserted {len(content)} chars of {result.format_type} content at index {index} "
        f"in document {document_id}. Link: {_doc_link(document_id)}"
    )


@handle_http_errors("replace_doc_content")
async def replace_doc_content(
    service: Any,
    document_id: str,
    content: str,
    format_type: str | None = None,
    converter: MarkupToDocsConverter | None = None,
) -> str:
    """
    Replaces the whole body of a Google Doc with formatted content.

    The existing body is cleared first (all but the final newline, which the API
    doesn't allow deleting), then the converted content is inserted at index 1.

    Returns:
        str: Confirmation message with the detected format and link.
    """
    document_id = validate_document_id(document_id)
    content = validate_content(content)
    logger.info(f"[replace_doc_content] Doc={document_id}, format={format_type or 'auto'}")

    converter = converter or MarkupToDocsConverter.from_config()
    result = converter.convert(content, BODY_START_INDEX, format_type)

    document = await _get_document(service, document_id)
    end_index = get_body_end_index(document)
    if end_index > 2:
        delete_request = {
            "deleteContentRange": {"range": {"startIndex": BODY_START_INDEX, "endIndex": end_index - 1}}
        }
        await asyncio.to_thread(
            service.documents().batchUpdate(documentId=document_id, body={"requests": [delete_request]}).execute
        )
        logger.debug(f"Cleared range [{BODY_START_INDEX}, {end_index - 1}) in document {document_id}")

    await _apply_result(service, document_id, result)

    title = document.get("title", document_id)
    return (
        f"Replaced content of '{title}' (ID: {document_id}) with {result.format_type} content. "
        f"Link: {_doc_link(document_id)}"
    )
