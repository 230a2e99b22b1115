"""
Google Docs Markup MCP Tools

Exposes the converter as an MCP tool. The tool only builds requests; applying
them to a document is left to the caller (see `gdocs/writing.py`).
"""

import json
import logging

from core.config import get_markup_config
from core.server import server
from gdocs.markdown_parser import MarkupToDocsConverter

logger = logging.getLogger(__name__)


@server.tool()
def convert_markup_to_requests(
    content: str,
    start_index: int | None = None,
    format_type: str | None = None,
) -> str:
    """
    Converts Markdown, HTML or plain text into Google Docs batchUpdate requests.

    Supported markdown: # headers, **bold**, *italic*, ~~strikethrough~~, `code`,
    [links](url), > quotes, - bullets, 1. numbers.

    Args:
        content: The content to convert.
        start_index: Document index where the content will be inserted
                     (defaults to the configured start index, normally 1).
        format_type: "markdown", "html" or "plain" (defaults to auto-detect).

    Returns:
        str: JSON object with the detected format and the `requests` list.
    """
    config = get_markup_config()
    if start_index is None:
        start_index = config.default_start_index
    logger.info(f"[convert_markup_to_requests] chars={len(content or '')}, start={start_index}, format={format_type}")

    result = MarkupToDocsConverter.from_config(config).convert(content, start_index, format_type)
    return json.dumps({"format": result.format_type, "requests": result.requests}, indent=2)
