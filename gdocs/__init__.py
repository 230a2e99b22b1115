"""
Google Docs Markup Package

This package converts Markdown and HTML into Google Docs API batchUpdate
requests and applies them to documents.
"""

from gdocs.format_detection import detect_format
from gdocs.html_normalizer import html_to_markdown
from gdocs.markdown_parser import (
    ConversionResult,
    MarkupToDocsConverter,
    convert_content,
    convert_html,
    convert_markdown,
    convert_plain,
)
from gdocs.operations import (
    InsertText,
    SetCharacterStyle,
    SetListMarker,
    SetParagraphStyle,
    emit_operations,
    to_requests,
)
from gdocs.tools import convert_markup_to_requests
from gdocs.writing import create_formatted_doc, insert_formatted_content, replace_doc_content

__all__ = [
    "ConversionResult",
    "MarkupToDocsConverter",
    "convert_content",
    "convert_markdown",
    "convert_html",
    "convert_plain",
    "detect_format",
    "html_to_markdown",
    "emit_operations",
    "to_requests",
    "InsertText",
    "SetParagraphStyle",
    "SetCharacterStyle",
    "SetListMarker",
    "convert_markup_to_requests",
    "create_formatted_doc",
    "insert_formatted_content",
    "replace_doc_content",
]
