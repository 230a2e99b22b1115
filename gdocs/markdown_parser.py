"""
Markup to Google Docs Converter

This module provides the `MarkupToDocsConverter` class that translates Markdown
or a restricted HTML subset into an ordered list of edit operations for the
Google Docs API `batchUpdate` endpoint: one insertText covering the whole clean
text, followed by updateParagraphStyle / updateTextStyle / createParagraphBullets
requests addressed by absolute character offsets.

Pipeline:
    HTML normalizer (html only) -> block classifier -> inline formatter
    -> offset assembler -> operation emitter

Example:
    >>> operations = convert_markdown("# Hello World\\n\\nThis is **bold** text.", 1)
    >>> [type(op).__name__ for op in operations]
    ['InsertText', 'SetParagraphStyle', 'SetCharacterStyle']

See Also:
    - `gdocs/writing.py` for applying the operations to a live document
    - `gdocs/tools.py` for the MCP tool wrapper
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from core.config import MarkupConfig, get_markup_config
from core.errors import ValidationError
from core.utils import validate_content, validate_format_type, validate_start_index
from gdocs.assembler import DocumentAssembler
from gdocs.blocks import split_blocks
from gdocs.format_detection import FORMAT_HTML, FORMAT_MARKDOWN, FORMAT_PLAIN, detect_format
from gdocs.html_normalizer import html_to_markdown
from gdocs.inline import InlineFormatter, build_code_style
from gdocs.operations import EditOperation, InsertText, emit_operations, to_requests

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConversionResult:
    """Operations produced for one piece of content plus the format used."""

    format_type: str
    operations: list[EditOperation]

    @property
    def requests(self) -> list[dict]:
        return to_requests(self.operations)


class MarkupToDocsConverter:
    """
    Converts Markdown, HTML or plain text into Google Docs edit operations.

    The converter carries only immutable styling configuration; every call builds
    its own local state, so one instance can serve concurrent conversions.

    Attributes:
        assembler: The offset assembler, which owns the inline formatter.

    Example:
        >>> converter = MarkupToDocsConverter()
        >>> ops = converter.convert_markdown("- item one\\n- item two", 0)
        >>> len(ops)  # insertText + one createParagraphBullets per item
        3
    """

    def __init__(self, inline_formatter: InlineFormatter | None = None) -> None:
        self.assembler = DocumentAssembler(inline_formatter)

    @classmethod
    def from_config(cls, config: MarkupConfig | None = None) -> MarkupToDocsConverter:
        """Build a converter whose inline code styling follows the configuration."""
        config = config or get_markup_config()
        code_style = build_code_style(config.code_font_family, config.code_font_size_pt)
        return cls(InlineFormatter(code_style=code_style))

    def convert_markdown(self, content: str, start_index: int) -> list[EditOperation]:
        """
        Convert Markdown into edit operations.

        Args:
            content: The Markdown string to convert. Must be non-empty.
            start_index: Absolute document offset where the content begins.

        Returns:
            One InsertText operation followed by one style operation per span.

        Raises:
            ValidationError: If content is empty/None or start_index is invalid.
        """
        content = validate_content(content)
        start_index = validate_start_index(start_index)

        blocks = split_blocks(content)
        document = self.assembler.assemble(blocks, start_index)
        logger.debug(
            f"Assembled {len(document.text)} chars and {len(document.spans)} span(s), "
            f"range [{document.start_index}, {document.end_index})"
        )
        return emit_operations(document)

    def convert_html(self, content: str, start_index: int) -> list[EditOperation]:
        """Normalize restricted HTML into Markdown, then convert it."""
        content = validate_content(content)
        start_index = validate_start_index(start_index)
        markdown = html_to_markdown(content)
        if not markdown:
            raise ValidationError("content has no text left after stripping HTML tags")
        return self.convert_markdown(markdown, start_index)

    def convert_plain(self, content: str, start_index: int) -> list[EditOperation]:
        """Insert plain text verbatim with no styling."""
        content = validate_content(content)
        start_index = validate_start_index(start_index)
        return [InsertText(start_index, content)]

    def convert(self, content: str, start_index: int, format_type: str | None = None) -> ConversionResult:
        """
        Convert content in an explicit or auto-detected format.

        Args:
            content: Markdown, HTML or plain text.
            start_index: Absolute document offset where the content begins.
            format_type: "markdown", "html" or "plain"; None to auto-detect.
        """
        content = validate_content(content)
        format_type = validate_format_type(format_type) or detect_format(content)

        if format_type == FORMAT_MARKDOWN:
            operations = self.convert_markdown(content, start_index)
        elif format_type == FORMAT_HTML:
            operations = self.convert_html(content, start_index)
        else:
            operations = self.convert_plain(content, start_index)

        logger.info(f"Converted {len(content)} chars of {format_type} into {len(operations)} operation(s)")
        return ConversionResult(format_type=format_type, operations=operations)


_default_converter = MarkupToDocsConverter()


def convert_markdown(content: str, start_index: int) -> list[EditOperation]:
    return _default_converter.convert_markdown(content, start_index)


def convert_html(content: str, start_index: int) -> list[EditOperation]:
    return _default_converter.convert_html(content, start_index)


def convert_plain(content: str, start_index: int) -> list[EditOperation]:
    return _default_converter.convert_plain(content, start_index)


def convert_content(content: str, start_index: int, format_type: str | None = None) -> ConversionResult:
    return _default_converter.convert(content, start_index, format_type)


__all__ = [
    "ConversionResult",
    "FORMAT_HTML",
    "FORMAT_MARKDOWN",
    "FORMAT_PLAIN",
    "MarkupToDocsConverter",
    "convert_content",
    "convert_html",
    "convert_markdown",
    "convert_plain",
]
