"""
Offset tracking and assembly of classified blocks into one clean text stream.

The assembler is the only place where line-local offsets become absolute
document offsets. It walks the blocks in order with a running offset that
starts at the caller's insertion index:

    line_start = running
    block span  -> [line_start, line_start + utf16_len(clean_text))
    inline span -> [line_start + local_start, line_start + local_end)
    running    += utf16_len(clean_text) + 1   # the line separator

Blank lines contribute a bare separator and advance the running offset by one.
All offsets are UTF-16 code units, matching Google Docs indexing.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from core.errors import OffsetInvariantError
from gdocs.blocks import Block
from gdocs.inline import InlineFormatter, utf16_len
from gdocs.styles import StyleSpan

logger = logging.getLogger(__name__)

LINE_SEPARATOR = "\n"


@dataclass(frozen=True)
class AssembledDocument:
    """Clean text plus absolute style spans, ready for the operation emitter."""

    text: str
    spans: list[StyleSpan]
    start_index: int
    end_index: int


class DocumentAssembler:
    """Concatenates block text and rebases every span to absolute offsets."""

    def __init__(self, inline_formatter: InlineFormatter | None = None) -> None:
        self.inline_formatter = inline_formatter or InlineFormatter()

    def assemble(self, blocks: list[Block | None], start_index: int) -> AssembledDocument:
        parts: list[str] = []
        spans: list[StyleSpan] = []
        running = start_index

        for block in blocks:
            if block is None:
                parts.append(LINE_SEPARATOR)
                running += 1
                continue

            inline = self.inline_formatter.format(block.raw_text)
            block.clean_text = inline.text
            block.line_start = running
            line_end = running + utf16_len(inline.text)

            block_style = block.block_style()
            if block_style is not None and line_end > running:
                spans.append(StyleSpan(running, line_end, block_style))
            elif block_style is not None:
                # The Docs API rejects empty ranges, so "# " or "- " stays an unstyled line
                logger.debug(f"Skipping {block.kind.value} style for empty line at {running}")
            spans.extend(span.shifted(running) for span in inline.spans)

            logger.debug(
                f"Block {block.kind.value}: range [{running}, {line_end}), {len(inline.spans)} inline span(s)"
            )

            parts.append(inline.text)
            parts.append(LINE_SEPARATOR)
            running = line_end + 1

        text = "".join(parts)
        self._check_offsets(text, spans, start_index, running)
        return AssembledDocument(text=text, spans=spans, start_index=start_index, end_index=running)

    @staticmethod
    def _check_offsets(text: str, spans: list[StyleSpan], start_index: int, end_index: int) -> None:
        """Re-measure the joined text and every span against the running offset."""
        text_length = utf16_len(text)
        if end_index != start_index + text_length:
            raise OffsetInvariantError(start_index=start_index, end_index=end_index, text_length=text_length)

        for span in spans:
            # A span may end at a separator but never cover one
            if span.start < start_index or span.end >= end_index:
                raise OffsetInvariantError(
                    start_index=start_index,
                    end_index=end_index,
                    text_length=text_length,
                    message=f"Span [{span.start}, {span.end}) falls outside [{start_index}, {end_index - 1}]",
                )


def assemble_blocks(blocks: list[Block | None], start_index: int) -> AssembledDocument:
    """Assemble blocks with the default inline styling."""
    return DocumentAssembler().assemble(blocks, start_index)
