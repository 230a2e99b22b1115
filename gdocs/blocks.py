"""
Block classification for line-oriented Markdown.

Every non-blank source line becomes exactly one `Block`. The block-level marker
(`# `, `1. `, `- `, `> `) is stripped; the residual text is handed to the inline
formatter untouched. Blank lines are represented as `None` and become a bare
line separator in the assembled document.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum

from gdocs.styles import BulletPreset, Dimension, ListMarker, ParagraphBorder, ParagraphStyle, RgbColor

logger = logging.getLogger(__name__)

MAX_HEADING_LEVEL = 6

# Named style mappings for headings (1 -> HEADING_1, etc.)
HEADING_STYLE_MAP: dict[int, str] = {level: f"HEADING_{level}" for level in range(1, MAX_HEADING_LEVEL + 1)}

ORDERED_LIST_PATTERN = re.compile(r"^(\d+)\.\s")
UNORDERED_LIST_PATTERN = re.compile(r"^[-*+]\s")
BLOCKQUOTE_MARKER = "> "

# Blockquote styling constants
BLOCKQUOTE_INDENT_PT = 18
BLOCKQUOTE_BORDER_WIDTH_PT = 3.0
BLOCKQUOTE_BORDER_PADDING_PT = 12.0
BLOCKQUOTE_BORDER_COLOR = RgbColor(red=0.8, green=0.8, blue=0.8)

BLOCKQUOTE_STYLE = ParagraphStyle(
    indent_first_line=Dimension(BLOCKQUOTE_INDENT_PT),
    indent_start=Dimension(BLOCKQUOTE_INDENT_PT),
    border_left=ParagraphBorder(
        color=BLOCKQUOTE_BORDER_COLOR,
        width=Dimension(BLOCKQUOTE_BORDER_WIDTH_PT),
        padding=Dimension(BLOCKQUOTE_BORDER_PADDING_PT),
    ),
)


class BlockKind(str, Enum):
    HEADING = "heading"
    ORDERED_LIST_ITEM = "ordered_list_item"
    UNORDERED_LIST_ITEM = "unordered_list_item"
    BLOCKQUOTE = "blockquote"
    PARAGRAPH = "paragraph"


@dataclass
class Block:
    """
    One classified source line.

    `clean_text` and `line_start` are filled in by the assembler once the
    inline markers have been stripped and the line's document offset is known.
    """

    kind: BlockKind
    raw_text: str
    heading_level: int | None = None
    clean_text: str | None = None
    line_start: int | None = None

    def block_style(self) -> ParagraphStyle | ListMarker | None:
        """Return the paragraph- or list-level style this block kind carries, if any."""
        if self.kind is BlockKind.HEADING:
            return ParagraphStyle(named_style_type=HEADING_STYLE_MAP[self.heading_level])
        if self.kind is BlockKind.BLOCKQUOTE:
            return BLOCKQUOTE_STYLE
        if self.kind is BlockKind.ORDERED_LIST_ITEM:
            return ListMarker(BulletPreset.NUMBERED)
        if self.kind is BlockKind.UNORDERED_LIST_ITEM:
            return ListMarker(BulletPreset.BULLET)
        return None


def classify_line(line: str) -> Block | None:
    """
    Classify a single source line.

    Markers are tested in priority order: headings (level 1 first), ordered list,
    unordered list, blockquote, then paragraph. Only the matched prefix is
    stripped.

    Returns:
        The classified Block, or None for a blank line.
    """
    if line.strip() == "":
        return None

    for level in range(1, MAX_HEADING_LEVEL + 1):
        marker = "#" * level + " "
        if line.startswith(marker):
            return Block(BlockKind.HEADING, line[len(marker) :], heading_level=level)

    match = ORDERED_LIST_PATTERN.match(line)
    if match:
        return Block(BlockKind.ORDERED_LIST_ITEM, line[match.end() :])

    match = UNORDERED_LIST_PATTERN.match(line)
    if match:
        return Block(BlockKind.UNORDERED_LIST_ITEM, line[match.end() :])

    if line.startswith(BLOCKQUOTE_MARKER):
        return Block(BlockKind.BLOCKQUOTE, line[len(BLOCKQUOTE_MARKER) :])

    return Block(BlockKind.PARAGRAPH, line)


def split_blocks(content: str) -> list[Block | None]:
    """Split content on line separators and classify every line (None = blank line)."""
    lines = content.replace("\r\n", "\n").split("\n")
    blocks = [classify_line(line) for line in lines]
    logger.debug(f"Classified {len(lines)} line(s): {sum(1 for b in blocks if b is not None)} block(s)")
    return blocks
