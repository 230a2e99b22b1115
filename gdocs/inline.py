"""
Inline Markdown formatting: bold, italic, strikethrough, inline code and links.

The formatter works in two explicit phases per line:

1. **Locate**: every construct class is matched against the *original* line
   text, one pass per class in precedence order. A match from a later class is
   only accepted when it is well-nested with every match accepted so far
   (disjoint, inside its content, or enclosing it within its own content), so
   earlier classes win wherever syntax would overlap. `***x***` is taken as
   bold around italic.
2. **Strip**: the marker characters of all accepted matches are removed. An
   original position `p` maps to the clean position `p - (markers before p)`,
   which gives every span its offsets in the fully stripped text. Offsets are
   then measured in UTF-16 code units, so a character outside the BMP (an
   emoji, say) counts as two.

Example:
    >>> result = format_inline("**bold** and *italic*")
    >>> result.text
    'bold and italic'
    >>> [(s.start, s.end) for s in result.spans]
    [(0, 4), (9, 15)]
"""

from __future__ import annotations

import logging
import re
from bisect import bisect_left
from dataclasses import dataclass

from markdown_it import MarkdownIt

from core.config import DEFAULT_CODE_FONT_FAMILY, DEFAULT_CODE_FONT_SIZE_PT
from gdocs.styles import CharacterStyle, Dimension, RgbColor, StyleSpan

logger = logging.getLogger(__name__)

BOLD_ITALIC_PATTERN = re.compile(r"\*\*\*([^*]+?)\*\*\*")
BOLD_PATTERN = re.compile(r"\*\*(.+?)\*\*")
ITALIC_PATTERN = re.compile(r"(?<!\*)\*(?!\*)([^*]+?)\*(?!\*)")
STRIKETHROUGH_PATTERN = re.compile(r"~~(.+?)~~")
CODE_PATTERN = re.compile(r"`([^`]+?)`")
LINK_PATTERN = re.compile(r"\[([^\]]+?)\]\(([^)]+?)\)")

# Inline code styling constants
CODE_BACKGROUND_COLOR = RgbColor(red=0.95, green=0.95, blue=0.95)

# Link styling constants
LINK_COLOR = RgbColor(red=0.0, green=0.0, blue=1.0)

BOLD_STYLE = CharacterStyle(bold=True)
ITALIC_STYLE = CharacterStyle(italic=True)
STRIKETHROUGH_STYLE = CharacterStyle(strikethrough=True)


def utf16_len(text: str) -> int:
    """Length of `text` in UTF-16 code units, the unit Google Docs indexes by."""
    return len(text.encode("utf-16-le")) // 2


def build_code_style(font_family: str = DEFAULT_CODE_FONT_FAMILY, font_size_pt: float = DEFAULT_CODE_FONT_SIZE_PT):
    return CharacterStyle(
        font_family=font_family,
        font_size=Dimension(font_size_pt),
        background_color=CODE_BACKGROUND_COLOR,
    )


@dataclass(frozen=True)
class InlineMatch:
    """A located construct: full match range plus the range of its visible content."""

    start: int
    end: int
    content_start: int
    content_end: int
    style: CharacterStyle

    def marker_positions(self) -> list[int]:
        return list(range(self.start, self.content_start)) + list(range(self.content_end, self.end))

    def nests_with(self, other: InlineMatch) -> bool:
        if self.end <= other.start or other.end <= self.start:
            return True
        if other.content_start <= self.start and self.end <= other.content_end:
            return True
        return self.content_start <= other.start and other.end <= self.content_end


@dataclass(frozen=True)
class InlineResult:
    """Clean text of one line plus its character style spans."""

    text: str
    spans: list[StyleSpan]


class InlineFormatter:
    """
    Strips inline Markdown constructs from one line of text.

    Instances hold only immutable styling, so one formatter can be shared by
    concurrent conversions.
    """

    def __init__(self, code_style: CharacterStyle | None = None) -> None:
        self.code_style = code_style or build_code_style()
        self._link_validator = MarkdownIt("commonmark")

    def format(self, text: str, base_pos: int = 0) -> InlineResult:
        """
        Strip inline markers from `text` and return spans shifted by `base_pos`.

        Malformed or unterminated markers are left as literal characters.
        """
        matches = self.locate(text)
        if not matches:
            return InlineResult(text, [])

        removed = sorted(pos for match in matches for pos in match.marker_positions())
        removed_set = set(removed)
        clean_text = "".join(ch for i, ch in enumerate(text) if i not in removed_set)

        # UTF-16 offset of every clean character, plus the end of the line
        clean_offsets = [0]
        for ch in clean_text:
            clean_offsets.append(clean_offsets[-1] + utf16_len(ch))

        def to_clean(pos: int) -> int:
            return clean_offsets[pos - bisect_left(removed, pos)]

        spans = [
            StyleSpan(base_pos + to_clean(match.content_start), base_pos + to_clean(match.content_end), match.style)
            for match in matches
        ]
        logger.debug(f"Inline: {len(matches)} construct(s), {len(removed)} marker char(s) stripped from {text!r}")
        return InlineResult(clean_text, spans)

    def locate(self, text: str) -> list[InlineMatch]:
        """Find all accepted construct matches in discovery order."""
        accepted: list[InlineMatch] = []
        for candidate in self._candidates(text):
            if all(candidate.nests_with(other) for other in accepted):
                accepted.append(candidate)
            else:
                logger.debug(f"Rejected overlapping construct at [{candidate.start}, {candidate.end})")
        return accepted

    def _candidates(self, text: str):
        # ***x*** is bold around italic
        for m in BOLD_ITALIC_PATTERN.finditer(text):
            yield InlineMatch(m.start(), m.end(), m.start() + 2, m.end() - 2, BOLD_STYLE)
            yield InlineMatch(m.start() + 2, m.end() - 2, m.start(1), m.end(1), ITALIC_STYLE)

        for pattern, style in (
            (BOLD_PATTERN, BOLD_STYLE),
            (ITALIC_PATTERN, ITALIC_STYLE),
            (STRIKETHROUGH_PATTERN, STRIKETHROUGH_STYLE),
            (CODE_PATTERN, self.code_style),
        ):
            for m in pattern.finditer(text):
                yield InlineMatch(m.start(), m.end(), m.start(1), m.end(1), style)

        for m in LINK_PATTERN.finditer(text):
            yield InlineMatch(m.start(), m.end(), m.start(1), m.end(1), self._link_style(m.group(2)))

    def _link_style(self, url: str) -> CharacterStyle:
        url = url.strip()
        if not self._link_validator.validateLink(url):
            logger.warning(f"Dropping unsafe link target {url!r}; keeping link text styling only")
            return CharacterStyle(underline=True, foreground_color=LINK_COLOR)
        return CharacterStyle(
            underline=True,
            foreground_color=LINK_COLOR,
            link_url=self._link_validator.normalizeLink(url),
        )


_default_formatter = InlineFormatter()


def format_inline(text: str, base_pos: int = 0) -> InlineResult:
    """Format one line with the default inline styling."""
    return _default_formatter.format(text, base_pos)
