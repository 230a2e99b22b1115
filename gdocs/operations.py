"""
Edit operations and the operation emitter.

An assembled document becomes exactly one InsertText operation covering the
whole clean text, followed by one style operation per span in the order the
spans were discovered. Spans are never merged: when two spans of the same kind
overlap, both operations are emitted and the later one wins at the consumer.

Each operation renders itself to a Google Docs `batchUpdate` request dict.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from gdocs.assembler import AssembledDocument
from gdocs.styles import BulletPreset, CharacterStyle, ListMarker, ParagraphStyle, StyleSpan

logger = logging.getLogger(__name__)


def _range(start: int, end: int) -> dict:
    return {"startIndex": start, "endIndex": end}


@dataclass(frozen=True)
class InsertText:
    index: int
    text: str

    def to_request(self) -> dict:
        return {"insertText": {"location": {"index": self.index}, "text": self.text}}


@dataclass(frozen=True)
class SetParagraphStyle:
    start: int
    end: int
    style: ParagraphStyle

    def to_request(self) -> dict:
        return {
            "updateParagraphStyle": {
                "range": _range(self.start, self.end),
                "paragraphStyle": self.style.to_api(),
                "fields": self.style.fields_mask(),
            }
        }


@dataclass(frozen=True)
class SetCharacterStyle:
    start: int
    end: int
    style: CharacterStyle

    def to_request(self) -> dict:
        return {
            "updateTextStyle": {
                "range": _range(self.start, self.end),
                "textStyle": self.style.to_api(),
                "fields": self.style.fields_mask(),
            }
        }


@dataclass(frozen=True)
class SetListMarker:
    start: int
    end: int
    preset: BulletPreset

    def to_request(self) -> dict:
        return {
            "createParagraphBullets": {
                "range": _range(self.start, self.end),
                "bulletPreset": self.preset.value,
            }
        }


EditOperation = InsertText | SetParagraphStyle | SetCharacterStyle | SetListMarker


def operation_for_span(span: StyleSpan) -> SetParagraphStyle | SetCharacterStyle | SetListMarker:
    """Map a span to the style operation of its kind."""
    if isinstance(span.style, ParagraphStyle):
        return SetParagraphStyle(span.start, span.end, span.style)
    if isinstance(span.style, ListMarker):
        return SetListMarker(span.start, span.end, span.style.preset)
    return SetCharacterStyle(span.start, span.end, span.style)


def emit_operations(document: AssembledDocument) -> list[EditOperation]:
    """Emit one InsertText followed by one style operation per span, in discovery order."""
    operations: list[EditOperation] = [InsertText(document.start_index, document.text)]
    operations.extend(operation_for_span(span) for span in document.spans)
    logger.debug(
        f"Emitted {len(operations)} operation(s): insert {len(document.text)} chars at {document.start_index}, "
        f"{len(document.spans)} style operation(s)"
    )
    return operations


def to_requests(operations: list[EditOperation]) -> list[dict]:
    """Render operations as a Google Docs batchUpdate `requests` list."""
    return [operation.to_request() for operation in operations]
