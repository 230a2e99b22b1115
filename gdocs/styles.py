"""
Style variants and style spans for Google Docs batchUpdate requests.

Each style kind is a closed, frozen dataclass with explicit fields instead of an
ad hoc attribute dictionary. The Google Docs API needs a `fields` mask naming
every attribute a request sets; `fields()` derives it from the fields that are
actually populated, so the mask and the payload can't drift apart.

Example:
    >>> style = CharacterStyle(bold=True)
    >>> style.fields()
    ('bold',)
    >>> style.to_api()
    {'bold': True}
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Any


def _api_field(name: str) -> Any:
    """Declare an optional style field together with its API attribute name."""
    return field(default=None, metadata={"api_name": name})


@dataclass(frozen=True)
class Dimension:
    """A magnitude with a unit, e.g. 18 PT."""

    magnitude: float
    unit: str = "PT"

    def to_api(self) -> dict:
        return {"magnitude": self.magnitude, "unit": self.unit}


@dataclass(frozen=True)
class RgbColor:
    """An RGB color with channels in the 0..1 range."""

    red: float = 0.0
    green: float = 0.0
    blue: float = 0.0

    def to_api(self) -> dict:
        return {"color": {"rgbColor": {"red": self.red, "green": self.green, "blue": self.blue}}}


@dataclass(frozen=True)
class ParagraphBorder:
    """A paragraph border (used for the blockquote bar)."""

    color: RgbColor
    width: Dimension
    padding: Dimension
    dash_style: str = "SOLID"

    def to_api(self) -> dict:
        return {
            "color": self.color.to_api(),
            "width": self.width.to_api(),
            "padding": self.padding.to_api(),
            "dashStyle": self.dash_style,
        }


class _StyleVariant:
    """Shared rendering for the style dataclasses below."""

    def fields(self) -> tuple[str, ...]:
        """Return the API names of every populated attribute, in declaration order."""
        return tuple(f.metadata["api_name"] for f in fields(self) if getattr(self, f.name) is not None)

    def fields_mask(self) -> str:
        return ",".join(self.fields())

    def to_api(self) -> dict:
        rendered: dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if value is None:
                continue
            rendered[f.metadata["api_name"]] = self._render_value(f.name, value)
        return rendered

    def _render_value(self, name: str, value: Any) -> Any:
        if hasattr(value, "to_api"):
            return value.to_api()
        return value


@dataclass(frozen=True)
class ParagraphStyle(_StyleVariant):
    """Paragraph-level style: named heading styles and blockquote indentation."""

    named_style_type: str | None = _api_field("namedStyleType")
    indent_first_line: Dimension | None = _api_field("indentFirstLine")
    indent_start: Dimension | None = _api_field("indentStart")
    border_left: ParagraphBorder | None = _api_field("borderLeft")


@dataclass(frozen=True)
class CharacterStyle(_StyleVariant):
    """Character-level style for inline constructs."""

    bold: bool | None = _api_field("bold")
    italic: bool | None = _api_field("italic")
    strikethrough: bool | None = _api_field("strikethrough")
    underline: bool | None = _api_field("underline")
    font_family: str | None = _api_field("weightedFontFamily")
    font_size: Dimension | None = _api_field("fontSize")
    background_color: RgbColor | None = _api_field("backgroundColor")
    foreground_color: RgbColor | None = _api_field("foregroundColor")
    link_url: str | None = _api_field("link")

    def _render_value(self, name: str, value: Any) -> Any:
        if name == "font_family":
            return {"fontFamily": value}
        if name == "link_url":
            return {"url": value}
        return super()._render_value(name, value)


class BulletPreset(str, Enum):
    """Bullet presets understood by createParagraphBullets."""

    BULLET = "BULLET_DISC_CIRCLE_SQUARE"
    NUMBERED = "NUMBERED_DECIMAL_ALPHA_ROMAN"


@dataclass(frozen=True)
class ListMarker:
    """List structure marker; rendered as a createParagraphBullets request."""

    preset: BulletPreset


class SpanKind(str, Enum):
    PARAGRAPH_STYLE = "paragraph_style"
    CHARACTER_STYLE = "character_style"
    LIST_MARKER = "list_marker"


Style = ParagraphStyle | CharacterStyle | ListMarker


@dataclass(frozen=True)
class StyleSpan:
    """
    A half-open offset range plus the style to apply to it.

    Spans are value objects: rebasing returns a new span rather than mutating
    this one.
    """

    start: int
    end: int
    style: Style

    def __post_init__(self) -> None:
        if self.start < 0 or self.end < self.start:
            raise ValueError(f"Invalid span range [{self.start}, {self.end})")

    @property
    def kind(self) -> SpanKind:
        if isinstance(self.style, ParagraphStyle):
            return SpanKind.PARAGRAPH_STYLE
        if isinstance(self.style, ListMarker):
            return SpanKind.LIST_MARKER
        return SpanKind.CHARACTER_STYLE

    @property
    def length(self) -> int:
        return self.end - self.start

    def shifted(self, delta: int) -> StyleSpan:
        return StyleSpan(self.start + delta, self.end + delta, self.style)
