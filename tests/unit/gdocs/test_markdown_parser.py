"""
Unit tests for MarkupToDocsConverter.

Tests the Markdown/HTML to Google Docs edit operation conversion without mocking
the Google API.
"""

import pytest

from core.config import MarkupConfig
from core.errors import ValidationError
from gdocs.blocks import BLOCKQUOTE_STYLE
from gdocs.inline import BOLD_STYLE, ITALIC_STYLE, LINK_COLOR
from gdocs.markdown_parser import (
    ConversionResult,
    MarkupToDocsConverter,
    convert_content,
    convert_html,
    convert_markdown,
    convert_plain,
)
from gdocs.operations import InsertText, SetCharacterStyle, SetListMarker, SetParagraphStyle
from gdocs.styles import BulletPreset, CharacterStyle, ParagraphStyle


@pytest.fixture
def converter():
    return MarkupToDocsConverter()


class TestConvertMarkdown:
    def test_heading(self, converter):
        assert converter.convert_markdown("# Title", 0) == [
            InsertText(0, "Title\n"),
            SetParagraphStyle(0, 5, ParagraphStyle(named_style_type="HEADING_1")),
        ]

    def test_bold_in_paragraph(self, converter):
        assert converter.convert_markdown("This is **bold** text", 0) == [
            InsertText(0, "This is bold text\n"),
            SetCharacterStyle(8, 12, BOLD_STYLE),
        ]

    def test_bullet_list(self, converter):
        assert converter.convert_markdown("- item one\n- item two", 0) == [
            InsertText(0, "item one\nitem two\n"),
            SetListMarker(0, 8, BulletPreset.BULLET),
            SetListMarker(9, 17, BulletPreset.BULLET),
        ]

    def test_numbered_list(self, converter):
        operations = converter.convert_markdown("1. first\n2. second", 1)
        assert operations[0] == InsertText(1, "first\nsecond\n")
        assert operations[1:] == [
            SetListMarker(1, 6, BulletPreset.NUMBERED),
            SetListMarker(7, 13, BulletPreset.NUMBERED),
        ]

    def test_blockquote(self, converter):
        assert converter.convert_markdown("> quote", 0) == [
            InsertText(0, "quote\n"),
            SetParagraphStyle(0, 5, BLOCKQUOTE_STYLE),
        ]

    def test_link(self, converter):
        operations = converter.convert_markdown("[x](http://x)", 0)
        assert operations == [
            InsertText(0, "x\n"),
            SetCharacterStyle(0, 1, CharacterStyle(underline=True, foreground_color=LINK_COLOR, link_url="http://x")),
        ]

    def test_mixed_document(self, converter):
        operations = converter.convert_markdown("# Hello World\n\nThis is **bold** text.", 1)
        assert [type(op).__name__ for op in operations] == ["InsertText", "SetParagraphStyle", "SetCharacterStyle"]
        assert operations[0].text == "Hello World\n\nThis is bold text.\n"
        assert operations[2] == SetCharacterStyle(22, 26, BOLD_STYLE)

    def test_every_range_lies_inside_inserted_text(self, converter):
        content = "# *T*\n> `q`\n- [a](http://a) and ~~b~~\n\n3. **c**"
        operations = converter.convert_markdown(content, 7)
        insert = operations[0]
        for operation in operations[1:]:
            assert insert.index <= operation.start < operation.end <= insert.index + len(insert.text)

    def test_offsets_are_utf16_units(self, converter):
        assert converter.convert_markdown("\N{GRINNING FACE} **bold**", 1) == [
            InsertText(1, "\N{GRINNING FACE} bold\n"),
            SetCharacterStyle(4, 8, BOLD_STYLE),
        ]

    def test_empty_heading_and_list_item_emit_no_empty_ranges(self, converter):
        assert converter.convert_markdown("# \n- ", 1) == [InsertText(1, "\n\n")]

    def test_module_level_function(self):
        assert convert_markdown("*i*", 2) == [InsertText(2, "i\n"), SetCharacterStyle(2, 3, ITALIC_STYLE)]


class TestValidation:
    @pytest.mark.parametrize("content", ["", None, 5])
    def test_bad_content(self, converter, content):
        with pytest.raises(ValidationError):
            converter.convert_markdown(content, 0)

    @pytest.mark.parametrize("start_index", [-1, None, "1", 1.5, True])
    def test_bad_start_index(self, converter, start_index):
        with pytest.raises(ValidationError):
            converter.convert_markdown("text", start_index)

    def test_plain_validates_too(self, converter):
        with pytest.raises(ValidationError):
            converter.convert_plain("", 0)

    def test_unknown_format(self, converter):
        with pytest.raises(ValidationError, match="format_type"):
            converter.convert("text", 1, "rtf")


class TestConvertHtml:
    def test_heading(self, converter):
        assert converter.convert_html("<h1>Title</h1>", 1) == [
            InsertText(1, "Title\n"),
            SetParagraphStyle(1, 6, ParagraphStyle(named_style_type="HEADING_1")),
        ]

    def test_paragraph_with_bold(self):
        operations = convert_html("<p>Hi <b>there</b></p>", 0)
        assert operations[0] == InsertText(0, "Hi there\n\n")
        assert operations[1] == SetCharacterStyle(3, 8, BOLD_STYLE)

    def test_html_with_no_text_is_rejected(self, converter):
        with pytest.raises(ValidationError, match="no text"):
            converter.convert_html("<span></span>", 0)


class TestConvertPlain:
    def test_plain_is_inserted_verbatim(self):
        assert convert_plain("a **b**", 3) == [InsertText(3, "a **b**")]


class TestConvert:
    def test_detects_html(self, converter):
        result = converter.convert("<b>x</b>", 1)
        assert isinstance(result, ConversionResult)
        assert result.format_type == "html"
        assert result.operations == [InsertText(1, "x\n"), SetCharacterStyle(1, 2, BOLD_STYLE)]

    def test_detects_plain(self):
        result = convert_content("hello", 1)
        assert result.format_type == "plain"
        assert result.operations == [InsertText(1, "hello")]

    def test_explicit_format_overrides_detection(self, converter):
        result = converter.convert("**x**", 1, " PLAIN ")
        assert result.format_type == "plain"
        assert result.operations == [InsertText(1, "**x**")]

    def test_requests_property(self, converter):
        result = converter.convert("# T", 1)
        assert result.requests == [
            {"insertText": {"location": {"index": 1}, "text": "T\n"}},
            {
                "updateParagraphStyle": {
                    "range": {"startIndex": 1, "endIndex": 2},
                    "paragraphStyle": {"namedStyleType": "HEADING_1"},
                    "fields": "namedStyleType",
                }
            },
        ]


class TestFromConfig:
    def test_code_style_follows_config(self, env_override):
        env_override(GDOCS_MARKUP_CODE_FONT_FAMILY="Roboto Mono", GDOCS_MARKUP_CODE_FONT_SIZE_PT="12")
        converter = MarkupToDocsConverter.from_config(MarkupConfig())
        operations = converter.convert_markdown("`x`", 0)
        style = operations[1].style
        assert style.font_family == "Roboto Mono"
        assert style.font_size.magnitude == 12
