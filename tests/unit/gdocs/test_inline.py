"""
Unit tests for the inline formatter.

Offsets are checked against the fully stripped text of the line; every span
must point at exactly the characters that were between its markers.
"""

import pytest

from gdocs.inline import (
    BOLD_STYLE,
    ITALIC_STYLE,
    LINK_COLOR,
    STRIKETHROUGH_STYLE,
    InlineFormatter,
    build_code_style,
    format_inline,
    utf16_len,
)


def _ranges(result):
    return [(span.start, span.end) for span in result.spans]


def _covered(result, index):
    span = result.spans[index]
    return result.text[span.start : span.end]


class TestSingleConstructs:
    def test_plain_text_is_untouched(self):
        result = format_inline("hello world")
        assert result.text == "hello world"
        assert result.spans == []

    def test_bold(self):
        result = format_inline("a **bold** word")
        assert result.text == "a bold word"
        assert _ranges(result) == [(2, 6)]
        assert result.spans[0].style == BOLD_STYLE

    def test_italic(self):
        result = format_inline("an *italic* word")
        assert result.text == "an italic word"
        assert _ranges(result) == [(3, 9)]
        assert result.spans[0].style == ITALIC_STYLE

    def test_strikethrough(self):
        result = format_inline("~~gone~~ text")
        assert result.text == "gone text"
        assert _ranges(result) == [(0, 4)]
        assert result.spans[0].style == STRIKETHROUGH_STYLE

    def test_inline_code(self):
        result = format_inline("use `code` here")
        assert result.text == "use code here"
        assert _ranges(result) == [(4, 8)]
        style = result.spans[0].style
        assert style.font_family == "Courier New"
        assert style.font_size.magnitude == 10

    def test_link(self):
        result = format_inline("[click](http://x)")
        assert result.text == "click"
        assert _ranges(result) == [(0, 5)]
        style = result.spans[0].style
        assert style.link_url == "http://x"
        assert style.underline is True
        assert style.foreground_color == LINK_COLOR


class TestCombinations:
    def test_bold_and_italic(self):
        result = format_inline("**bold** and *italic*")
        assert result.text == "bold and italic"
        assert _ranges(result) == [(0, 4), (9, 15)]
        assert [s.style for s in result.spans] == [BOLD_STYLE, ITALIC_STYLE]

    def test_bold_markers_are_not_italic(self):
        result = format_inline("**only bold**")
        assert [s.style for s in result.spans] == [BOLD_STYLE]

    def test_adjacent_constructs_of_different_kinds(self):
        result = format_inline("**a**`b`~~c~~[d](u)")
        assert result.text == "abcd"
        # discovery order: bold, strikethrough, code, link
        assert _ranges(result) == [(0, 1), (2, 3), (1, 2), (3, 4)]
        assert [_covered(result, i) for i in range(4)] == ["a", "c", "b", "d"]

    def test_link_inside_bold(self):
        result = format_inline("**see [docs](http://d)**")
        assert result.text == "see docs"
        assert _ranges(result) == [(0, 8), (4, 8)]
        assert result.spans[1].style.link_url == "http://d"

    def test_italic_inside_bold(self):
        result = format_inline("**a *b* c**")
        assert result.text == "a b c"
        assert _ranges(result) == [(0, 5), (2, 3)]

    def test_straddling_later_construct_is_rejected(self):
        result = format_inline("**a `b** c`")
        assert result.text == "a `b c`"
        assert _ranges(result) == [(0, 4)]
        assert result.spans[0].style == BOLD_STYLE

    def test_repeated_constructs(self):
        result = format_inline("**x** and **y**")
        assert result.text == "x and y"
        assert _ranges(result) == [(0, 1), (6, 7)]

    def test_every_span_covers_its_content(self):
        result = format_inline("Mix **bold**, *it*, ~~st~~, `cd` and [ln](http://l) end")
        assert result.text == "Mix bold, it, st, cd and ln end"
        assert [_covered(result, i) for i in range(len(result.spans))] == ["bold", "it", "st", "cd", "ln"]


class TestMalformedMarkers:
    @pytest.mark.parametrize(
        "text",
        ["*oops", "**oops", "oops*", "~~oops", "`oops", "[oops](http://x", "[oops]", "****", "a * b"],
    )
    def test_unterminated_markers_stay_literal(self, text):
        result = format_inline(text)
        assert result.text == text
        assert result.spans == []


class TestBasePosition:
    def test_spans_are_shifted_by_base_pos(self):
        result = format_inline("**bold** and *italic*", base_pos=10)
        assert result.text == "bold and italic"
        assert _ranges(result) == [(10, 14), (19, 25)]


class TestLinkTargets:
    def test_unsafe_link_keeps_styling_without_target(self):
        result = format_inline("[x](javascript:void)")
        assert result.text == "x"
        style = result.spans[0].style
        assert style.link_url is None
        assert style.underline is True

    def test_link_target_is_normalized(self):
        result = format_inline("[x](http://example.com/a b)")
        assert result.spans[0].style.link_url == "http://example.com/a%20b"

    def test_link_target_whitespace_is_trimmed(self):
        result = format_inline("[x]( http://x )")
        assert result.spans[0].style.link_url == "http://x"


class TestBoldItalic:
    def test_triple_star_is_bold_around_italic(self):
        result = format_inline("***x***")
        assert result.text == "x"
        assert [(s.start, s.end, s.style) for s in result.spans] == [(0, 1, BOLD_STYLE), (0, 1, ITALIC_STYLE)]

    def test_triple_star_next_to_bold(self):
        result = format_inline("***a*** and **b**")
        assert result.text == "a and b"
        assert [(s.start, s.end) for s in result.spans] == [(0, 1), (0, 1), (6, 7)]


class TestUtf16Offsets:
    def test_emoji_counts_as_two_units(self):
        result = format_inline("\N{GRINNING FACE} **bold**")
        assert result.text == "\N{GRINNING FACE} bold"
        assert [(s.start, s.end) for s in result.spans] == [(3, 7)]

    def test_emoji_inside_construct(self):
        result = format_inline("**\N{GRINNING FACE}** x *y*")
        assert [(s.start, s.end) for s in result.spans] == [(0, 2), (5, 6)]

    def test_bmp_characters_count_as_one(self):
        result = format_inline("caf\N{LATIN SMALL LETTER E WITH ACUTE} *x*")
        assert [(s.start, s.end) for s in result.spans] == [(5, 6)]

    def test_utf16_len(self):
        assert utf16_len("abc") == 3
        assert utf16_len("\N{GRINNING FACE}") == 2
        assert utf16_len("") == 0


class TestIdempotence:
    @pytest.mark.parametrize(
        "text",
        [
            "**bold** and *italic*",
            "use `code` and [a link](http://x)",
            "~~old~~ new",
            "*oops",
            "nothing to strip",
            "***x***",
            "a ***b*** c",
        ],
    )
    def test_formatting_clean_text_changes_nothing(self, text):
        clean = format_inline(text).text
        again = format_inline(clean)
        assert again.text == clean
        assert again.spans == []


class TestConfiguredFormatter:
    def test_custom_code_style(self):
        formatter = InlineFormatter(code_style=build_code_style("Consolas", 9))
        result = formatter.format("`x`")
        assert result.spans[0].style.font_family == "Consolas"
        assert result.spans[0].style.font_size.magnitude == 9

    def test_locate_reports_original_positions(self):
        matches = InlineFormatter().locate("a **b**")
        assert [(m.start, m.end, m.content_start, m.content_end) for m in matches] == [(2, 7, 4, 5)]
