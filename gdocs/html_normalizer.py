"""
HTML to Markdown normalizer.

Rewrites a fixed subset of HTML elements into the Markdown surface syntax the
line-oriented converter understands, then strips every remaining tag and decodes
character references. This is a tag-soup-tolerant approximation, not an HTML
parser: nested tags of the same kind and attributes other than `href` are not
guaranteed to survive.
"""

import html
import logging
import re

logger = logging.getLogger(__name__)

_FLAGS = re.IGNORECASE | re.DOTALL

# (pattern, replacement) pairs, applied in order
HTML_TO_MARKDOWN_RULES: list[tuple[re.Pattern, str]] = [
    *(
        (re.compile(rf"<h{level}[^>]*>(.*?)</h{level}>", _FLAGS), "#" * level + r" \1")
        for level in range(1, 7)
    ),
    (re.compile(r"<strong[^>]*>(.*?)</strong>", _FLAGS), r"**\1**"),
    (re.compile(r"<b(?:\s[^>]*)?>(.*?)</b>", _FLAGS), r"**\1**"),
    (re.compile(r"<em[^>]*>(.*?)</em>", _FLAGS), r"*\1*"),
    (re.compile(r"<i(?:\s[^>]*)?>(.*?)</i>", _FLAGS), r"*\1*"),
    (re.compile(r"<code[^>]*>(.*?)</code>", _FLAGS), r"`\1`"),
    (re.compile(r"<a\s[^>]*href=\"([^\"]*)\"[^>]*>(.*?)</a>", _FLAGS), r"[\2](\1)"),
    (re.compile(r"<p(?:\s[^>]*)?>(.*?)</p>", _FLAGS), "\\1\n"),
    (re.compile(r"<br\s*/?>", re.IGNORECASE), "\n"),
    (re.compile(r"<hr\s*/?>", re.IGNORECASE), "---"),
    (re.compile(r"</?[uo]l(?:\s[^>]*)?>", re.IGNORECASE), ""),
    (re.compile(r"<li(?:\s[^>]*)?>(.*?)</li>", _FLAGS), r"- \1"),
    (re.compile(r"<blockquote[^>]*>(.*?)</blockquote>", _FLAGS), r"> \1"),
]

REMAINING_TAG_PATTERN = re.compile(r"<[^>]*>")


def html_to_markdown(content: str) -> str:
    """
    Convert restricted HTML into equivalent Markdown.

    Args:
        content: HTML source text.

    Returns:
        Markdown text with all remaining tags removed and entities decoded.
    """
    markdown = content
    for pattern, replacement in HTML_TO_MARKDOWN_RULES:
        markdown = pattern.sub(replacement, markdown)

    markdown = REMAINING_TAG_PATTERN.sub("", markdown)
    markdown = html.unescape(markdown)
    logger.debug(f"Normalized {len(content)} chars of HTML into {len(markdown)} chars of Markdown")
    return markdown
