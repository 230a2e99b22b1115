"""Content format auto-detection for the document writer and tool layer."""

import logging
import re

logger = logging.getLogger(__name__)

FORMAT_MARKDOWN = "markdown"
FORMAT_HTML = "html"
FORMAT_PLAIN = "plain"

TAG_PATTERN = re.compile(r"<[^<>]+>")
HEADING_LINE_PATTERN = re.compile(r"^#", re.MULTILINE)
MARKDOWN_TOKENS = ("**", "*", "`")


def detect_format(content: str) -> str:
    """
    Guess the markup format of `content`.

    A `<...>` pair means HTML; otherwise `**`, `*`, a backtick or a line starting
    with `#` means Markdown; anything else is plain text.
    """
    if TAG_PATTERN.search(content):
        detected = FORMAT_HTML
    elif any(token in content for token in MARKDOWN_TOKENS) or HEADING_LINE_PATTERN.search(content):
        detected = FORMAT_MARKDOWN
    else:
        detected = FORMAT_PLAIN

    logger.debug(f"Detected content format: {detected}")
    return detected
