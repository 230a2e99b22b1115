"""
Configuration Management for gdocs-markup.

Reads converter and server settings from environment variables and provides a
single source of truth for them. Follows a get/reload singleton pattern so tests
can change the environment and pick up new values.
"""

import logging
import os

DEFAULT_SERVER_NAME = "gdocs-markup"
DEFAULT_START_INDEX = 1
DEFAULT_CODE_FONT_FAMILY = "Courier New"
DEFAULT_CODE_FONT_SIZE_PT = 10


def _int_from_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be an integer, got '{raw}'") from e


class MarkupConfig:
    """
    Centralized converter configuration.

    Attributes:
        log_level: Root logging level name used by the server entry point.
        default_start_index: Insertion index used when a caller doesn't supply one
            (1 is the start of a Google Docs body).
        code_font_family: Monospace font applied to inline code.
        code_font_size_pt: Font size applied to inline code, in points.
        server_name: Name the MCP server announces to clients.
    """

    def __init__(self):
        self.log_level = os.getenv("GDOCS_MARKUP_LOG_LEVEL", "INFO").upper()
        if logging.getLevelName(self.log_level) == f"Level {self.log_level}":
            raise ValueError(f"GDOCS_MARKUP_LOG_LEVEL is not a logging level: '{self.log_level}'")

        self.default_start_index = _int_from_env("GDOCS_MARKUP_DEFAULT_START_INDEX", DEFAULT_START_INDEX)
        if self.default_start_index < 0:
            raise ValueError("GDOCS_MARKUP_DEFAULT_START_INDEX must be non-negative")

        self.code_font_family = os.getenv("GDOCS_MARKUP_CODE_FONT_FAMILY", DEFAULT_CODE_FONT_FAMILY)
        self.code_font_size_pt = _int_from_env("GDOCS_MARKUP_CODE_FONT_SIZE_PT", DEFAULT_CODE_FONT_SIZE_PT)
        if self.code_font_size_pt <= 0:
            raise ValueError("GDOCS_MARKUP_CODE_FONT_SIZE_PT must be positive")

        self.server_name = os.getenv("GDOCS_MARKUP_SERVER_NAME", DEFAULT_SERVER_NAME)


# Global configuration instance
_markup_config: MarkupConfig | None = None


def get_markup_config() -> MarkupConfig:
    """
    Get the global configuration instance.

    Returns:
        The singleton configuration instance
    """
    global _markup_config
    if _markup_config is None:
        _markup_config = MarkupConfig()
    return _markup_config


def reload_markup_config() -> MarkupConfig:
    """
    Reload the configuration from environment variables.

    This is useful for testing or when environment variables change.

    Returns:
        The reloaded configuration instance
    """
    global _markup_config
    _markup_config = MarkupConfig()
    return _markup_config
