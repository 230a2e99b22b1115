"""FastMCP server instance shared by the tool modules."""

import logging

from fastmcp import FastMCP

from core.config import get_markup_config

logger = logging.getLogger(__name__)

server = FastMCP(name=get_markup_config().server_name)
