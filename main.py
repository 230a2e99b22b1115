"""Entry point: run the gdocs-markup MCP server over stdio."""

import logging

from core.config import get_markup_config
from core.server import server

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def main() -> None:
    config = get_markup_config()
    configure_logging(config.log_level)

    # Importing the tool module registers its tools on the shared server
    import gdocs.tools  # noqa: F401

    logger.info(f"Starting MCP server '{config.server_name}' (stdio)")
    server.run()


if __name__ == "__main__":
    main()
