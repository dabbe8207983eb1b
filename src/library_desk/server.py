"""Library Desk MCP Server

Exposes one catalog over the Model Context Protocol:
- Tools change the catalog (register, issue, return)
- Resources read it (listings, details, statistics)

``build_server`` wires a given catalog into a new ``FastMCP`` instance; the
entry point builds the config and the catalog and hands them over.

Run with ``library-desk-mcp`` or ``python -m library_desk.server``.
"""

import logging
import signal
import sys
from typing import Any

from fastmcp import FastMCP

from .catalog import Catalog
from .config import LibraryConfig
from .resources import build_resources
from .seed import seed_catalog
from .tools import build_tools

logger = logging.getLogger(__name__)

INSTRUCTIONS = (
    "Library Desk - a small library catalog. Use resources to browse books, "
    "members and statistics, and tools to register books and members and to "
    "issue and return books. A member can hold at most 5 books at a time."
)


def build_server(catalog: Catalog, config: LibraryConfig) -> FastMCP:
    """Create a FastMCP server bound to ``catalog``."""
    mcp = FastMCP(name=config.server_name, instructions=INSTRUCTIONS)

    tools = build_tools(catalog)
    for tool in tools:
        mcp.tool(name=tool["name"], description=tool["description"])(tool["handler"])

    resources = build_resources(catalog)
    for resource in resources:
        mcp.resource(
            resource["uri"],
            name=resource["name"],
            description=resource["description"],
            mime_type=resource["mime_type"],
        )(resource["handler"])

    logger.info("Registered %d tools and %d resources", len(tools), len(resources))
    return mcp


def configure_logging(config: LibraryConfig) -> None:
    # stdout carries the stdio transport
    logging.basicConfig(
        level=config.effective_log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )
    if not config.is_development:
        logging.getLogger("fastmcp").setLevel(logging.WARNING)


def run_stdio_server(mcp: FastMCP, config: LibraryConfig) -> None:
    """Serve MCP over stdin/stdout until terminated."""
    logger.info("Starting %s v%s on stdio transport", config.server_name, config.server_version)

    def signal_handler(signum: int, _frame: Any) -> None:
        logger.info("Received signal %s, initiating shutdown...", signum)
        sys.exit(0)

    signal.signal(signal.SIGINT, signal_handler)
    signal.signal(signal.SIGTERM, signal_handler)

    mcp.run(transport="stdio")


def main() -> None:
    """Entry point for the ``library-desk-mcp`` console script."""
    config = LibraryConfig()
    configure_logging(config)

    logger.info("Library Desk MCP Server")
    logger.info("Library: %s", config.library_name)
    logger.info("Version: %s", config.server_version)
    logger.info("Debug Mode: %s", config.debug)

    catalog = Catalog(config.library_name)
    if config.seed_sample_data:
        seed_catalog(catalog)

    try:
        run_stdio_server(build_server(catalog, config), config)
    except KeyboardInterrupt:
        logger.info("Server stopped by user")
    except Exception:
        logger.exception("Fatal error in MCP server")
        sys.exit(1)


if __name__ == "__main__":
    main()
