"""Statistics Resource

Resources:
- library://stats - Book and member counts for the catalog
"""

import logging
from typing import Any

from ..catalog import Catalog

logger = logging.getLogger(__name__)


def build_stats_resources(catalog: Catalog) -> list[dict[str, Any]]:
    """Bind the statistics handler to ``catalog``."""

    async def get_statistics_handler() -> dict[str, Any]:
        logger.debug("MCP Resource Request - stats")
        return catalog.statistics().model_dump()

    return [
        {
            "uri": "library://stats",
            "name": "Library Statistics",
            "description": "Total, available and issued books, and registered members.",
            "mime_type": "application/json",
            "handler": get_statistics_handler,
        },
    ]
