"""Library Desk MCP Resources

Resources are the read-only side of the MCP surface: listings, detail views
and statistics. Anything that changes the catalog is a tool instead.
"""

from typing import Any

from ..catalog import Catalog
from .books import build_book_resources
from .members import build_member_resources
from .stats import build_stats_resources


def build_resources(catalog: Catalog) -> list[dict[str, Any]]:
    """All resources for ``catalog``."""
    return (
        build_book_resources(catalog)
        + build_member_resources(catalog)
        + build_stats_resources(catalog)
    )


__all__ = [
    "build_book_resources",
    "build_member_resources",
    "build_resources",
    "build_stats_resources",
]
