"""
MCP tools for Library Desk.

Tools are the operations with side effects: registering books and members,
issuing and returning books. Each tool is a dictionary with its name,
description, JSON input schema and a handler bound to one catalog.
"""

from typing import Any

from ..catalog import Catalog
from .circulation import build_circulation_tools
from .registration import build_registration_tools


def build_tools(catalog: Catalog) -> list[dict[str, Any]]:
    """All tools for ``catalog``, in registration order."""
    return build_registration_tools(catalog) + build_circulation_tools(catalog)


__all__ = [
    "build_circulation_tools",
    "build_registration_tools",
    "build_tools",
]
