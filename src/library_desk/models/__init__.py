"""
Library Desk models.

Pydantic models for the entities the catalog manages:
- Book: a catalog record with Available/Issued state
- Member: a registered member and the books they currently hold
- CirculationNotice: confirmation of an issue or return
- CatalogStatistics: counts over the whole catalog
"""

from .book import Book
from .circulation import CatalogStatistics, CirculationAction, CirculationNotice
from .member import HOLD_LIMIT, Member

__all__ = [
    "HOLD_LIMIT",
    "Book",
    "CatalogStatistics",
    "CirculationAction",
    "CirculationNotice",
    "Member",
]
