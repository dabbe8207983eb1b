"""
Sample data for a fresh catalog.

The console and MCP entry points register these books at startup when
``seed_sample_data`` is enabled. The demo member is registered by the
console demo, not at startup.
"""

import logging

from .catalog import Catalog

logger = logging.getLogger(__name__)

SAMPLE_BOOKS: list[tuple[str, str, str, str]] = [
    ("B001", "The Java Programming Language", "James Gosling", "978-0134685991"),
    ("B002", "Effective Java", "Joshua Bloch", "978-0134685402"),
    ("B003", "Clean Code", "Robert C. Martin", "978-0132350884"),
    ("B004", "Design Patterns", "Gang of Four", "978-0201633610"),
    ("B005", "The Pragmatic Programmer", "David Thomas", "978-0201616224"),
]

DEMO_MEMBER: dict[str, str] = {
    "member_id": "M001",
    "name": "Rajesh Kumar",
    "email": "rajesh@email.com",
    "phone": "9876543210",
    "membership_date": "2025-11-15",
}


def seed_catalog(catalog: Catalog) -> int:
    """Register the sample books, skipping ids already present.

    Returns:
        Number of books added
    """
    added = 0
    for book_id, title, author, isbn in SAMPLE_BOOKS:
        if catalog.register_book(book_id, title, author, isbn).ok:
            added += 1
    logger.info("Seeded %d sample books into %s", added, catalog.name)
    return added
