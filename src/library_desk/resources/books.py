"""Book Resources - Catalog Access

Read-only views of the catalog's books.

Resources:
- library://books/list - Every book in registration order
- library://books/available - Books on the shelf
- library://books/issued - Books currently issued, with holder and date
- library://books/{book_id} - One book's details
"""

import logging
from typing import Any

from fastmcp.exceptions import ResourceError
from pydantic import BaseModel, Field

from ..catalog import Catalog
from ..models import Book

logger = logging.getLogger(__name__)


class BookListResponse(BaseModel):
    """A listing of books."""

    library_name: str = Field(..., description="Catalog the books belong to")
    books: list[Book] = Field(..., description="Books in registration order")
    total: int = Field(..., description="Number of books in this listing")


def _listing(catalog: Catalog, books: tuple[Book, ...]) -> dict[str, Any]:
    return BookListResponse(
        library_name=catalog.name, books=list(books), total=len(books)
    ).model_dump(mode="json")


def build_book_resources(catalog: Catalog) -> list[dict[str, Any]]:
    """Bind the book resource handlers to ``catalog``."""

    async def list_books_handler() -> dict[str, Any]:
        logger.debug("MCP Resource Request - books/list")
        return _listing(catalog, catalog.list_all())

    async def list_available_books_handler() -> dict[str, Any]:
        logger.debug("MCP Resource Request - books/available")
        return _listing(catalog, catalog.list_available())

    async def list_issued_books_handler() -> dict[str, Any]:
        logger.debug("MCP Resource Request - books/issued")
        return _listing(catalog, catalog.list_issued())

    async def get_book_handler(book_id: str) -> dict[str, Any]:
        logger.debug("MCP Resource Request - books/%s", book_id)
        book = catalog.find_book(book_id)
        if book is None:
            raise ResourceError(f"Book not found: {book_id}")
        return book.model_dump(mode="json")

    return [
        {
            "uri": "library://books/list",
            "name": "Book Catalog",
            "description": "Every book in the catalog with its availability.",
            "mime_type": "application/json",
            "handler": list_books_handler,
        },
        {
            "uri": "library://books/available",
            "name": "Available Books",
            "description": "Books that can be issued right now.",
            "mime_type": "application/json",
            "handler": list_available_books_handler,
        },
        {
            "uri": "library://books/issued",
            "name": "Issued Books",
            "description": "Books currently issued, with holder and issue date.",
            "mime_type": "application/json",
            "handler": list_issued_books_handler,
        },
        {
            "uri": "library://books/{book_id}",
            "name": "Book Details",
            "description": "Details of a single book by its catalog id.",
            "mime_type": "application/json",
            "handler": get_book_handler,
        },
    ]
