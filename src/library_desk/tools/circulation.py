"""
Circulation tools for the Library Desk MCP server.

1. issue_book: hand an available book to a member
2. return_book: take a book back from the member holding it

Both tools validate their arguments with a pydantic input model, delegate to
the catalog and translate the catalog's result into an MCP tool response.
A rejected request (unknown id, book already issued, hold limit reached ...)
comes back with ``isError`` set and the error kind in ``data``.
"""

import logging
from typing import Any

from pydantic import BaseModel, Field, ValidationError

from ..catalog import Catalog
from ..errors import ErrorKind
from ..models import CirculationNotice
from .responses import error_response, failure_response, text_response

logger = logging.getLogger(__name__)


class CirculationInput(BaseModel):
    """Input schema shared by issue_book and return_book."""

    member_id: str = Field(
        ...,
        description="Identifier of the member",
        min_length=1,
        examples=["M001"],
    )

    book_id: str = Field(
        ...,
        description="Identifier of the book",
        min_length=1,
        examples=["B001"],
    )


def _notice_data(notice: CirculationNotice) -> dict[str, Any]:
    return {"notice": notice.model_dump(mode="json")}


async def _run(catalog: Catalog, operation: str, arguments: dict[str, Any]) -> dict[str, Any]:
    try:
        try:
            params = CirculationInput.model_validate(arguments)
        except ValidationError as e:
            logger.warning("Invalid %s parameters: %s", operation, e)
            return error_response(
                f"Invalid {operation} parameters: {e}", ErrorKind.INVALID_ARGUMENT.value
            )

        handler = catalog.issue_book if operation == "issue_book" else catalog.return_book
        result = handler(params.member_id, params.book_id)
        if not result.ok:
            logger.info("%s rejected: %s", operation, result.message)
            return failure_response(result)

        notice: CirculationNotice = result.value
        return text_response(notice.message, _notice_data(notice))

    except Exception as e:
        logger.exception("Unexpected error in %s tool", operation)
        return error_response(f"An unexpected error occurred: {e!s}", "internal")


async def issue_book_handler(catalog: Catalog, arguments: dict[str, Any]) -> dict[str, Any]:
    """Issue a book; see ``Catalog.issue_book`` for the guard order."""
    return await _run(catalog, "issue_book", arguments)


async def return_book_handler(catalog: Catalog, arguments: dict[str, Any]) -> dict[str, Any]:
    """Return a book on behalf of the member holding it."""
    return await _run(catalog, "return_book", arguments)


def build_circulation_tools(catalog: Catalog) -> list[dict[str, Any]]:
    """Bind the circulation handlers to ``catalog`` for server registration."""

    async def issue_book(member_id: str, book_id: str) -> dict[str, Any]:
        return await issue_book_handler(catalog, {"member_id": member_id, "book_id": book_id})

    async def return_book(member_id: str, book_id: str) -> dict[str, Any]:
        return await return_book_handler(catalog, {"member_id": member_id, "book_id": book_id})

    return [
        {
            "name": "issue_book",
            "description": (
                "Issue an available book to a member. Fails if the member or book "
                "does not exist, the book is already issued, or the member already "
                "holds the maximum of 5 books."
            ),
            "inputSchema": CirculationInput.model_json_schema(),
            "handler": issue_book,
        },
        {
            "name": "return_book",
            "description": (
                "Return an issued book. Only the member the book was issued to can "
                "return it."
            ),
            "inputSchema": CirculationInput.model_json_schema(),
            "handler": return_book,
        },
    ]
