"""
Registration tools for the Library Desk MCP server.

1. register_book: add a new, available book to the catalog
2. register_member: add a new member with no held books
"""

import logging
from datetime import date
from typing import Any

from pydantic import BaseModel, Field, ValidationError

from ..catalog import Catalog
from ..errors import ErrorKind
from .responses import error_response, failure_response, text_response

logger = logging.getLogger(__name__)


class RegisterBookInput(BaseModel):
    """Input schema for the register_book tool."""

    book_id: str = Field(..., description="New catalog identifier", min_length=1, examples=["B006"])
    title: str = Field(..., description="Book title", min_length=1, examples=["Refactoring"])
    author: str = Field(..., description="Book author", min_length=1, examples=["Martin Fowler"])
    isbn: str = Field(..., description="ISBN", min_length=1, examples=["978-0201485677"])


class RegisterMemberInput(BaseModel):
    """Input schema for the register_member tool."""

    member_id: str = Field(..., description="New member identifier", min_length=1, examples=["M002"])
    name: str = Field(..., description="Full name", min_length=1, examples=["Alice"])
    email: str = Field(default="", description="Contact email", examples=["alice@example.com"])
    phone: str = Field(default="", description="Contact phone", examples=["555-123-4567"])
    membership_date: date | None = Field(
        default=None,
        description="Membership date; today if omitted",
        examples=["2025-11-15"],
    )


async def register_book_handler(catalog: Catalog, arguments: dict[str, Any]) -> dict[str, Any]:
    try:
        try:
            params = RegisterBookInput.model_validate(arguments)
        except ValidationError as e:
            logger.warning("Invalid register_book parameters: %s", e)
            return error_response(
                f"Invalid register_book parameters: {e}", ErrorKind.INVALID_ARGUMENT.value
            )

        result = catalog.register_book(params.book_id, params.title, params.author, params.isbn)
        if not result.ok:
            return failure_response(result)
        book = result.value
        return text_response(
            f"Book '{book.title}' added to {catalog.name}",
            {"book": book.model_dump(mode="json")},
        )

    except Exception as e:
        logger.exception("Unexpected error in register_book tool")
        return error_response(f"An unexpected error occurred: {e!s}", "internal")


async def register_member_handler(catalog: Catalog, arguments: dict[str, Any]) -> dict[str, Any]:
    try:
        try:
            params = RegisterMemberInput.model_validate(arguments)
        except ValidationError as e:
            logger.warning("Invalid register_member parameters: %s", e)
            return error_response(
                f"Invalid register_member parameters: {e}", ErrorKind.INVALID_ARGUMENT.value
            )

        result = catalog.register_member(
            params.member_id,
            params.name,
            params.email,
            params.phone,
            params.membership_date.isoformat() if params.membership_date else None,
        )
        if not result.ok:
            return failure_response(result)
        member = result.value
        return text_response(
            f"Member '{member.name}' registered successfully",
            {"member": member.model_dump(mode="json")},
        )

    except Exception as e:
        logger.exception("Unexpected error in register_member tool")
        return error_response(f"An unexpected error occurred: {e!s}", "internal")


def build_registration_tools(catalog: Catalog) -> list[dict[str, Any]]:
    """Bind the registration handlers to ``catalog`` for server registration."""

    async def register_book(book_id: str, title: str, author: str, isbn: str) -> dict[str, Any]:
        return await register_book_handler(
            catalog, {"book_id": book_id, "title": title, "author": author, "isbn": isbn}
        )

    async def register_member(
        member_id: str,
        name: str,
        email: str = "",
        phone: str = "",
        membership_date: str | None = None,
    ) -> dict[str, Any]:
        return await register_member_handler(
            catalog,
            {
                "member_id": member_id,
                "name": name,
                "email": email,
                "phone": phone,
                "membership_date": membership_date,
            },
        )

    return [
        {
            "name": "register_book",
            "description": "Add a new book to the catalog. Book ids must be unique.",
            "inputSchema": RegisterBookInput.model_json_schema(),
            "handler": register_book,
        },
        {
            "name": "register_member",
            "description": "Register a new library member. Member ids must be unique.",
            "inputSchema": RegisterMemberInput.model_json_schema(),
            "handler": register_member,
        },
    ]
