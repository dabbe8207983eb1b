"""
Member model for the Library Desk catalog.

A member keeps non-owning references to the books currently issued to them.
The catalog owns the book records and is the only caller of ``add_held`` and
``remove_held``; everything else sees an immutable snapshot through
``held_books``.
"""

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, computed_field

from ..errors import InvalidArgumentError
from .book import Book

HOLD_LIMIT = 5


class Member(BaseModel):
    """Represents a registered library member."""

    model_config = ConfigDict(str_strip_whitespace=True)

    id: str = Field(
        ...,
        description="Member identifier, unique within a catalog",
        min_length=1,
        examples=["M001"],
    )

    name: str = Field(
        ...,
        description="Full name of the member",
        min_length=1,
        examples=["Rajesh Kumar", "Alice"],
    )

    email: str = Field(
        default="",
        description="Contact email address",
        examples=["rajesh@email.com"],
    )

    phone: str = Field(
        default="",
        description="Contact phone number",
        examples=["9876543210"],
    )

    membership_date: str = Field(
        ...,
        description="Date the member joined (YYYY-MM-DD)",
        examples=["2025-11-15"],
    )

    _held_books: list[Book] = PrivateAttr(default_factory=list)

    @property
    def held_books(self) -> tuple[Book, ...]:
        return tuple(self._held_books)

    @computed_field
    @property
    def held_book_ids(self) -> list[str]:
        return [book.id for book in self._held_books]

    @property
    def held_count(self) -> int:
        return len(self._held_books)

    @property
    def has_reached_limit(self) -> bool:
        return self.held_count >= HOLD_LIMIT

    def add_held(self, book: Book | None) -> None:
        """
        Record a book as held by this member.

        The hold limit is not checked here; the catalog checks it before
        issuing.

        Raises:
            InvalidArgumentError: If book is None
        """
        if book is None:
            raise InvalidArgumentError("Book cannot be None")
        self._held_books.append(book)

    def remove_held(self, book: Book) -> bool:
        """Drop one held entry with the same id. Returns False if not held."""
        for index, held in enumerate(self._held_books):
            if held.id == book.id:
                del self._held_books[index]
                return True
        return False

    def details(self) -> list[tuple[str, str]]:
        """Label/value rows for a detail view."""
        return [
            ("Member ID", self.id),
            ("Name", self.name),
            ("Email", self.email),
            ("Phone", self.phone),
            ("Membership Date", self.membership_date),
            ("Books Issued", f"{self.held_count}/{HOLD_LIMIT}"),
        ]
