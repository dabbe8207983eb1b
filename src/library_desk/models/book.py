"""
Book model for the Library Desk catalog.

A book is a single catalog record with a two-state lifecycle:

    Available --issue--> Issued --return--> Available

While issued, the book records the holding member's name and the issue date.
Books are mutated only by ``issue`` and ``return_book``; the ``Catalog``
decides when those transitions are allowed for a given member.
"""

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ..errors import ConflictError, InvalidStateError
from .circulation import CirculationAction, CirculationNotice


class Book(BaseModel):
    """
    Represents a book in the library catalog.

    ``holder`` and ``issue_date`` are both set exactly when ``available`` is
    False.
    """

    model_config = ConfigDict(
        str_strip_whitespace=True,
        json_schema_extra={
            "example": {
                "id": "B003",
                "title": "Clean Code",
                "author": "Robert C. Martin",
                "isbn": "978-0132350884",
                "available": True,
                "holder": None,
                "issue_date": None,
            }
        },
    )

    id: str = Field(
        ...,
        description="Catalog identifier, unique within a catalog",
        min_length=1,
        examples=["B001", "B002"],
    )

    title: str = Field(
        ...,
        description="The title of the book",
        min_length=1,
        examples=["Clean Code", "Effective Java"],
    )

    author: str = Field(
        ...,
        description="Author of the book",
        min_length=1,
        examples=["Robert C. Martin", "Joshua Bloch"],
    )

    isbn: str = Field(
        ...,
        description="ISBN as printed on the book",
        min_length=1,
        examples=["978-0132350884"],
    )

    available: bool = Field(
        default=True,
        description="Whether the book is on the shelf",
    )

    holder: str | None = Field(
        default=None,
        description="Name of the member holding the book",
    )

    issue_date: str | None = Field(
        default=None,
        description="Date the book was issued (YYYY-MM-DD)",
        examples=["2025-11-15"],
    )

    @model_validator(mode="after")
    def validate_issue_state(self) -> "Book":
        """Holder and issue date go together, and only on issued books."""
        if (self.holder is None) != (self.issue_date is None):
            raise ValueError("holder and issue_date must be set together")
        if self.available == (self.holder is not None):
            raise ValueError("holder must be set exactly when the book is issued")
        return self

    @property
    def is_available(self) -> bool:
        return self.available

    @property
    def status(self) -> str:
        return "Available" if self.available else "Issued"

    def issue(self, member_name: str, issue_date: str) -> CirculationNotice:
        """
        Mark the book as issued to ``member_name``.

        Returns:
            The confirmation notice for the issue

        Raises:
            ConflictError: If the book is already issued
        """
        if not self.available:
            raise ConflictError(f"Book is already issued to {self.holder}")
        self.available = False
        self.holder = member_name
        self.issue_date = issue_date
        return CirculationNotice(
            action=CirculationAction.ISSUED,
            book_id=self.id,
            title=self.title,
            member_name=member_name,
            date=issue_date,
        )

    def return_book(self) -> str:
        """
        Put the book back on the shelf.

        Returns:
            Name of the member who held the book

        Raises:
            InvalidStateError: If the book is not issued
        """
        if self.available:
            raise InvalidStateError("Book is not issued. Cannot return.")
        previous_holder = self.holder
        self.available = True
        self.holder = None
        self.issue_date = None
        return previous_holder

    def details(self) -> list[tuple[str, str]]:
        """Label/value rows for a detail view."""
        rows = [
            ("Book ID", self.id),
            ("Title", self.title),
            ("Author", self.author),
            ("ISBN", self.isbn),
            ("Status", self.status),
        ]
        if not self.available:
            rows.append(("Issued To", self.holder))
            rows.append(("Issue Date", self.issue_date))
        return rows

    def __str__(self) -> str:
        return f"{self.title} by {self.author} (ISBN: {self.isbn})"
