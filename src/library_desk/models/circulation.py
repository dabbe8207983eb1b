"""
Circulation events and catalog summaries.

``CirculationNotice`` is the confirmation emitted when a book changes hands.
Drivers render it (the console prints ``message``, the MCP tools return it
as structured data) instead of the domain printing anything itself.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, computed_field


class CirculationAction(str, Enum):
    """What happened to the book."""

    ISSUED = "issued"
    RETURNED = "returned"


class CirculationNotice(BaseModel):
    """Confirmation of a completed issue or return."""

    model_config = ConfigDict(frozen=True)

    action: CirculationAction = Field(..., description="Issue or return")
    book_id: str = Field(..., description="Book that changed hands")
    title: str = Field(..., description="Title of the book")
    member_name: str = Field(..., description="Member who received or returned the book")
    date: str | None = Field(
        default=None,
        description="Issue date (YYYY-MM-DD); unset for returns",
    )

    @computed_field
    @property
    def message(self) -> str:
        if self.action is CirculationAction.ISSUED:
            return f"Book '{self.title}' issued to {self.member_name}"
        return f"Book '{self.title}' returned by {self.member_name}"


class CatalogStatistics(BaseModel):
    """Counts over the whole catalog."""

    model_config = ConfigDict(frozen=True)

    library_name: str = Field(..., description="Name of the library")
    total_books: int = Field(..., ge=0, description="Books in the catalog")
    available: int = Field(..., ge=0, description="Books on the shelf")
    issued: int = Field(..., ge=0, description="Books currently issued")
    total_members: int = Field(..., ge=0, description="Registered members")
