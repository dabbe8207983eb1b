"""
Tagged results returned by catalog operations.

Catalog mutations never raise for expected outcomes (duplicate id, unknown
id, book already issued, hold limit reached ...). They return either a
``Success`` carrying the operation's value or a ``Failure`` carrying an
``ErrorKind`` and a human-readable message, so callers branch on ``ok``:

    result = catalog.issue_book("M001", "B001")
    if result.ok:
        print(result.value.message)
    else:
        print(result.kind, result.message)

``unwrap()`` converts a result back into the exception style for callers
that prefer it.
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from .errors import CatalogError, ErrorKind, error_for


class Success(BaseModel):
    """A completed catalog operation."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    ok: Literal[True] = True
    value: Any = Field(default=None, description="Value produced by the operation")

    def unwrap(self) -> Any:
        return self.value


class Failure(BaseModel):
    """A rejected catalog operation. Nothing was mutated."""

    model_config = ConfigDict(frozen=True)

    ok: Literal[False] = False
    kind: ErrorKind = Field(..., description="Why the request was rejected")
    message: str = Field(..., description="Human-readable explanation")

    @classmethod
    def from_error(cls, error: CatalogError) -> "Failure":
        """Build a failure from a raised ``CatalogError``."""
        return cls(kind=error.kind, message=str(error))

    def to_error(self) -> CatalogError:
        return error_for(self.kind)(self.message)

    def unwrap(self) -> Any:
        """
        Raises:
            CatalogError: The subclass matching ``kind``
        """
        raise self.to_error()


Result = Success | Failure
