"""
Error vocabulary for the Library Desk catalog.

Every rejected request is classified by an ``ErrorKind``. Entity methods
(``Book.issue``, ``Member.add_held`` ...) raise the matching ``CatalogError``
subclass; the ``Catalog`` checks its guards up front and reports the same
kinds through ``Failure`` results instead of raising.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Classification of a rejected catalog request."""

    DUPLICATE_KEY = "duplicate_key"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    CAPACITY = "capacity"
    INVALID_STATE = "invalid_state"
    INVALID_ARGUMENT = "invalid_argument"


class CatalogError(Exception):
    """Base exception for catalog errors."""

    kind: ErrorKind


class DuplicateKeyError(CatalogError):
    """A book or member with the same id is already registered."""

    kind = ErrorKind.DUPLICATE_KEY


class NotFoundError(CatalogError):
    """The requested book or member id does not exist."""

    kind = ErrorKind.NOT_FOUND


class ConflictError(CatalogError):
    """Book already issued, or returned by a member who does not hold it."""

    kind = ErrorKind.CONFLICT


class CapacityError(CatalogError):
    """Member is at the hold limit."""

    kind = ErrorKind.CAPACITY


class InvalidStateError(CatalogError):
    """Returning a book that is not issued."""

    kind = ErrorKind.INVALID_STATE


class InvalidArgumentError(CatalogError, ValueError):
    """A required value is missing or empty."""

    kind = ErrorKind.INVALID_ARGUMENT


_ERRORS_BY_KIND: dict[ErrorKind, type[CatalogError]] = {
    cls.kind: cls
    for cls in (
        DuplicateKeyError,
        NotFoundError,
        ConflictError,
        CapacityError,
        InvalidStateError,
        InvalidArgumentError,
    )
}


def error_for(kind: ErrorKind) -> type[CatalogError]:
    """Return the exception class raised for ``kind``."""
    return _ERRORS_BY_KIND[ErrorKind(kind)]
