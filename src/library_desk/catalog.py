"""
The library catalog: owner of all books and members.

The catalog is the only entry point for issuing and returning books. It
resolves ids, checks every guard before touching any record, and then applies
the book and member updates together, so a rejected request never leaves a
partially mutated catalog behind.

Mutations return ``Success``/``Failure`` results (see ``results``); queries
return tuples in registration order.
"""

import logging
import threading
from collections.abc import Callable
from datetime import date

from pydantic import ValidationError

from .errors import (
    CapacityError,
    CatalogError,
    ConflictError,
    DuplicateKeyError,
    InvalidArgumentError,
    InvalidStateError,
    NotFoundError,
)
from .models import HOLD_LIMIT, Book, CatalogStatistics, CirculationAction, CirculationNotice, Member
from .results import Failure, Result, Success

logger = logging.getLogger(__name__)

DATE_FORMAT = "%Y-%m-%d"


def _validation_message(error: ValidationError) -> str:
    first = error.errors()[0]
    field = ".".join(str(part) for part in first["loc"]) or "value"
    return f"Invalid {field}: {first['msg']}"


class Catalog:
    """
    In-memory catalog of books and members.

    Args:
        name: Library name shown in listings and statistics
        today: Clock used for issue and membership dates
    """

    def __init__(self, name: str, today: Callable[[], date] = date.today):
        if not name or not name.strip():
            raise InvalidArgumentError("Library name cannot be empty")
        self.name = name.strip()
        self._today = today
        self._books: list[Book] = []
        self._members: list[Member] = []
        # One lock per catalog; issue/return touch a book and a member together.
        self._lock = threading.RLock()

    def current_date(self) -> str:
        return self._today().strftime(DATE_FORMAT)

    # =========================================================================
    # REGISTRATION
    # =========================================================================

    def add_book(self, book: Book | None) -> Result:
        """Register an already built book. It must be available; fails on a duplicate id."""
        if book is None:
            return self._reject(InvalidArgumentError("Book cannot be None"))
        if not book.is_available:
            return self._reject(
                InvalidArgumentError(f"Book {book.id} must be available when registered")
            )
        with self._lock:
            if self._find_book(book.id) is not None:
                return self._reject(DuplicateKeyError(f"Book with ID {book.id} already exists"))
            self._books.append(book)
        logger.info("Book added | id=%s title=%s", book.id, book.title)
        return Success(value=book)

    def register_book(self, book_id: str, title: str, author: str, isbn: str) -> Result:
        """Build and register a new, available book."""
        try:
            book = Book(id=book_id, title=title, author=author, isbn=isbn)
        except ValidationError as e:
            return self._reject(InvalidArgumentError(_validation_message(e)))
        return self.add_book(book)

    def add_member(self, member: Member | None) -> Result:
        """Register an already built member. It must hold no books; fails on a duplicate id."""
        if member is None:
            return self._reject(InvalidArgumentError("Member cannot be None"))
        if member.held_count != 0:
            return self._reject(
                InvalidArgumentError(f"Member {member.id} must hold no books when registered")
            )
        with self._lock:
            if self._find_member(member.id) is not None:
                return self._reject(
                    DuplicateKeyError(f"Member with ID {member.id} already exists")
                )
            self._members.append(member)
        logger.info("Member registered | id=%s name=%s", member.id, member.name)
        return Success(value=member)

    def register_member(
        self,
        member_id: str,
        name: str,
        email: str = "",
        phone: str = "",
        membership_date: str | None = None,
    ) -> Result:
        """Build and register a new member. Membership date defaults to today."""
        try:
            member = Member(
                id=member_id,
                name=name,
                email=email,
                phone=phone,
                membership_date=membership_date or self.current_date(),
            )
        except ValidationError as e:
            return self._reject(InvalidArgumentError(_validation_message(e)))
        return self.add_member(member)

    # =========================================================================
    # CIRCULATION
    # =========================================================================

    def issue_book(self, member_id: str, book_id: str) -> Result:
        """
        Issue a book to a member.

        Guards, first failure wins: member exists, book exists, book is
        available, member is below the hold limit.

        Returns:
            Success carrying a CirculationNotice, or a Failure of kind
            not_found, conflict or capacity
        """
        with self._lock:
            member = self._find_member(member_id)
            if member is None:
                return self._reject(NotFoundError(f"Member with ID {member_id} not found"))
            book = self._find_book(book_id)
            if book is None:
                return self._reject(NotFoundError(f"Book with ID {book_id} not found"))
            if not book.is_available:
                return self._reject(ConflictError("Book is already issued"))
            if member.has_reached_limit:
                return self._reject(
                    CapacityError(f"Member has reached maximum book limit ({HOLD_LIMIT} books)")
                )

            notice = book.issue(member.name, self.current_date())
            try:
                member.add_held(book)
            except CatalogError as e:
                book.return_book()
                return self._reject(e)

        logger.info("Book issued | book=%s member=%s date=%s", book.id, member.id, notice.date)
        return Success(value=notice)

    def return_book(self, member_id: str, book_id: str) -> Result:
        """
        Return a book on behalf of the member holding it.

        Returns:
            Success carrying a CirculationNotice, or a Failure of kind
            not_found, invalid_state or conflict
        """
        with self._lock:
            member = self._find_member(member_id)
            if member is None:
                return self._reject(NotFoundError(f"Member with ID {member_id} not found"))
            book = self._find_book(book_id)
            if book is None:
                return self._reject(NotFoundError(f"Book with ID {book_id} not found"))
            if book.is_available:
                return self._reject(InvalidStateError("Book is not issued"))
            if book.holder != member.name or book.id not in member.held_book_ids:
                return self._reject(ConflictError("Book is not issued to this member"))

            previous_holder = book.return_book()
            member.remove_held(book)

        logger.info("Book returned | book=%s member=%s", book.id, member.id)
        return Success(
            value=CirculationNotice(
                action=CirculationAction.RETURNED,
                book_id=book.id,
                title=book.title,
                member_name=previous_holder,
            )
        )

    # =========================================================================
    # QUERIES
    # =========================================================================

    def find_book(self, book_id: str) -> Book | None:
        with self._lock:
            return self._find_book(book_id)

    def find_member(self, member_id: str) -> Member | None:
        with self._lock:
            return self._find_member(member_id)

    def list_all(self) -> tuple[Book, ...]:
        with self._lock:
            return tuple(self._books)

    def list_available(self) -> tuple[Book, ...]:
        with self._lock:
            return tuple(book for book in self._books if book.is_available)

    def list_issued(self) -> tuple[Book, ...]:
        with self._lock:
            return tuple(book for book in self._books if not book.is_available)

    def list_members(self) -> tuple[Member, ...]:
        with self._lock:
            return tuple(self._members)

    def statistics(self) -> CatalogStatistics:
        with self._lock:
            available = issued = 0
            for book in self._books:
                if book.is_available:
                    available += 1
                else:
                    issued += 1
            return CatalogStatistics(
                library_name=self.name,
                total_books=len(self._books),
                available=available,
                issued=issued,
                total_members=len(self._members),
            )

    # =========================================================================
    # INTERNAL HELPERS
    # =========================================================================

    def _find_book(self, book_id: str) -> Book | None:
        for book in self._books:
            if book.id == book_id:
                return book
        return None

    def _find_member(self, member_id: str) -> Member | None:
        for member in self._members:
            if member.id == member_id:
                return member
        return None

    @staticmethod
    def _reject(error: CatalogError) -> Failure:
        logger.info("Request rejected | kind=%s reason=%s", error.kind.value, error)
        return Failure.from_error(error)
