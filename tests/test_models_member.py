"""
Tests for the Member model.

Members track the books issued to them; the list is only changed through
add_held/remove_held and is exposed as an immutable snapshot.
"""

import pytest
from pydantic import ValidationError

from library_desk.errors import InvalidArgumentError
from library_desk.models import HOLD_LIMIT, Book, Member


def make_book(index: int) -> Book:
    return Book(id=f"B{index:03d}", title=f"Book {index}", author="Author", isbn=f"ISBN-{index}")


@pytest.fixture
def member() -> Member:
    return Member(
        id="M001",
        name="Alice",
        email="alice@example.com",
        phone="555-0100",
        membership_date="2025-11-15",
    )


class TestMemberModel:
    def test_create_valid_member(self, member):
        assert member.id == "M001"
        assert member.name == "Alice"
        assert member.held_count == 0
        assert member.held_books == ()
        assert member.has_reached_limit is False

    def test_contact_fields_are_optional(self):
        member = Member(id="M002", name="Bob", membership_date="2025-11-15")
        assert member.email == ""
        assert member.phone == ""

    @pytest.mark.parametrize("field", ["id", "name"])
    def test_empty_identity_rejected(self, field):
        data = {"id": "M001", "name": "Alice", "membership_date": "2025-11-15"}
        data[field] = ""
        with pytest.raises(ValidationError):
            Member(**data)

    def test_hold_limit_is_five(self):
        assert HOLD_LIMIT == 5


class TestHeldBooks:
    def test_add_held_keeps_insertion_order(self, member):
        books = [make_book(i) for i in (3, 1, 2)]
        for book in books:
            member.add_held(book)

        assert member.held_books == tuple(books)
        assert member.held_book_ids == ["B003", "B001", "B002"]
        assert member.held_count == 3

    def test_add_none_raises(self, member):
        with pytest.raises(InvalidArgumentError):
            member.add_held(None)
        assert member.held_count == 0

    def test_add_held_does_not_enforce_limit(self, member):
        for i in range(HOLD_LIMIT + 1):
            member.add_held(make_book(i))
        assert member.held_count == HOLD_LIMIT + 1

    def test_limit_reached_at_five(self, member):
        for i in range(HOLD_LIMIT - 1):
            member.add_held(make_book(i))
        assert member.has_reached_limit is False

        member.add_held(make_book(99))
        assert member.has_reached_limit is True

    def test_remove_held_matches_by_id(self, member):
        book = make_book(1)
        member.add_held(book)

        same_id = make_book(1)
        assert member.remove_held(same_id) is True
        assert member.held_count == 0

    def test_remove_missing_returns_false(self, member):
        member.add_held(make_book(1))
        assert member.remove_held(make_book(2)) is False
        assert member.held_count == 1

    def test_held_books_snapshot_is_immutable(self, member):
        member.add_held(make_book(1))
        snapshot = member.held_books

        assert isinstance(snapshot, tuple)
        member.add_held(make_book(2))
        assert len(snapshot) == 1
        assert member.held_count == 2

    def test_details(self, member):
        member.add_held(make_book(1))
        rows = dict(member.details())
        assert rows["Member ID"] == "M001"
        assert rows["Membership Date"] == "2025-11-15"
        assert rows["Books Issued"] == "1/5"

    def test_dump_includes_held_ids(self, member):
        member.add_held(make_book(7))
        data = member.model_dump()
        assert data["held_book_ids"] == ["B007"]
