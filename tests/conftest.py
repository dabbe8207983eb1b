"""Test configuration and fixtures for Library Desk.

- Catalogs use a fixed clock so issue and membership dates are predictable
- Configuration tests run with LIBRARY_DESK_* variables cleared
"""

import os
from collections.abc import Generator
from datetime import date

import pytest

from library_desk.catalog import Catalog
from library_desk.seed import seed_catalog

FIXED_TODAY = date(2025, 11, 15)


# === Catalog Fixtures ===


@pytest.fixture
def catalog() -> Catalog:
    """An empty catalog whose clock always reads 2025-11-15."""
    return Catalog("Test Library", today=lambda: FIXED_TODAY)


@pytest.fixture
def seeded_catalog(catalog: Catalog) -> Catalog:
    """The sample books plus member M001 (Alice)."""
    seed_catalog(catalog)
    catalog.register_member("M001", "Alice", "alice@example.com", "555-0100")
    return catalog


@pytest.fixture
def loaded_member(seeded_catalog: Catalog) -> Catalog:
    """M001 holding all five sample books, plus a spare B006."""
    for book_id in ("B001", "B002", "B003", "B004", "B005"):
        assert seeded_catalog.issue_book("M001", book_id).ok
    seeded_catalog.register_book("B006", "Refactoring", "Martin Fowler", "978-0201485677")
    return seeded_catalog


# === Environment Fixtures ===


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> Generator[None, None, None]:
    """Remove LIBRARY_DESK_* variables and any .env file from the picture."""
    for key in list(os.environ):
        if key.startswith("LIBRARY_DESK_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
    yield


# === Assertion Helpers ===


def snapshot(catalog: Catalog) -> list[tuple]:
    """Comparable view of every book and member in ``catalog``."""
    books = [(b.id, b.available, b.holder, b.issue_date) for b in catalog.list_all()]
    members = [(m.id, m.held_book_ids) for m in catalog.list_members()]
    return [tuple(books), tuple((mid, tuple(ids)) for mid, ids in members)]


def assert_catalog_consistent(catalog: Catalog) -> None:
    """Check the cross-entity invariant between books and members."""
    members = catalog.list_members()
    for book in catalog.list_all():
        assert book.available == (book.holder is None)
        assert (book.holder is None) == (book.issue_date is None)
        holders = [m for m in members if book.id in m.held_book_ids]
        if book.available:
            assert holders == []
        else:
            assert len(holders) == 1
            assert holders[0].name == book.holder
    for member in members:
        assert 0 <= member.held_count <= 5
        for held in member.held_books:
            assert catalog.find_book(held.id) is held
