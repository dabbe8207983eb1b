"""Tests for the Success/Failure results and the error vocabulary."""

import pytest
from pydantic import ValidationError

from library_desk.errors import (
    CapacityError,
    CatalogError,
    ConflictError,
    DuplicateKeyError,
    ErrorKind,
    InvalidArgumentError,
    InvalidStateError,
    NotFoundError,
    error_for,
)
from library_desk.results import Failure, Success


class TestErrorKinds:
    @pytest.mark.parametrize(
        ("kind", "error"),
        [
            (ErrorKind.DUPLICATE_KEY, DuplicateKeyError),
            (ErrorKind.NOT_FOUND, NotFoundError),
            (ErrorKind.CONFLICT, ConflictError),
            (ErrorKind.CAPACITY, CapacityError),
            (ErrorKind.INVALID_STATE, InvalidStateError),
            (ErrorKind.INVALID_ARGUMENT, InvalidArgumentError),
        ],
    )
    def test_each_kind_has_an_error(self, kind, error):
        assert error_for(kind) is error
        assert error.kind is kind
        assert issubclass(error, CatalogError)

    def test_error_for_accepts_plain_string(self):
        assert error_for("capacity") is CapacityError

    def test_invalid_argument_is_a_value_error(self):
        assert issubclass(InvalidArgumentError, ValueError)


class TestResults:
    def test_success(self):
        result = Success(value=42)
        assert result.ok is True
        assert result.unwrap() == 42

    def test_failure_from_error(self):
        failure = Failure.from_error(ConflictError("Book is already issued"))
        assert failure.ok is False
        assert failure.kind is ErrorKind.CONFLICT
        assert failure.message == "Book is already issued"

    def test_failure_unwrap_raises(self):
        failure = Failure(kind=ErrorKind.NOT_FOUND, message="Book with ID B9 not found")
        with pytest.raises(NotFoundError, match="B9"):
            failure.unwrap()

    def test_failure_is_frozen(self):
        failure = Failure(kind=ErrorKind.CAPACITY, message="full")
        with pytest.raises(ValidationError):
            failure.message = "changed"

    def test_failure_serializes_kind_as_string(self):
        failure = Failure(kind=ErrorKind.INVALID_STATE, message="Book is not issued")
        assert failure.model_dump(mode="json") == {
            "ok": False,
            "kind": "invalid_state",
            "message": "Book is not issued",
        }
