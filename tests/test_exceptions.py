"""Error mapping tests."""
import pytest

from bookstore.core.exceptions import (
    AppException,
    ConflictError,
    NotFoundError,
    StoreError,
    ValidationError,
    error_response,
)
from bookstore.core.validation import FieldViolation


@pytest.mark.parametrize(
    "exc,status,label",
    [
        (NotFoundError("Book", 7), 404, "Not Found"),
        (ConflictError("ISBN 0132350884 is already registered", field="isbn"), 409, "Conflict"),
        (StoreError(operation="insert"), 500, "Internal Server Error"),
        (AppException("Something odd"), 400, "Bad Request"),
    ],
)
def test_typed_failures_map_to_status(exc, status, label):
    """Test each failure type maps to its status and category."""
    code, body = error_response(exc, "/api/v1/books/7")

    assert code == status
    assert body["status"] == status
    assert body["error"] == label
    assert body["message"] == exc.message
    assert body["path"] == "/api/v1/books/7"
    assert "timestamp" in body
    assert "field_errors" not in body


def test_validation_failure_carries_field_errors():
    """Test validation failures list field/message pairs."""
    exc = ValidationError([
        FieldViolation("title", "title is required"),
        FieldViolation("isbn", "isbn is required"),
    ])

    code, body = error_response(exc, "/api/v1/books")

    assert code == 400
    assert body["field_errors"] == [
        {"field": "title", "message": "title is required"},
        {"field": "isbn", "message": "isbn is required"},
    ]
    assert exc.details == {"fields": ["title", "isbn"]}


def test_unexpected_exception_is_internal_error():
    """Test unknown exceptions hide their text behind a generic message."""
    code, body = error_response(RuntimeError("boom"), "/api/v1/books")

    assert code == 500
    assert body["message"] == "Internal server error"
    assert "boom" not in body["message"]


def test_not_found_by_isbn_message():
    """Test not-found errors name the lookup key."""
    exc = NotFoundError("Book", "0132350884", key="isbn")
    assert exc.message == "Book with isbn 0132350884 not found"
    assert exc.details == {"resource": "Book", "isbn": "0132350884"}
