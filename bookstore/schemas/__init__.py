"""Pydantic schemas."""
from bookstore.schemas.book import BookResponse, BookSubmission
from bookstore.schemas.common import (
    BaseSchema,
    ErrorResponse,
    FieldErrorResponse,
    StatusResponse,
    TimestampMixin,
)

__all__ = [
    # Common
    "BaseSchema",
    "TimestampMixin",
    "ErrorResponse",
    "FieldErrorResponse",
    "StatusResponse",
    # Book
    "BookSubmission",
    "BookResponse",
]
