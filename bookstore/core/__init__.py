"""Core utilities."""
from bookstore.core.exceptions import (
    AppException,
    ConflictError,
    NotFoundError,
    StoreError,
    ValidationError,
    error_response,
)
from bookstore.core.logging import get_logger, setup_logging
from bookstore.core.validation import FieldViolation, is_valid_isbn, validate_submission

__all__ = [
    # Validation
    "FieldViolation",
    "is_valid_isbn",
    "validate_submission",
    # Logging
    "get_logger",
    "setup_logging",
    # Exceptions
    "AppException",
    "NotFoundError",
    "ValidationError",
    "ConflictError",
    "StoreError",
    "error_response",
]
