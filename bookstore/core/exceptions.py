"""Custom exceptions for the application."""
from datetime import datetime, timezone
from http import HTTPStatus
from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    from bookstore.core.validation import FieldViolation


class AppException(Exception):
    """Base application exception."""

    status_code: int = 400

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)


class NotFoundError(AppException):
    """Resource not found errors."""

    status_code = 404

    def __init__(self, resource: str, resource_id: Any, key: str = "id"):
        super().__init__(
            f"{resource} with {key} {resource_id} not found",
            error_code="NOT_FOUND",
            details={"resource": resource, key: resource_id},
        )


class ValidationError(AppException):
    """One or more field-level rule violations."""

    status_code = 400

    def __init__(self, violations: list["FieldViolation"], message: str = "Validation failed"):
        self.violations = list(violations)
        super().__init__(
            message,
            error_code="VALIDATION_ERROR",
            details={"fields": [v.field for v in self.violations]},
        )


class ConflictError(AppException):
    """A write would break a uniqueness invariant."""

    status_code = 409

    def __init__(self, message: str, field: Optional[str] = None, value: Any = None):
        super().__init__(
            message,
            error_code="CONFLICT",
            details={"field": field, "value": value} if field else {},
        )


class StoreError(AppException):
    """Persistence fault not otherwise classified."""

    status_code = 500

    def __init__(self, message: str = "Database operation failed", operation: Optional[str] = None):
        super().__init__(
            message,
            error_code="STORE_ERROR",
            details={"operation": operation} if operation else {},
        )


def error_response(
    exc: Exception,
    path: str,
    status_code: Optional[int] = None,
    message: Optional[str] = None,
    field_errors: Optional[list[dict[str, str]]] = None,
) -> tuple[int, dict[str, Any]]:
    """Translate a failure into an HTTP status and a uniform error body.

    ``field_errors`` is only present in the body for validation failures.
    """
    if status_code is None:
        status_code = exc.status_code if isinstance(exc, AppException) else 500
    if message is None:
        message = exc.message if isinstance(exc, AppException) else "Internal server error"
    if field_errors is None and isinstance(exc, ValidationError):
        field_errors = [{"field": v.field, "message": v.message} for v in exc.violations]

    try:
        label = HTTPStatus(status_code).phrase
    except ValueError:
        label = "Error"

    body: dict[str, Any] = {
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "status": status_code,
        "error": label,
        "message": message,
        "path": path,
    }
    if field_errors is not None:
        body["field_errors"] = field_errors
    return status_code, body
