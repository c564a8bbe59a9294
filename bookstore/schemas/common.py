"""Common Pydantic schemas."""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict


class BaseSchema(BaseModel):
    """Base schema with common configuration."""

    model_config = ConfigDict(from_attributes=True)


class TimestampMixin(BaseModel):
    """Mixin for timestamp fields."""

    created_at: datetime
    updated_at: datetime


class FieldErrorResponse(BaseModel):
    """A single field-level validation error."""

    field: str
    message: str


class ErrorResponse(BaseModel):
    """Uniform error body returned for every failed request."""

    timestamp: datetime
    status: int
    error: str
    message: str
    path: str
    field_errors: Optional[list[FieldErrorResponse]] = None


class StatusResponse(BaseModel):
    """Status response schema."""

    status: str
    app: Optional[str] = None
