"""Book Pydantic schemas."""
from typing import Optional

from pydantic import BaseModel, ConfigDict

from bookstore.schemas.common import BaseSchema, TimestampMixin


class BookSubmission(BaseModel):
    """Unvalidated payload for creating or updating a book.

    Fields are optional so that missing values are reported by the
    validation layer alongside every other rule violation.
    """

    model_config = ConfigDict(extra="ignore")

    title: Optional[str] = None
    author: Optional[str] = None
    isbn: Optional[str] = None
    publication_year: Optional[int] = None


class BookResponse(TimestampMixin, BaseSchema):
    """Schema for book response."""

    id: int
    title: str
    author: str
    isbn: str
    publication_year: int
