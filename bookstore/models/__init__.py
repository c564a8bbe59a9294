"""SQLAlchemy models."""
from bookstore.models.book import ISBN_CONSTRAINT, Book

__all__ = [
    "Book",
    "ISBN_CONSTRAINT",
]
