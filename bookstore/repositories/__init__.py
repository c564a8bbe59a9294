"""Data access layer."""
from bookstore.repositories.book_repository import BookRepository

__all__ = [
    "BookRepository",
]
