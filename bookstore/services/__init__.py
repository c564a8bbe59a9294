"""Business logic services."""
from bookstore.services.book_service import BookService

__all__ = [
    "BookService",
]
