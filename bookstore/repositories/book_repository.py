"""Data access for books."""
from typing import Optional

from sqlalchemy import exists, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from bookstore.core.exceptions import ConflictError, StoreError
from bookstore.core.logging import get_logger
from bookstore.models.book import ISBN_CONSTRAINT, Book

logger = get_logger("repositories.book")


def _is_isbn_violation(exc: IntegrityError) -> bool:
    # Postgres reports the constraint name, SQLite the column ("books.isbn")
    text = str(exc.orig).lower()
    return ISBN_CONSTRAINT in text or ("unique" in text and "isbn" in text)


class BookRepository:
    """Async repository over the ``books`` table.

    Write methods flush immediately so the database enforces the ISBN
    unique constraint inside the current unit of work.
    """

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get(self, book_id: int) -> Optional[Book]:
        """Get a book by ID."""
        result = await self.db.execute(select(Book).where(Book.id == book_id))
        return result.scalar_one_or_none()

    async def get_by_isbn(self, isbn: str) -> Optional[Book]:
        """Get a book by ISBN."""
        result = await self.db.execute(select(Book).where(Book.isbn == isbn))
        return result.scalar_one_or_none()

    async def list_all(self) -> list[Book]:
        """List every stored book."""
        result = await self.db.execute(select(Book).order_by(Book.id))
        return list(result.scalars().all())

    async def exists_by_isbn(self, isbn: str) -> bool:
        """Check whether any book holds ``isbn``."""
        result = await self.db.execute(select(exists().where(Book.isbn == isbn)))
        return bool(result.scalar())

    async def exists_by_isbn_excluding(self, isbn: str, book_id: int) -> bool:
        """Check whether a book other than ``book_id`` holds ``isbn``."""
        result = await self.db.execute(
            select(exists().where(Book.isbn == isbn, Book.id != book_id))
        )
        return bool(result.scalar())

    async def add(self, book: Book) -> Book:
        """Insert a new book and return it with its assigned ID."""
        self.db.add(book)
        await self._flush("insert", book.isbn)
        await self.db.refresh(book)
        return book

    async def save(self, book: Book) -> Book:
        """Persist changes made to a loaded book."""
        await self._flush("update", book.isbn)
        await self.db.refresh(book)
        return book

    async def delete(self, book: Book) -> None:
        """Remove a book permanently."""
        book_id = book.id
        try:
            await self.db.delete(book)
            await self.db.flush()
        except SQLAlchemyError as exc:
            await self.db.rollback()
            logger.error(f"Failed to delete book {book_id}: {exc}")
            raise StoreError(operation="delete") from exc

    async def _flush(self, operation: str, isbn: str) -> None:
        try:
            await self.db.flush()
        except IntegrityError as exc:
            await self.db.rollback()
            if _is_isbn_violation(exc):
                raise ConflictError(
                    f"ISBN {isbn} is already registered",
                    field="isbn",
                    value=isbn,
                ) from exc
            logger.error(f"Integrity failure on book {operation}: {exc.orig}")
            raise StoreError(operation=operation) from exc
        except SQLAlchemyError as exc:
            await self.db.rollback()
            logger.error(f"Failed to {operation} book: {exc}")
            raise StoreError(operation=operation) from exc
