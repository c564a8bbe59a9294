"""Book service for catalog operations."""
from datetime import datetime, timezone
from typing import Callable

from sqlalchemy.ext.asyncio import AsyncSession

from bookstore.core.exceptions import ConflictError, NotFoundError, ValidationError
from bookstore.core.logging import get_logger
from bookstore.core.validation import validate_submission
from bookstore.models.book import Book
from bookstore.repositories.book_repository import BookRepository
from bookstore.schemas.book import BookSubmission

logger = get_logger("services.book")


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class BookService:
    """Service for book operations.

    Submissions are validated here, so every caller (HTTP, CLI, tests)
    goes through the same rules. The ISBN pre-checks give an early
    conflict; the unique constraint enforced on flush is the final word.
    """

    def __init__(
        self,
        db: AsyncSession,
        clock: Callable[[], datetime] = utcnow,
    ):
        self.db = db
        self.repository = BookRepository(db)
        self.clock = clock

    def _validate(self, submission: BookSubmission, now: datetime) -> None:
        violations = validate_submission(submission, current_year=now.year)
        if violations:
            logger.info(f"Rejected submission: {[v.field for v in violations]}")
            raise ValidationError(violations)

    async def create_book(self, submission: BookSubmission) -> Book:
        """Create a new book with validation and ISBN uniqueness enforcement."""
        now = self.clock()
        self._validate(submission, now)

        if await self.repository.exists_by_isbn(submission.isbn):
            logger.warning(f"Duplicate ISBN on create: {submission.isbn}")
            raise ConflictError(
                f"ISBN {submission.isbn} is already registered",
                field="isbn",
                value=submission.isbn,
            )

        book = Book(
            title=submission.title,
            author=submission.author,
            isbn=submission.isbn,
            publication_year=submission.publication_year,
            created_at=now,
            updated_at=now,
        )
        book = await self.repository.add(book)
        logger.info(f"Created book {book.id} ({book.isbn})")
        return book

    async def list_books(self) -> list[Book]:
        """List all books."""
        return await self.repository.list_all()

    async def get_book(self, book_id: int) -> Book:
        """Get a book by ID."""
        book = await self.repository.get(book_id)
        if book is None:
            raise NotFoundError("Book", book_id)
        return book

    async def get_book_by_isbn(self, isbn: str) -> Book:
        """Get a book by ISBN."""
        book = await self.repository.get_by_isbn(isbn.strip())
        if book is None:
            raise NotFoundError("Book", isbn.strip(), key="isbn")
        return book

    async def update_book(self, book_id: int, submission: BookSubmission) -> Book:
        """Overwrite the mutable fields of an existing book."""
        now = self.clock()
        self._validate(submission, now)

        book = await self.get_book(book_id)

        if submission.isbn != book.isbn and await self.repository.exists_by_isbn_excluding(
            submission.isbn, book_id
        ):
            logger.warning(f"Duplicate ISBN on update of book {book_id}: {submission.isbn}")
            raise ConflictError(
                f"ISBN {submission.isbn} is already registered",
                field="isbn",
                value=submission.isbn,
            )

        book.title = submission.title
        book.author = submission.author
        book.isbn = submission.isbn
        book.publication_year = submission.publication_year
        book.updated_at = now

        book = await self.repository.save(book)
        logger.info(f"Updated book {book.id}")
        return book

    async def delete_book(self, book_id: int) -> None:
        """Delete a book by ID."""
        book = await self.get_book(book_id)
        await self.repository.delete(book)
        logger.info(f"Deleted book {book_id}")
