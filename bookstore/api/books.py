"""Book API routes."""
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from bookstore.database import get_db
from bookstore.models.book import Book
from bookstore.schemas.book import BookResponse, BookSubmission
from bookstore.schemas.common import ErrorResponse
from bookstore.services.book_service import BookService

router = APIRouter(prefix="/books", tags=["Books"])

NOT_FOUND = {404: {"model": ErrorResponse, "description": "Book not found"}}
INVALID = {400: {"model": ErrorResponse, "description": "Validation failed"}}
CONFLICT = {409: {"model": ErrorResponse, "description": "ISBN already registered"}}


def get_book_service(db: AsyncSession = Depends(get_db)) -> BookService:
    """Dependency provider for BookService."""
    return BookService(db)


@router.post(
    "",
    response_model=BookResponse,
    status_code=status.HTTP_201_CREATED,
    responses={**INVALID, **CONFLICT},
)
async def create_book(
    submission: BookSubmission,
    service: BookService = Depends(get_book_service),
) -> Book:
    """Create a new book."""
    return await service.create_book(submission)


@router.get("", response_model=list[BookResponse])
async def list_books(
    service: BookService = Depends(get_book_service),
) -> list[Book]:
    """List all books."""
    return await service.list_books()


@router.get("/isbn/{isbn}", response_model=BookResponse, responses=NOT_FOUND)
async def get_book_by_isbn(
    isbn: str,
    service: BookService = Depends(get_book_service),
) -> Book:
    """Get a book by ISBN."""
    return await service.get_book_by_isbn(isbn)


@router.get("/{book_id}", response_model=BookResponse, responses=NOT_FOUND)
async def get_book(
    book_id: int,
    service: BookService = Depends(get_book_service),
) -> Book:
    """Get a book by ID."""
    return await service.get_book(book_id)


@router.put(
    "/{book_id}",
    response_model=BookResponse,
    responses={**INVALID, **NOT_FOUND, **CONFLICT},
)
async def update_book(
    book_id: int,
    submission: BookSubmission,
    service: BookService = Depends(get_book_service),
) -> Book:
    """Replace the title, author, ISBN and publication year of a book."""
    return await service.update_book(book_id, submission)


@router.delete(
    "/{book_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=NOT_FOUND,
)
async def delete_book(
    book_id: int,
    service: BookService = Depends(get_book_service),
) -> None:
    """Delete a book."""
    await service.delete_book(book_id)
