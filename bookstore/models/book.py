"""Book model."""
from datetime import datetime

from sqlalchemy import DateTime, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from bookstore.database import Base

ISBN_CONSTRAINT = "uq_books_isbn"


class Book(Base):
    """Book record in the catalog.

    Timestamps are assigned by the persistence layer, not by database
    defaults, so ``created_at`` equals ``updated_at`` right after insert.
    """

    __tablename__ = "books"
    __table_args__ = (UniqueConstraint("isbn", name=ISBN_CONSTRAINT),)

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    author: Mapped[str] = mapped_column(String(255), nullable=False)
    isbn: Mapped[str] = mapped_column(String(32), nullable=False, index=True)
    publication_year: Mapped[int] = mapped_column(Integer, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)

    def __repr__(self) -> str:
        return f"<Book(id={self.id}, title={self.title}, isbn={self.isbn})>"
