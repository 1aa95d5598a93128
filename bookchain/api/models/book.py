"""Book API request/response models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from bookchain.domain.models.book import Book


class BookRequest(BaseModel):
    """Request to register a book."""

    title: str = Field(..., description="Book title")
    author: str = Field(..., description="Book author")
    publish_date: str = Field(..., description="Publication date")
    isbn: str = Field(..., description="International Standard Book Number")

    def to_domain(self) -> Book:
        return Book(
            title=self.title,
            author=self.author,
            publish_date=self.publish_date,
            isbn=self.isbn,
        )


class BookResponse(BaseModel):
    """Registered book with its derived id.

    Attributes:
        id: MD5 hex digest of isbn + publish_date.
    """

    id: str
    title: str
    author: str
    publish_date: str
    isbn: str

    @classmethod
    def from_domain(cls, book: Book) -> BookResponse:
        return cls(
            id=book.id,
            title=book.title,
            author=book.author,
            publish_date=book.publish_date,
            isbn=book.isbn,
        )
