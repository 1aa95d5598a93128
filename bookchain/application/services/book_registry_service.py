"""Book registration service.

Derives book ids. Books are returned to the caller, not stored.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from bookchain.infrastructure.observability import get_logger_for_service

if TYPE_CHECKING:
    from bookchain.domain.models.book import Book


class BookRegistryService:
    """Registers book records by deriving their ids."""

    def __init__(self) -> None:
        self._log = get_logger_for_service(self.__class__.__name__, component="books")

    def register(self, book: Book) -> Book:
        """Return ``book`` with its id derived from isbn and publish_date."""
        registered = book.with_derived_id()
        self._log.info("book_registered", book_id=registered.id, isbn=registered.isbn)
        return registered
