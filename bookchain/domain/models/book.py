"""Book record.

Books are registered through the API and echoed back with a derived id.
They are not stored and the chain never references them.
"""

from __future__ import annotations

import hashlib
from dataclasses import dataclass, replace


def derive_book_id(isbn: str, publish_date: str) -> str:
    """Derive a book id as the MD5 hex digest of isbn + publish_date.

    MD5 is an identifier here, not a security control.

    Example:
        >>> derive_book_id("", "")
        'd41d8cd98f00b204e9800998ecf8427e'
    """
    return hashlib.md5(
        f"{isbn}{publish_date}".encode("utf-8"), usedforsecurity=False
    ).hexdigest()


@dataclass(frozen=True, eq=True)
class Book:
    """A book that may be checked out.

    Attributes:
        title: Book title.
        author: Book author.
        publish_date: Publication date as supplied.
        isbn: International Standard Book Number.
        id: Derived identifier ("" until registered).
    """

    title: str
    author: str
    publish_date: str
    isbn: str
    id: str = ""

    def with_derived_id(self) -> Book:
        """Return a copy whose id is derived from isbn and publish_date."""
        return replace(self, id=derive_book_id(self.isbn, self.publish_date))
