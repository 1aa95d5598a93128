"""Checkout event payload carried by every block.

The chain treats every field as opaque data. book_id is not checked
against any Book record.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

# Declared serialization order. Hashes depend on it: never reorder.
CHECKOUT_FIELDS: tuple[str, ...] = ("book_id", "user", "checkout_date", "is_genesis")


@dataclass(frozen=True, eq=True)
class CheckoutEvent:
    """A single book checkout, embedded verbatim into a Block.

    Attributes:
        book_id: Identifier of the checked-out book.
        user: Who checked the book out.
        checkout_date: Checkout date as supplied by the caller.
        is_genesis: True only for the sentinel payload of the genesis block.
    """

    book_id: str
    user: str
    checkout_date: str
    is_genesis: bool = False

    @classmethod
    def genesis(cls) -> CheckoutEvent:
        """Sentinel payload of the genesis block."""
        return cls(book_id="", user="", checkout_date="", is_genesis=True)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> CheckoutEvent:
        """Rebuild an event from its serialized form.

        Values are not coerced: a field of the wrong JSON type is rejected
        rather than converted, so an edited export cannot sneak through.

        Raises:
            KeyError: If a required field is missing.
            ValueError: If a field has the wrong type.
        """
        for name in ("book_id", "user", "checkout_date"):
            if not isinstance(data[name], str):
                raise ValueError(f"{name} must be a string")
        is_genesis = data.get("is_genesis", False)
        if not isinstance(is_genesis, bool):
            raise ValueError("is_genesis must be a boolean")
        return cls(
            book_id=data["book_id"],
            user=data["user"],
            checkout_date=data["checkout_date"],
            is_genesis=is_genesis,
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize in declared field order."""
        return {name: getattr(self, name) for name in CHECKOUT_FIELDS}
