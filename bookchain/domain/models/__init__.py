"""Domain models for Bookchain."""

from bookchain.domain.models.block import BLOCK_FIELDS, Block
from bookchain.domain.models.block_chain import (
    AppendResult,
    BlockChain,
    RejectionReason,
    validate_link,
)
from bookchain.domain.models.book import Book, derive_book_id
from bookchain.domain.models.checkout import CHECKOUT_FIELDS, CheckoutEvent

__all__: list[str] = [
    "AppendResult",
    "BLOCK_FIELDS",
    "Block",
    "BlockChain",
    "Book",
    "CHECKOUT_FIELDS",
    "CheckoutEvent",
    "RejectionReason",
    "derive_book_id",
    "validate_link",
]
