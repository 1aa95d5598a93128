"""Chain API request/response models.

Field order in every response model is fixed and matches the order
used for hashing, so external representations are reproducible.
"""

from __future__ import annotations

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from bookchain.domain.models.block import Block
from bookchain.domain.models.checkout import CheckoutEvent
from bookchain.domain.services.chain_audit import ChainAuditReport


class CheckoutPayload(BaseModel):
    """Checkout event as carried inside a block."""

    book_id: str = Field(..., description="Identifier of the checked-out book")
    user: str = Field(..., description="Who checked the book out")
    checkout_date: str = Field(..., description="Checkout date as supplied")
    is_genesis: bool = Field(default=False, description="True only for genesis")

    @classmethod
    def from_domain(cls, event: CheckoutEvent) -> CheckoutPayload:
        return cls(**event.to_dict())


class CheckoutRequest(BaseModel):
    """Request to record a book checkout.

    ``check_date`` is accepted as an alias of ``checkout_date``.
    """

    model_config = ConfigDict(extra="ignore")

    book_id: str = Field(..., description="Identifier of the checked-out book")
    user: str = Field(..., description="Who checks the book out")
    checkout_date: str = Field(
        ...,
        validation_alias=AliasChoices("checkout_date", "check_date"),
        description="Checkout date, stored verbatim",
    )
    is_genesis: bool = Field(default=False)

    def to_domain(self) -> CheckoutEvent:
        return CheckoutEvent(
            book_id=self.book_id,
            user=self.user,
            checkout_date=self.checkout_date,
            is_genesis=self.is_genesis,
        )


class BlockResponse(BaseModel):
    """A sealed block.

    Attributes:
        position: Index in the chain; 0 for genesis.
        payload: The checkout event.
        timestamp: UTC ISO 8601 time the block was built.
        hash: SHA-256 hex digest of the block.
        prev_hash: Hash of the predecessor ("" for genesis).
    """

    position: int
    payload: CheckoutPayload
    timestamp: str
    hash: str
    prev_hash: str

    @classmethod
    def from_domain(cls, block: Block) -> BlockResponse:
        return cls(
            position=block.position,
            payload=CheckoutPayload.from_domain(block.payload),
            timestamp=block.timestamp,
            hash=block.hash,
            prev_hash=block.prev_hash,
        )


class ChainResponse(BaseModel):
    """Full chain, genesis first."""

    length: int
    blocks: list[BlockResponse]


class AppendRejectedResponse(BaseModel):
    """RFC 7807 problem body for a rejected append."""

    type: str
    title: str
    status: int
    detail: str
    instance: str
    reason: str


class ChainAuditResponse(BaseModel):
    """Result of re-validating every sealed block."""

    is_valid: bool
    blocks_verified: int
    first_invalid_position: int | None = None
    error_type: str | None = None
    error_message: str | None = None

    @classmethod
    def from_domain(cls, report: ChainAuditReport) -> ChainAuditResponse:
        return cls(
            is_valid=report.is_valid,
            blocks_verified=report.blocks_verified,
            first_invalid_position=report.first_invalid_position,
            error_type=report.error_type,
            error_message=report.error_message,
        )
