"""Block entity for the checkout chain.

A block is built in a single step from a payload and its predecessor:
position, prev_hash, timestamp and hash are all derived at construction
and the block is sealed (frozen) from then on.

Blocks are never validated at construction. Deciding whether a block
may extend the chain is BlockChain's job.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any

from bookchain.domain.events.hash_utils import (
    GENESIS_PREV_HASH,
    compute_block_hash,
    is_valid_sha256_hex,
)
from bookchain.domain.models.checkout import CheckoutEvent

# Declared serialization order for external representations.
BLOCK_FIELDS: tuple[str, ...] = ("position", "payload", "timestamp", "hash", "prev_hash")


def _utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


@dataclass(frozen=True, eq=True)
class Block:
    """Sealed chain record holding one checkout event.

    Attributes:
        position: Index in the chain; 0 for genesis.
        payload: The checkout event carried by this block.
        timestamp: UTC ISO 8601 time the block was built.
        hash: SHA-256 over (position, timestamp, payload, prev_hash).
        prev_hash: Hash of the predecessor block ("" for genesis).

    Example:
        >>> genesis = Block.genesis()
        >>> block = Block.create(CheckoutEvent("b1", "alice", "2024-01-01"), genesis)
        >>> block.position, block.prev_hash == genesis.hash
        (1, True)
        >>> block.verify_hash(block.hash)
        True
    """

    position: int
    payload: CheckoutEvent
    timestamp: str
    hash: str
    prev_hash: str

    @classmethod
    def create(cls, payload: CheckoutEvent, predecessor: Block) -> Block:
        """Build and seal a block on top of ``predecessor``.

        Args:
            payload: Checkout event to embed.
            predecessor: Block this one links to.

        Returns:
            A new sealed block. Construction always succeeds.
        """
        return cls._seal(
            position=predecessor.position + 1,
            payload=payload,
            timestamp=_utc_timestamp(),
            prev_hash=predecessor.hash,
        )

    @classmethod
    def genesis(cls) -> Block:
        """Build the fixed first block of a chain."""
        return cls._seal(
            position=0,
            payload=CheckoutEvent.genesis(),
            timestamp=_utc_timestamp(),
            prev_hash=GENESIS_PREV_HASH,
        )

    @classmethod
    def _seal(
        cls,
        position: int,
        payload: CheckoutEvent,
        timestamp: str,
        prev_hash: str,
    ) -> Block:
        block_hash = compute_block_hash(position, timestamp, payload.to_dict(), prev_hash)
        return cls(
            position=position,
            payload=payload,
            timestamp=timestamp,
            hash=block_hash,
            prev_hash=prev_hash,
        )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Block:
        """Rebuild a block from its serialized form without re-sealing it.

        The stored hash is taken as-is so that tampering stays detectable.

        Raises:
            KeyError: If a required field is missing.
            ValueError: If a field has the wrong type, or a hash is not
                lowercase SHA-256 hex (prev_hash may also be the genesis
                sentinel).
        """
        position = data["position"]
        if not isinstance(position, int) or isinstance(position, bool):
            raise ValueError("position must be an integer")
        if not isinstance(data["payload"], dict):
            raise ValueError("payload must be an object")
        for name in ("timestamp", "hash", "prev_hash"):
            if not isinstance(data[name], str):
                raise ValueError(f"{name} must be a string")
        if not is_valid_sha256_hex(data["hash"]):
            raise ValueError("hash must be a lowercase SHA-256 hex digest")
        prev_hash = data["prev_hash"]
        if prev_hash != GENESIS_PREV_HASH and not is_valid_sha256_hex(prev_hash):
            raise ValueError("prev_hash must be a lowercase SHA-256 hex digest")
        return cls(
            position=position,
            payload=CheckoutEvent.from_dict(data["payload"]),
            timestamp=data["timestamp"],
            hash=data["hash"],
            prev_hash=prev_hash,
        )

    def compute_hash(self) -> str:
        """Recompute the hash from the block's current fields."""
        return compute_block_hash(
            self.position, self.timestamp, self.payload.to_dict(), self.prev_hash
        )

    def verify_hash(self, expected_hash: str) -> bool:
        """Report whether the recomputed hash equals ``expected_hash``.

        The stored hash is never touched, so a corrupt block keeps
        reporting False on every check.
        """
        return self.compute_hash() == expected_hash

    @property
    def is_genesis(self) -> bool:
        return self.position == 0 and self.payload.is_genesis

    def to_dict(self) -> dict[str, Any]:
        """Serialize in declared field order."""
        return {
            "position": self.position,
            "payload": self.payload.to_dict(),
            "timestamp": self.timestamp,
            "hash": self.hash,
            "prev_hash": self.prev_hash,
        }
