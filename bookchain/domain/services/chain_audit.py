"""Full-chain audit of sealed blocks.

Append-time validation only checks a candidate against the tail. This
module re-walks an entire block sequence and reports the first block
that no longer satisfies the chain invariants:

    - block 0 is a genesis block with prev_hash ""
    - positions are consecutive
    - prev_hash equals the predecessor's hash
    - every stored hash equals its recomputed hash

Pure function; it never repairs anything.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

from bookchain.domain.errors import (
    BlockHashMismatchError,
    ChainCorruptionError,
    ChainLinkBrokenError,
    ChainPositionGapError,
    GenesisBlockError,
)
from bookchain.domain.events.hash_utils import GENESIS_PREV_HASH

if TYPE_CHECKING:
    from bookchain.domain.models.block import Block

ERROR_EMPTY_CHAIN = "empty_chain"
ERROR_GENESIS_MISMATCH = "genesis_mismatch"
ERROR_CHAIN_BREAK = "chain_break"
ERROR_POSITION_GAP = "position_gap"
ERROR_HASH_MISMATCH = "hash_mismatch"


@dataclass(frozen=True)
class ChainAuditReport:
    """Result of auditing a block sequence.

    Attributes:
        is_valid: True when every block satisfies the chain invariants.
        blocks_verified: Number of blocks checked before the first failure.
        first_invalid_position: Position of the first corrupt block.
        error_type: One of the ERROR_* constants.
        error_message: Human-readable description.
        expected: Value the corrupt field should hold.
        actual: Value the corrupt field does hold.
    """

    is_valid: bool
    blocks_verified: int
    first_invalid_position: int | None = None
    error_type: str | None = None
    error_message: str | None = None
    expected: str | None = None
    actual: str | None = None

    def raise_for_corruption(self) -> None:
        """Raise the matching ChainCorruptionError if the audit failed.

        Raises:
            BlockHashMismatchError: A stored hash no longer matches.
            ChainLinkBrokenError: A prev_hash does not match its predecessor.
            ChainPositionGapError: Positions are not consecutive.
            GenesisBlockError: The first block is not a genesis block.
            ChainCorruptionError: The chain is empty.
        """
        if self.is_valid:
            return
        position = self.first_invalid_position if self.first_invalid_position is not None else 0
        if self.error_type == ERROR_HASH_MISMATCH:
            raise BlockHashMismatchError(
                position=position,
                expected_hash=self.expected or "",
                actual_hash=self.actual or "",
            )
        if self.error_type == ERROR_EMPTY_CHAIN:
            raise ChainCorruptionError(position, "Chain has no genesis block")
        if self.error_type == ERROR_GENESIS_MISMATCH:
            raise GenesisBlockError(position)
        if self.error_type == ERROR_POSITION_GAP:
            raise ChainPositionGapError(
                position=position,
                expected_position=int(self.expected or position),
                actual_position=int(self.actual or position),
            )
        raise ChainLinkBrokenError(
            position=position,
            expected_prev_hash=self.expected or "",
            actual_prev_hash=self.actual or "",
        )


def audit_blocks(blocks: Sequence[Block]) -> ChainAuditReport:
    """Audit a block sequence from genesis to tail.

    Args:
        blocks: Blocks in chain order.

    Returns:
        ChainAuditReport describing the first failure, if any.
    """
    if not blocks:
        return ChainAuditReport(
            is_valid=False,
            blocks_verified=0,
            first_invalid_position=0,
            error_type=ERROR_EMPTY_CHAIN,
            error_message="Chain has no genesis block",
        )

    genesis = blocks[0]
    if genesis.position != 0 or genesis.prev_hash != GENESIS_PREV_HASH or not genesis.payload.is_genesis:
        return ChainAuditReport(
            is_valid=False,
            blocks_verified=0,
            first_invalid_position=genesis.position,
            error_type=ERROR_GENESIS_MISMATCH,
            error_message=(
                "First block must be a genesis block at position 0 "
                "with an empty prev_hash"
            ),
            expected=GENESIS_PREV_HASH,
            actual=genesis.prev_hash,
        )

    previous: Block | None = None
    for index, block in enumerate(blocks):
        if previous is not None:
            if block.prev_hash != previous.hash:
                return ChainAuditReport(
                    is_valid=False,
                    blocks_verified=index,
                    first_invalid_position=block.position,
                    error_type=ERROR_CHAIN_BREAK,
                    error_message=(
                        f"Block {block.position} prev_hash doesn't match "
                        "previous block hash"
                    ),
                    expected=previous.hash,
                    actual=block.prev_hash,
                )
            if block.position != previous.position + 1:
                return ChainAuditReport(
                    is_valid=False,
                    blocks_verified=index,
                    first_invalid_position=block.position,
                    error_type=ERROR_POSITION_GAP,
                    error_message=(
                        f"Expected position {previous.position + 1}, "
                        f"got {block.position}"
                    ),
                    expected=str(previous.position + 1),
                    actual=str(block.position),
                )

        recomputed = block.compute_hash()
        if recomputed != block.hash:
            return ChainAuditReport(
                is_valid=False,
                blocks_verified=index,
                first_invalid_position=block.position,
                error_type=ERROR_HASH_MISMATCH,
                error_message=f"Block {block.position} hash doesn't match its content",
                expected=recomputed,
                actual=block.hash,
            )
        previous = block

    return ChainAuditReport(is_valid=True, blocks_verified=len(blocks))
