"""Append-only chain of checkout blocks.

The chain always starts with a genesis block and grows only through
append, which is a single critical section:

    read tail -> build candidate -> validate link -> extend

A candidate extends the chain only when all three link checks pass:
    1. candidate.prev_hash == tail.hash     (not detached from the tail)
    2. candidate hash recomputes to itself  (not altered after sealing)
    3. candidate.position == tail.position + 1  (no skip or reorder)

A failed check is an expected outcome: the candidate is dropped, the
chain is untouched, and an AppendResult with the reason is returned.

Thread Safety:
- One threading.Lock per chain guards append and snapshot reads
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from enum import Enum

from bookchain.domain.models.block import Block
from bookchain.domain.models.checkout import CheckoutEvent
from bookchain.domain.services.chain_audit import ChainAuditReport, audit_blocks


class RejectionReason(str, Enum):
    """Why a candidate block was refused."""

    PREV_HASH_MISMATCH = "prev_hash_mismatch"
    HASH_MISMATCH = "hash_mismatch"
    POSITION_MISMATCH = "position_mismatch"


@dataclass(frozen=True)
class AppendResult:
    """Outcome of an append attempt.

    Attributes:
        accepted: True when the candidate became the new tail.
        block: The candidate block, accepted or not.
        reason: Why the candidate was rejected (None when accepted).
    """

    accepted: bool
    block: Block
    reason: RejectionReason | None = None


def validate_link(candidate: Block, tail: Block) -> RejectionReason | None:
    """Check whether ``candidate`` may directly follow ``tail``.

    Returns:
        None when the candidate is valid, otherwise the first failed check.
    """
    if candidate.prev_hash != tail.hash:
        return RejectionReason.PREV_HASH_MISMATCH
    if not candidate.verify_hash(candidate.hash):
        return RejectionReason.HASH_MISMATCH
    if tail.position + 1 != candidate.position:
        return RejectionReason.POSITION_MISMATCH
    return None


class BlockChain:
    """Ordered, append-only sequence of sealed blocks.

    Each instance is independent: the HTTP layer owns one, tests can
    build as many as they like.

    Example:
        >>> chain = BlockChain()
        >>> len(chain)
        1
        >>> result = chain.append(CheckoutEvent("b1", "alice", "2024-01-01"))
        >>> result.accepted, len(chain)
        (True, 2)
    """

    def __init__(self) -> None:
        """Create a chain holding only its genesis block."""
        self._lock = threading.Lock()
        self._blocks: list[Block] = [Block.genesis()]

    def append(self, payload: CheckoutEvent) -> AppendResult:
        """Seal ``payload`` into a new block on top of the current tail.

        Args:
            payload: Checkout event to record.

        Returns:
            AppendResult; rejected results leave the chain unchanged.
        """
        with self._lock:
            candidate = Block.create(payload, self._blocks[-1])
            return self._extend(candidate)

    def append_block(self, candidate: Block) -> AppendResult:
        """Validate an already built block against the current tail.

        Used when the candidate was constructed elsewhere, possibly on
        a stale predecessor.
        """
        with self._lock:
            return self._extend(candidate)

    def _extend(self, candidate: Block) -> AppendResult:
        # Caller must hold self._lock.
        reason = validate_link(candidate, self._blocks[-1])
        if reason is not None:
            return AppendResult(accepted=False, block=candidate, reason=reason)
        self._blocks.append(candidate)
        return AppendResult(accepted=True, block=candidate)

    def blocks(self) -> tuple[Block, ...]:
        """Consistent read-only snapshot of the chain, genesis first."""
        with self._lock:
            return tuple(self._blocks)

    @property
    def genesis(self) -> Block:
        with self._lock:
            return self._blocks[0]

    @property
    def tail(self) -> Block:
        with self._lock:
            return self._blocks[-1]

    def __len__(self) -> int:
        with self._lock:
            return len(self._blocks)

    def audit(self) -> ChainAuditReport:
        """Re-validate every sealed block in the chain."""
        return audit_blocks(self.blocks())

    def verify_integrity(self) -> None:
        """Audit the chain and raise if any sealed block is corrupt.

        Raises:
            ChainCorruptionError: On the first corrupt block found.
        """
        self.audit().raise_for_corruption()
