"""Checkout ledger service.

Thin use-case layer between the HTTP boundary and the BlockChain. It
records checkouts, exposes the chain for reads, and runs full-chain
audits, logging every outcome.

Developer Golden Rules:
1. REJECTION IS NOT FAILURE - a refused append is returned, never raised
2. CORRUPTION IS LOUD - audit failures are logged at error level
3. NO REPAIR - corrupt chains are reported as-is
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from bookchain.infrastructure.observability import get_logger_for_service

if TYPE_CHECKING:
    from bookchain.domain.models.block import Block
    from bookchain.domain.models.block_chain import AppendResult, BlockChain
    from bookchain.domain.models.checkout import CheckoutEvent
    from bookchain.domain.services.chain_audit import ChainAuditReport


class CheckoutLedgerService:
    """Records book checkouts on a BlockChain.

    Example:
        >>> service = CheckoutLedgerService(chain=BlockChain())
        >>> result = service.record_checkout(
        ...     CheckoutEvent("b1", "alice", "2024-01-01")
        ... )
        >>> result.accepted
        True
    """

    def __init__(self, chain: BlockChain) -> None:
        """Initialize the service.

        Args:
            chain: The chain checkouts are recorded on.
        """
        self._chain = chain
        self._log = get_logger_for_service(self.__class__.__name__)

    @property
    def chain(self) -> BlockChain:
        return self._chain

    def record_checkout(self, event: CheckoutEvent) -> AppendResult:
        """Append a checkout to the chain.

        Args:
            event: Decoded checkout event.

        Returns:
            AppendResult; check ``accepted`` before using the block.
        """
        result = self._chain.append(event)
        self._log_result(result)
        return result

    def submit_block(self, candidate: Block) -> AppendResult:
        """Offer a pre-built block to the chain.

        Args:
            candidate: Block built by the caller, possibly on a stale tail.
        """
        result = self._chain.append_block(candidate)
        self._log_result(result)
        return result

    def _log_result(self, result: AppendResult) -> None:
        log = self._log.bind(
            position=result.block.position,
            book_id=result.block.payload.book_id,
        )
        if result.accepted:
            log.info("checkout_appended", hash=result.block.hash)
        else:
            log.warning(
                "checkout_rejected",
                reason=result.reason.value if result.reason else None,
                prev_hash=result.block.prev_hash,
            )

    def list_blocks(self) -> tuple[Block, ...]:
        """Snapshot of every block, genesis first."""
        return self._chain.blocks()

    def audit_chain(self) -> ChainAuditReport:
        """Re-validate every sealed block.

        Returns:
            The audit report. Corruption is logged, never repaired.
        """
        report = self._chain.audit()
        if report.is_valid:
            self._log.info("chain_audit_passed", blocks_verified=report.blocks_verified)
        else:
            self._log.error(
                "chain_audit_failed",
                first_invalid_position=report.first_invalid_position,
                error_type=report.error_type,
                error_message=report.error_message,
            )
        return report
