"""Chain API routes.

FastAPI router for reading the checkout chain and appending to it.

Developer Golden Rules:
1. DECODE AT THE EDGE - pydantic rejects malformed bodies (422)
2. REJECTION IS A RESULT - a refused append maps to 409, never 500
3. READS ARE SNAPSHOTS - never observe a chain mid-append
"""

from fastapi import APIRouter, Depends, HTTPException, Request

from bookchain.api.dependencies.chain import get_checkout_ledger_service
from bookchain.api.models.chain import (
    AppendRejectedResponse,
    BlockResponse,
    ChainAuditResponse,
    ChainResponse,
    CheckoutRequest,
)
from bookchain.application.services.checkout_ledger_service import (
    CheckoutLedgerService,
)

router = APIRouter(prefix="/v1/chain", tags=["chain"])


@router.get("", response_model=ChainResponse)
async def get_chain(
    service: CheckoutLedgerService = Depends(get_checkout_ledger_service),
) -> ChainResponse:
    """Get every block in the chain, genesis first.

    Args:
        service: Injected ledger service.

    Returns:
        ChainResponse with the ordered blocks.
    """
    blocks = service.list_blocks()
    return ChainResponse(
        length=len(blocks),
        blocks=[BlockResponse.from_domain(block) for block in blocks],
    )


@router.post(
    "",
    response_model=BlockResponse,
    status_code=201,
    responses={
        409: {
            "model": AppendRejectedResponse,
            "description": "Candidate block failed linkage validation",
        },
    },
    summary="Record a book checkout",
)
async def append_checkout(
    request_data: CheckoutRequest,
    request: Request,
    service: CheckoutLedgerService = Depends(get_checkout_ledger_service),
) -> BlockResponse:
    """Seal a checkout into a new block at the tail of the chain.

    Args:
        request_data: Decoded checkout.
        request: FastAPI request for error context.
        service: Injected ledger service.

    Returns:
        The newly appended block.

    Raises:
        HTTPException 409: The candidate block was rejected.
    """
    result = service.record_checkout(request_data.to_domain())
    if not result.accepted:
        reason = result.reason.value if result.reason else "unknown"
        raise HTTPException(
            status_code=409,
            detail={
                "type": "urn:bookchain:chain:append-rejected",
                "title": "Append Rejected",
                "status": 409,
                "detail": (
                    f"Block at position {result.block.position} failed "
                    f"linkage validation: {reason}"
                ),
                "instance": str(request.url),
                "reason": reason,
            },
        )
    return BlockResponse.from_domain(result.block)


@router.get("/audit", response_model=ChainAuditResponse)
async def audit_chain(
    service: CheckoutLedgerService = Depends(get_checkout_ledger_service),
) -> ChainAuditResponse:
    """Re-validate every sealed block and report the first corruption.

    Returns:
        ChainAuditResponse; ``is_valid`` is False when corruption is found.
    """
    return ChainAuditResponse.from_domain(service.audit_chain())
