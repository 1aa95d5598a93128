"""Health check endpoint for Bookchain API."""

from fastapi import APIRouter, Depends

from bookchain.api.dependencies.chain import get_block_chain
from bookchain.api.models.health import HealthResponse
from bookchain.domain.models.block_chain import BlockChain

router = APIRouter(prefix="/v1", tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(
    chain: BlockChain = Depends(get_block_chain),
) -> HealthResponse:
    """Return health status.

    Returns:
        Health status with 200 OK.
    """
    return HealthResponse(status="healthy", chain_length=len(chain))
