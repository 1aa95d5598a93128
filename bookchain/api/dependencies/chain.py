"""Chain API dependencies.

The BlockChain is owned by the FastAPI application (``app.state.chain``)
and created by ``create_app``; there is no module-level chain. Tests
can swap it with ``app.dependency_overrides[get_block_chain]``.
"""

from fastapi import Depends, Request

from bookchain.application.services.book_registry_service import BookRegistryService
from bookchain.application.services.checkout_ledger_service import (
    CheckoutLedgerService,
)
from bookchain.domain.models.block_chain import BlockChain


def get_block_chain(request: Request) -> BlockChain:
    """Get the chain owned by the running application.

    Args:
        request: Incoming request, used to reach the application state.

    Returns:
        The application's BlockChain.
    """
    return request.app.state.chain


def get_checkout_ledger_service(
    chain: BlockChain = Depends(get_block_chain),
) -> CheckoutLedgerService:
    """Get a ledger service bound to the application's chain."""
    return CheckoutLedgerService(chain=chain)


def get_book_registry_service() -> BookRegistryService:
    """Get the book registry service."""
    return BookRegistryService()
