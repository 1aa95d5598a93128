"""Application services for Bookchain."""

from bookchain.application.services.book_registry_service import BookRegistryService
from bookchain.application.services.checkout_ledger_service import (
    CheckoutLedgerService,
)

__all__: list[str] = ["BookRegistryService", "CheckoutLedgerService"]
