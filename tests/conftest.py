"""
Pytest configuration and shared fixtures for Bookchain tests.

Testing Standards:
- Async tests run in pytest-asyncio auto mode (see pyproject.toml)
- Unit tests go in tests/unit/
- Integration tests go in tests/integration/
"""

from collections.abc import Iterator

import pytest
import structlog

from bookchain.domain.models.block_chain import BlockChain
from bookchain.domain.models.checkout import CheckoutEvent


@pytest.fixture(autouse=True)
def reset_structlog() -> Iterator[None]:
    """Restore structlog defaults so tests never share logging config."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def project_version() -> str:
    """Provide the current project version for tests."""
    from bookchain import __version__

    return __version__


@pytest.fixture
def chain() -> BlockChain:
    """Fresh chain holding only its genesis block."""
    return BlockChain()


@pytest.fixture
def alice_checkout() -> CheckoutEvent:
    """The checkout used throughout the reference scenario."""
    return CheckoutEvent(
        book_id="b1",
        user="alice",
        checkout_date="2024-01-01",
        is_genesis=False,
    )
