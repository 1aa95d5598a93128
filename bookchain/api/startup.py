"""Startup hooks for the Bookchain API.

1. Configure structured logging
2. Log every block of the freshly created chain

Usage:
    configure_logging(config)
    log_chain_blocks(chain)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from structlog import get_logger

from bookchain.infrastructure.observability import configure_structlog

if TYPE_CHECKING:
    from bookchain.config.server_config import ServerConfig
    from bookchain.domain.models.block_chain import BlockChain


def configure_logging(config: ServerConfig) -> None:
    """Configure structlog for the configured environment.

    Should be called first in the startup sequence, before any logging occurs.
    """
    configure_structlog(environment=config.environment, log_level=config.log_level)

    log = get_logger().bind(component="startup_logging")
    log.info("structured_logging_configured", environment=config.environment)


def log_chain_blocks(chain: BlockChain) -> None:
    """Log each block of ``chain`` so operators can see the starting state."""
    log = get_logger().bind(component="startup_chain")
    for block in chain.blocks():
        log.info(
            "chain_block_loaded",
            position=block.position,
            prev_hash=block.prev_hash,
            payload=block.payload.to_dict(),
            hash=block.hash,
        )
