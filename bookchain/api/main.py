"""FastAPI application entry point for Bookchain.

``create_app`` builds an application that owns its own BlockChain, so
several independent chains can coexist (one per app instance).
``app`` is the process-wide instance served by uvicorn.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from bookchain import __version__
from bookchain.api.middleware.logging_middleware import LoggingMiddleware
from bookchain.api.routes.books import router as books_router
from bookchain.api.routes.chain import router as chain_router
from bookchain.api.routes.health import router as health_router
from bookchain.api.startup import configure_logging, log_chain_blocks
from bookchain.config.server_config import ServerConfig
from bookchain.domain.models.block_chain import BlockChain


def create_app(
    chain: BlockChain | None = None,
    config: ServerConfig | None = None,
) -> FastAPI:
    """Build the Bookchain API.

    Args:
        chain: Chain to serve; a fresh one (genesis only) if omitted.
        config: Server configuration; read from the environment if omitted.

    Returns:
        Configured FastAPI application with the chain in ``app.state.chain``.
    """
    server_config = config or ServerConfig.from_environment()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        configure_logging(server_config)
        log_chain_blocks(app.state.chain)
        yield

    app = FastAPI(
        title="Bookchain API",
        description="Append-only hash chain of book checkouts",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.chain = chain if chain is not None else BlockChain()
    app.state.config = server_config

    app.add_middleware(LoggingMiddleware)
    app.include_router(health_router)
    app.include_router(chain_router)
    app.include_router(books_router)
    return app


app = create_app()
