"""Health check response models."""

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Health check response model.

    Attributes:
        status: Health status string (e.g., "healthy").
        chain_length: Number of blocks currently in the chain.
    """

    status: str
    chain_length: int
