"""Domain errors for Bookchain.

Provides specific exception classes for different failure scenarios.
All exceptions inherit from BookchainError.
"""

from bookchain.domain.errors.chain import (
    BlockHashMismatchError,
    ChainCorruptionError,
    ChainLinkBrokenError,
    ChainPositionGapError,
    GenesisBlockError,
)
from bookchain.domain.errors.configuration import ConfigurationError

__all__: list[str] = [
    "BlockHashMismatchError",
    "ChainCorruptionError",
    "ChainLinkBrokenError",
    "ChainPositionGapError",
    "ConfigurationError",
    "GenesisBlockError",
]
