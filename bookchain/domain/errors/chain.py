"""Chain corruption errors.

Raised only when a full-chain audit finds that an already sealed
block no longer matches its own hash or its predecessor. A rejected
append is NOT an error: it is reported as an AppendResult value.

Corruption is never repaired automatically.
"""

from __future__ import annotations

from bookchain.domain.exceptions import BookchainError


class ChainCorruptionError(BookchainError):
    """Base class for integrity failures on sealed blocks.

    Attributes:
        position: Position of the first corrupt block.
    """

    def __init__(self, position: int, message: str) -> None:
        """Initialize the error.

        Args:
            position: Position of the first corrupt block.
            message: Human-readable error description.
        """
        self.position = position
        super().__init__(message)


class BlockHashMismatchError(ChainCorruptionError):
    """A sealed block's stored hash differs from its recomputed hash.

    Indicates a field of the block was altered after sealing.

    Attributes:
        position: Position of the tampered block.
        expected_hash: Hash recomputed from the block's current fields.
        actual_hash: Hash stored on the block.
    """

    def __init__(self, position: int, expected_hash: str, actual_hash: str) -> None:
        """Initialize the error.

        Args:
            position: Position of the tampered block.
            expected_hash: Hash recomputed from the block's current fields.
            actual_hash: Hash stored on the block.
        """
        self.expected_hash = expected_hash
        self.actual_hash = actual_hash
        super().__init__(
            position,
            f"Hash mismatch at position {position} - chain integrity compromised",
        )


class ChainLinkBrokenError(ChainCorruptionError):
    """A block does not link to its predecessor.

    Raised when prev_hash differs from the predecessor's hash.

    Attributes:
        position: Position of the broken link.
        expected_prev_hash: What prev_hash should be.
        actual_prev_hash: What prev_hash actually is.
    """

    def __init__(
        self,
        position: int,
        expected_prev_hash: str,
        actual_prev_hash: str,
    ) -> None:
        """Initialize the error.

        Args:
            position: Position of the broken link.
            expected_prev_hash: What prev_hash should be.
            actual_prev_hash: What prev_hash actually is.
        """
        self.expected_prev_hash = expected_prev_hash
        self.actual_prev_hash = actual_prev_hash
        super().__init__(
            position,
            f"Hash chain broken at position {position} - chain integrity compromised",
        )


class ChainPositionGapError(ChainCorruptionError):
    """A block's position does not follow its predecessor's.

    Attributes:
        position: Position of the block that breaks the sequence.
        expected_position: Predecessor position + 1.
        actual_position: Position stored on the block.
    """

    def __init__(self, position: int, expected_position: int, actual_position: int) -> None:
        self.expected_position = expected_position
        self.actual_position = actual_position
        super().__init__(
            position,
            f"Position gap at position {position} - expected {expected_position}, "
            f"got {actual_position}",
        )


class GenesisBlockError(ChainCorruptionError):
    """The first block is not a well-formed genesis block."""

    def __init__(self, position: int) -> None:
        super().__init__(
            position,
            "First block must be a genesis block at position 0 with an empty prev_hash",
        )
