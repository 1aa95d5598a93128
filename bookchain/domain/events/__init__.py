"""Hashing primitives for the checkout chain."""

from bookchain.domain.events.hash_utils import (
    GENESIS_PREV_HASH,
    canonical_json,
    compute_block_hash,
    is_valid_sha256_hex,
)

__all__: list[str] = [
    "GENESIS_PREV_HASH",
    "canonical_json",
    "compute_block_hash",
    "is_valid_sha256_hex",
]
