"""Hash utilities for the checkout chain.

Every block is sealed with a SHA-256 digest over its canonical fields.
The digest links each block to its predecessor and makes any later
field change detectable.

Canonical block input is the plain concatenation, in this order, of:
    1. position as a decimal string ("0", "1", "12", ...)
    2. timestamp string, verbatim
    3. payload as compact JSON, keys in declared order
    4. prev_hash string, verbatim

Example:
    position=1, timestamp="2024-01-01T00:00:00+00:00",
    payload={"book_id": "b1", "user": "alice", ...}, prev_hash="ab12..."

    -> '12024-01-01T00:00:00+00:00{"book_id":"b1","user":"alice",...}ab12...'
"""

from __future__ import annotations

import hashlib
import json
from collections.abc import Mapping
from typing import Any

# prev_hash of the genesis block: it has no predecessor
GENESIS_PREV_HASH: str = ""

_HEX_DIGITS = frozenset("0123456789abcdef")


def canonical_json(data: Any) -> str:
    """Produce deterministic JSON representation for hashing.

    Keys are emitted in insertion order, so callers must build mappings
    from a fixed field list. The output is compact (no whitespace) and
    does not escape non-ASCII characters.

    Args:
        data: Any JSON-serializable data.

    Returns:
        Canonical JSON string suitable for hashing.

    Example:
        >>> canonical_json({"b": 1, "a": True})
        '{"b":1,"a":true}'
    """
    return json.dumps(
        data,
        separators=(",", ":"),
        ensure_ascii=False,
        allow_nan=False,
    )


def compute_block_hash(
    position: int,
    timestamp: str,
    payload: Mapping[str, Any],
    prev_hash: str,
) -> str:
    """Compute the SHA-256 hash of a block's canonical fields.

    Args:
        position: Block position in the chain (>= 0).
        timestamp: Block timestamp string.
        payload: Serialized checkout payload in declared field order.
        prev_hash: Hash of the predecessor block ("" for genesis).

    Returns:
        Lowercase hexadecimal SHA-256 hash (64 characters).

    Example:
        >>> len(compute_block_hash(0, "t", {"is_genesis": True}, ""))
        64
    """
    canonical = f"{position:d}{timestamp}{canonical_json(dict(payload))}{prev_hash}"
    return hashlib.sha256(canonical.encode("utf-8")).hexdigest()


def is_valid_sha256_hex(value: str) -> bool:
    """Check if a string is a valid SHA-256 hexadecimal hash.

    Args:
        value: The string to validate.

    Returns:
        True if the string is a valid 64-character lowercase hexadecimal string.
    """
    return len(value) == 64 and all(c in _HEX_DIGITS for c in value)
