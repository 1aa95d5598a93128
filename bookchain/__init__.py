"""
Bookchain - append-only hash chain of book checkouts

Every checkout is sealed into a SHA-256 linked block. A block extends
the chain only if it links to the current tail, hashes to its own
stored digest, and sits exactly one position after the tail.
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
