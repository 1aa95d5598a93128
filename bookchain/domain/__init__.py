"""Domain layer for Bookchain.

Pure in-memory model of the checkout chain: hashing, blocks, and the
chain itself. Nothing in this package performs I/O.
"""
