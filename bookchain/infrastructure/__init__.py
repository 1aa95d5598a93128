"""Infrastructure adapters for Bookchain."""
