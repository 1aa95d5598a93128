"""HTTP boundary for Bookchain (FastAPI)."""
