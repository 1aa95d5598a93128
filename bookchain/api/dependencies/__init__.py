"""FastAPI dependencies for Bookchain."""
