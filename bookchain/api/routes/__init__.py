"""API routers for Bookchain."""
