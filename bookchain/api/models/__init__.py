"""Pydantic request/response models for the Bookchain API."""
