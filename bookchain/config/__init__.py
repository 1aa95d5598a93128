"""Configuration for Bookchain."""

from bookchain.config.server_config import (
    DEFAULT_SERVER_CONFIG,
    ServerConfig,
)

__all__: list[str] = ["DEFAULT_SERVER_CONFIG", "ServerConfig"]
