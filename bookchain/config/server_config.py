"""HTTP server configuration.

Environment Variables:
- BOOKCHAIN_HOST: Interface to bind (default: 0.0.0.0)
- BOOKCHAIN_PORT: Port to listen on (default: 3000)
- ENVIRONMENT: 'production' for JSON logs (default: development)
- LOG_LEVEL: Log level name (default: INFO)
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from bookchain.domain.errors import ConfigurationError


def _get_int_env(key: str, default: int) -> int:
    """Get integer environment variable with default.

    Args:
        key: Environment variable name.
        default: Default value if not set or invalid.

    Returns:
        Parsed integer value or default.
    """
    value = os.environ.get(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


@dataclass(frozen=True)
class ServerConfig:
    """Configuration for the Bookchain HTTP server.

    Attributes:
        host: Interface to bind.
        port: TCP port, 1..65535.
        environment: Deployment environment name.
        log_level: Log level name.
    """

    host: str = "0.0.0.0"
    port: int = 3000
    environment: str = "development"
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        """Validate configuration values.

        Raises:
            ConfigurationError: If port is out of range or host is empty.
        """
        if not 1 <= self.port <= 65535:
            raise ConfigurationError(
                f"BOOKCHAIN_PORT must be in 1..65535, got {self.port}"
            )
        if not self.host:
            raise ConfigurationError("BOOKCHAIN_HOST must not be empty")

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @classmethod
    def from_environment(cls) -> ServerConfig:
        """Create configuration from environment variables.

        Returns:
            ServerConfig with environment overrides applied.

        Raises:
            ConfigurationError: If an override is out of range.
        """
        return cls(
            host=os.environ.get("BOOKCHAIN_HOST", cls.host),
            port=_get_int_env("BOOKCHAIN_PORT", cls.port),
            environment=os.environ.get("ENVIRONMENT", cls.environment),
            log_level=os.environ.get("LOG_LEVEL", cls.log_level).upper(),
        )


# Default configuration instance
DEFAULT_SERVER_CONFIG = ServerConfig()
