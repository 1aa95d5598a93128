"""Configuration errors."""

from bookchain.domain.exceptions import BookchainError


class ConfigurationError(BookchainError):
    """Raised when a configuration value is outside its allowed range.

    Usage:
        raise ConfigurationError("BOOKCHAIN_PORT must be in 1..65535, got 0")
    """

    pass
