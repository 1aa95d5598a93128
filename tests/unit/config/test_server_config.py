"""Unit tests for ServerConfig."""

from __future__ import annotations

import dataclasses

import pytest

from bookchain.config.server_config import DEFAULT_SERVER_CONFIG, ServerConfig
from bookchain.domain.errors import ConfigurationError


class TestServerConfigDefaults:
    def test_defaults(self) -> None:
        assert DEFAULT_SERVER_CONFIG.host == "0.0.0.0"
        assert DEFAULT_SERVER_CONFIG.port == 3000
        assert DEFAULT_SERVER_CONFIG.environment == "development"
        assert DEFAULT_SERVER_CONFIG.log_level == "INFO"
        assert DEFAULT_SERVER_CONFIG.is_production is False

    def test_frozen(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            DEFAULT_SERVER_CONFIG.port = 8000  # type: ignore[misc]


class TestServerConfigValidation:
    @pytest.mark.parametrize("port", [0, -1, 65536])
    def test_rejects_out_of_range_port(self, port: int) -> None:
        with pytest.raises(ConfigurationError, match="BOOKCHAIN_PORT"):
            ServerConfig(port=port)

    def test_rejects_empty_host(self) -> None:
        with pytest.raises(ConfigurationError, match="BOOKCHAIN_HOST"):
            ServerConfig(host="")


class TestFromEnvironment:
    def test_reads_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("BOOKCHAIN_HOST", "127.0.0.1")
        monkeypatch.setenv("BOOKCHAIN_PORT", "8080")
        monkeypatch.setenv("ENVIRONMENT", "production")
        monkeypatch.setenv("LOG_LEVEL", "debug")

        config = ServerConfig.from_environment()

        assert config == ServerConfig(
            host="127.0.0.1", port=8080, environment="production", log_level="DEBUG"
        )
        assert config.is_production

    def test_defaults_without_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for key in ("BOOKCHAIN_HOST", "BOOKCHAIN_PORT", "ENVIRONMENT", "LOG_LEVEL"):
            monkeypatch.delenv(key, raising=False)

        assert ServerConfig.from_environment() == DEFAULT_SERVER_CONFIG

    def test_invalid_port_falls_back_to_default(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("BOOKCHAIN_PORT", "not-a-number")
        assert ServerConfig.from_environment().port == 3000

    def test_out_of_range_port_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("BOOKCHAIN_PORT", "70000")
        with pytest.raises(ConfigurationError):
            ServerConfig.from_environment()
