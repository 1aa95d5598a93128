"""Unit tests for LoggingMiddleware."""

from __future__ import annotations

from uuid import UUID

from fastapi import FastAPI
from fastapi.testclient import TestClient
from structlog.testing import capture_logs

from bookchain.api.middleware.logging_middleware import (
    CORRELATION_HEADER,
    LoggingMiddleware,
)
from bookchain.infrastructure.observability import get_correlation_id


def _build_app() -> FastAPI:
    app = FastAPI()
    app.add_middleware(LoggingMiddleware)

    @app.get("/ping")
    async def ping() -> dict[str, str]:
        return {"correlation_id": get_correlation_id()}

    @app.get("/boom")
    async def boom() -> None:
        raise RuntimeError("boom")

    return app


class TestLoggingMiddleware:
    def test_generates_correlation_id(self) -> None:
        client = TestClient(_build_app())

        response = client.get("/ping")

        correlation_id = response.headers[CORRELATION_HEADER]
        assert UUID(correlation_id).version == 4
        assert response.json()["correlation_id"] == correlation_id

    def test_propagates_incoming_correlation_id(self) -> None:
        client = TestClient(_build_app())

        response = client.get("/ping", headers={CORRELATION_HEADER: "req-1"})

        assert response.headers[CORRELATION_HEADER] == "req-1"
        assert response.json()["correlation_id"] == "req-1"

    def test_logs_request_lifecycle(self) -> None:
        client = TestClient(_build_app())

        with capture_logs() as logs:
            client.get("/ping")

        events = [log["event"] for log in logs]
        assert events == ["request_started", "request_completed"]
        completed = logs[1]
        assert completed["status_code"] == 200
        assert completed["method"] == "GET"
        assert completed["path"] == "/ping"
        assert "duration_ms" in completed

    def test_logs_request_failure(self) -> None:
        client = TestClient(_build_app(), raise_server_exceptions=False)

        with capture_logs() as logs:
            response = client.get("/boom")

        assert response.status_code == 500
        failed = next(log for log in logs if log["event"] == "request_failed")
        assert failed["error_type"] == "RuntimeError"
        assert failed["log_level"] == "error"
