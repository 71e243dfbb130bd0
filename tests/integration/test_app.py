"""
Integration tests for the assembled application.

Runs the lifespan against the bundled registry.
"""

import logging

import pytest
from fastapi.testclient import TestClient

from src.api.main import app


@pytest.fixture
def client():
    """Create test client with lifespan events."""
    with TestClient(app) as test_client:
        yield test_client


class TestLifespan:
    """Tests for startup behaviour."""

    def test_health_reports_loaded_schemes(self, client: TestClient) -> None:
        response = client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["schemes"] == len(app.state.registry)

    def test_startup_runs_check(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.INFO), TestClient(app):
            pass

        assert "Application startup complete" in caplog.text
        assert "[DEFANG] Checked" in caplog.text


class TestEndToEnd:
    """Tests for v1 endpoints over the bundled registry."""

    def test_defang_then_refang(self, client: TestClient) -> None:
        defanged = client.get("/v1/defang/mailto").json()["defanged"]
        assert defanged == "mxxlto"

        response = client.get(f"/v1/refang/{defanged}")
        assert response.json()["scheme"] == "mailto"

    def test_verify_passes(self, client: TestClient) -> None:
        response = client.get("/v1/verify")

        assert response.status_code == 200
        assert response.json()["passed"] is True
