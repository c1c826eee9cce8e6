"""Integration tests for health check endpoints.

Tests liveness and readiness probes, and that probes bypass rate limiting.
"""

import pytest
from httpx import ASGITransport, AsyncClient

from src.infrastructure.api.main import app
from src.infrastructure.api.routes import health


transport = ASGITransport(app=app)


class TestHealthEndpoints:
    """Tests for health check endpoints."""

    @pytest.mark.asyncio
    async def test_liveness_probe_always_returns_200(self):
        """Test that /health endpoint always returns 200 (liveness)."""
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            response = await client.get("/api/v1/health")

            assert response.status_code == 200
            data = response.json()
            assert data["status"] == "healthy"
            assert data["service"] == "dependency-resilience"

    @pytest.mark.asyncio
    async def test_readiness_probe_checks_database(self):
        """Test that /health/ready reports the database check."""
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            response = await client.get("/api/v1/health/ready")

            # 200 or 503 depending on whether a database is reachable
            assert response.status_code in [200, 503]
            data = response.json()
            assert data["checks"]["database"] in ["healthy", "unhealthy"]

    @pytest.mark.asyncio
    async def test_readiness_returns_503_when_database_unhealthy(self, monkeypatch):
        """Test that readiness returns 503 when the database check fails."""

        async def unhealthy() -> bool:
            return False

        monkeypatch.setattr(health, "check_database_health", unhealthy)

        async with AsyncClient(transport=transport, base_url="http://test") as client:
            response = await client.get("/api/v1/health/ready")

            assert response.status_code == 503
            assert response.json() == {
                "status": "not_ready",
                "checks": {"database": "unhealthy"},
            }

    @pytest.mark.asyncio
    async def test_readiness_returns_200_when_database_healthy(self, monkeypatch):
        """Test that readiness returns 200 when the database answers."""

        async def healthy() -> bool:
            return True

        monkeypatch.setattr(health, "check_database_health", healthy)

        async with AsyncClient(transport=transport, base_url="http://test") as client:
            response = await client.get("/api/v1/health/ready")

            assert response.status_code == 200
            assert response.json()["status"] == "ready"


class TestProbesBypassRateLimiting:
    """Tests that probes and metrics are excluded from rate limiting."""

    @pytest.mark.asyncio
    async def test_metrics_not_rate_limited(self):
        """Test that /metrics endpoint is not rate limited."""
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            for _ in range(20):
                response = await client.get("/api/v1/metrics")
                assert response.status_code == 200
                assert "X-RateLimit-Limit" not in response.headers

    @pytest.mark.asyncio
    async def test_health_not_rate_limited(self):
        """Test that health endpoints are not rate limited."""
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            for _ in range(20):
                response = await client.get("/api/v1/health")
                assert response.status_code == 200
