"""Tests for health check endpoints and the root endpoint."""

from unittest.mock import AsyncMock, patch

import pytest

_DB_CHECK = "glycemic_response.routers.health.check_database_connection"


class TestHealthEndpoint:
    """Tests for /health endpoint."""

    @pytest.mark.asyncio
    async def test_returns_healthy_with_db_connected(self, client):
        with patch(_DB_CHECK, new_callable=AsyncMock) as mock_db:
            mock_db.return_value = True

            response = await client.get("/health")

            assert response.status_code == 200
            assert response.json() == {"status": "healthy", "database": "connected"}

    @pytest.mark.asyncio
    async def test_returns_degraded_when_db_disconnected(self, client):
        """
        Health endpoint returns 503 with degraded status when the meal and
        glucose database is unavailable.
        """
        with patch(_DB_CHECK, new_callable=AsyncMock) as mock_db:
            mock_db.return_value = False

            response = await client.get("/health")

            assert response.status_code == 503
            data = response.json()
            assert data["status"] == "degraded"
            assert data["database"] == "disconnected"


class TestLivenessProbe:
    """Tests for /health/live endpoint."""

    @pytest.mark.asyncio
    async def test_returns_alive_without_touching_db(self, client):
        with patch(_DB_CHECK, new_callable=AsyncMock) as mock_db:
            response = await client.get("/health/live")

            assert response.status_code == 200
            assert response.json()["status"] == "alive"
            mock_db.assert_not_awaited()


class TestReadinessProbe:
    """Tests for /health/ready endpoint."""

    @pytest.mark.asyncio
    async def test_returns_ready_with_db_connected(self, client):
        with patch(_DB_CHECK, new_callable=AsyncMock) as mock_db:
            mock_db.return_value = True

            response = await client.get("/health/ready")

            assert response.status_code == 200
            assert response.json()["status"] == "ready"

    @pytest.mark.asyncio
    async def test_returns_not_ready_when_db_disconnected(self, client):
        with patch(_DB_CHECK, new_callable=AsyncMock) as mock_db:
            mock_db.return_value = False

            response = await client.get("/health/ready")

            assert response.status_code == 503
            data = response.json()
            assert data["status"] == "not_ready"
            assert data["database"] == "disconnected"


class TestRootEndpoint:
    """Tests for root endpoint."""

    @pytest.mark.asyncio
    async def test_returns_api_info(self, client):
        response = await client.get("/")

        assert response.status_code == 200
        data = response.json()
        assert data["name"] == "Glycemic Response API"
        assert data["version"] == "0.1.0"
        assert data["docs"] == "/docs"
