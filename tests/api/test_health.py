"""Tests for the health check endpoints."""

import pytest
from unittest.mock import patch
from sqlalchemy.exc import OperationalError

from tests.utils import create_test_entry


@pytest.mark.api
class TestHealthEndpoints:

    @pytest.mark.asyncio
    async def test_health_reports_entry_count(self, client, test_db):
        await create_test_entry(test_db, short_code=1)
        await create_test_entry(test_db, short_code=2)

        response = await client.get("/api/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["environment"] == "testing"
        assert body["components"]["database"]["status"] == "healthy"
        assert body["components"]["database"]["entries"] == 2

    @pytest.mark.asyncio
    async def test_health_degraded_when_database_fails(self, client, test_db):
        error = OperationalError("SELECT 1", {}, Exception("connection refused"))
        with patch.object(test_db, "execute", side_effect=error):
            response = await client.get("/api/health")

        body = response.json()
        assert body["status"] == "degraded"
        assert body["components"]["database"]["status"] == "unhealthy"

    @pytest.mark.asyncio
    async def test_readiness(self, client):
        response = await client.get("/api/health/ready")

        assert response.json() == {"ready": True, "components": {"api": True, "database": True}}

    @pytest.mark.asyncio
    async def test_liveness(self, client):
        response = await client.get("/api/health/live")

        assert response.json() == {"alive": True}
