"""
Tests for health check endpoints
"""

import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_health_endpoint(client: AsyncClient):
    """Test basic health endpoint returns healthy status."""
    response = await client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"


@pytest.mark.asyncio
async def test_health_ready_endpoint_reports_canonical_dictionary(client: AsyncClient):
    """Test /health/ready reports the verified word table."""
    response = await client.get("/health/ready")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["checks"] == {"dictionary": "canonical"}
    assert "timestamp" in data


@pytest.mark.asyncio
async def test_docs_are_disabled(client: AsyncClient):
    """Test that interactive docs and the schema are not served."""
    for path in ("/docs", "/redoc", "/openapi.json"):
        response = await client.get(path)
        assert response.status_code == 404
