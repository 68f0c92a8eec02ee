"""Tests for the health endpoint and response headers."""

import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_health_reports_ok(client: AsyncClient) -> None:
    """The health check answers with version and database state."""
    response = await client.get("/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "ok"
    assert body["database"] == "ok"
    assert body["version"] == "1.0.0"
    assert body["timestamp"]


@pytest.mark.asyncio
async def test_security_headers_are_set(client: AsyncClient) -> None:
    """Responses carry the security headers."""
    response = await client.get("/api/blogs")

    assert response.headers["X-Content-Type-Options"] == "nosniff"
    assert response.headers["X-Frame-Options"] == "DENY"
