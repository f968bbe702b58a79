import pytest
from httpx import AsyncClient
from fastapi import status

pytestmark = pytest.mark.asyncio

async def test_health_is_public(client: AsyncClient):
    response = await client.get("/api/health")
    assert response.status_code == status.HTTP_200_OK
    assert response.json()["database"] == "connected"

async def test_root(client: AsyncClient):
    response = await client.get("/")
    assert response.status_code == status.HTTP_200_OK
    assert "version" in response.json()
