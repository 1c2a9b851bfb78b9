"""
Integration tests for liveness endpoints.
"""

import pytest
from httpx import AsyncClient


class TestHealth:

    @pytest.mark.asyncio
    async def test_health(self, async_client: AsyncClient):
        response = await async_client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "ok"
        assert "timestamp" in data

    @pytest.mark.asyncio
    async def test_rpc_healthcheck(self, async_client: AsyncClient):
        response = await async_client.get("/rpc/healthcheck")

        assert response.status_code == 200
        assert response.json()["status"] == "ok"

    @pytest.mark.asyncio
    async def test_root_lists_rpc_prefix(self, async_client: AsyncClient):
        response = await async_client.get("/")

        assert response.status_code == 200
        assert response.json()["rpc"] == "/rpc"
