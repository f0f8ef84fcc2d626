import pytest
from typing import Any, Dict
from httpx import AsyncClient, Response

from app import app


@pytest.mark.asyncio
async def test_health(client: AsyncClient) -> None:
    resp: Response = await client.get("/health")
    body: Dict[str, Any] = resp.json()
    assert resp.status_code == 200
    assert body["status"] == "ok"


@pytest.mark.asyncio
async def test_version(client: AsyncClient) -> None:
    resp: Response = await client.get("/version")
    assert resp.status_code == 200
    assert "version" in resp.json()


@pytest.mark.asyncio
async def test_graphql_health(client: AsyncClient) -> None:
    query: Dict[str, str] = {"query": "{ health serverTime }"}
    resp: Response = await client.post("/graphql", json=query)
    data: Dict[str, Any] = resp.json()["data"]
    assert data["health"] == "ok"
    assert data["serverTime"]


@pytest.mark.asyncio
async def test_service_not_ready_without_container(client: AsyncClient) -> None:
    app.state.container = None
    resp: Response = await client.post(
        "/calculate-nutrition", json={"gender": "Male", "age": 25, "height": 180, "weight": 80}
    )
    assert resp.status_code == 503
    assert resp.json()["detail"] == "Service not ready"
