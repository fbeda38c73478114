from uuid import UUID, uuid4

import pytest
from fastapi.routing import APIRoute
from httpx import AsyncClient

from moviecatalog.api.controller import HttpMethod


@pytest.mark.anyio
async def test_healthz(async_client: AsyncClient):
    resp = await async_client.get("/healthz")

    assert resp.status_code == 200
    assert resp.json() == {"ok": True}


@pytest.mark.anyio
async def test_readyz(async_client: AsyncClient):
    resp = await async_client.get("/readyz")

    assert resp.status_code == 200
    assert resp.json() == {"ready": True, "checks": {"db": True}}


@pytest.mark.anyio
async def test_request_id_generated(async_client: AsyncClient):
    resp = await async_client.get("/healthz")

    UUID(resp.headers["X-Request-ID"])


@pytest.mark.anyio
async def test_request_id_echoed(async_client: AsyncClient):
    rid = str(uuid4())

    resp = await async_client.get("/healthz", headers={"X-Request-ID": rid})

    assert resp.headers["X-Request-ID"] == rid


@pytest.mark.anyio
async def test_request_id_not_a_uuid_is_replaced(async_client: AsyncClient):
    resp = await async_client.get("/healthz", headers={"X-Request-ID": "<script>"})

    assert resp.headers["X-Request-ID"] != "<script>"
    UUID(resp.headers["X-Request-ID"])


@pytest.mark.anyio
async def test_unknown_route_is_problem_json(async_client: AsyncClient):
    resp = await async_client.get("/nowhere")

    assert resp.status_code == 404
    assert resp.headers["content-type"].startswith("application/problem+json")
    body = resp.json()
    assert body["status"] == 404
    assert body["instance"].endswith("/nowhere")
    assert body["request_id"] == resp.headers["X-Request-ID"]


@pytest.mark.anyio
async def test_every_http_method_is_routed(app):
    routed = {
        method
        for route in app.routes
        if isinstance(route, APIRoute) and route.path.startswith(("/users", "/movies"))
        for method in route.methods
    }

    assert routed == {m.value for m in HttpMethod}
