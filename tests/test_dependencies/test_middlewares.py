"""
Route dependency chains exercised on a throwaway app, independent of the
movie/user controllers.
"""

from typing import Optional
from uuid import uuid4

import pytest
from fastapi import Depends, FastAPI, Request
from httpx import ASGITransport, AsyncClient
from pydantic import BaseModel, Field

from moviecatalog.core.exception_handlers import install_exception_handlers
from moviecatalog.dependencies import authorize, current_user, document_exists, validate_dto, validate_object_id
from tests.fixtures.users import auth_headers

KNOWN_ID = str(uuid4())


class PingDto(BaseModel):
    name: str = Field(..., min_length=3)
    count: int = Field(..., ge=1)


class FakeService:
    async def exists(self, document_id: Optional[str]) -> bool:
        return document_id == KNOWN_ID


def get_fake_service() -> FakeService:
    return FakeService()


def _build_app() -> FastAPI:
    app = FastAPI()
    install_exception_handlers(app)

    @app.post("/ping", dependencies=[Depends(validate_dto(PingDto))])
    async def ping(request: Request):
        dto: PingDto = request.state.dto
        return {"name": dto.name, "count": dto.count}

    @app.get(
        "/things/{id}",
        dependencies=[
            Depends(validate_object_id("id")),
            Depends(document_exists(get_fake_service, "Thing", "id")),
        ],
    )
    async def show(id: str):
        return {"id": id}

    @app.post(
        "/things/{id}",
        dependencies=[Depends(authorize), Depends(validate_object_id("id")), Depends(validate_dto(PingDto))],
    )
    async def touch(id: str, request: Request):
        return {"user": str(current_user(request).id)}

    return app


@pytest.fixture()
async def client():
    async with AsyncClient(transport=ASGITransport(app=_build_app()), base_url="http://test") as c:
        yield c


@pytest.mark.anyio
async def test_validate_dto_sets_state(client: AsyncClient):
    resp = await client.post("/ping", json={"name": "neo", "count": 2})

    assert resp.status_code == 200
    assert resp.json() == {"name": "neo", "count": 2}


@pytest.mark.anyio
async def test_validate_dto_groups_violations(client: AsyncClient):
    resp = await client.post("/ping", json={"name": "x"})

    assert resp.status_code == 400
    body = resp.json()
    assert body["component"] == "ValidateDtoMiddleware"
    errors = {e["property"]: e for e in body["errors"]}
    assert set(errors) == {"name", "count"}
    assert errors["name"]["value"] == "x"
    assert errors["count"]["value"] is None
    assert errors["name"]["messages"]


@pytest.mark.anyio
async def test_document_exists_passes(client: AsyncClient):
    resp = await client.get(f"/things/{KNOWN_ID}")

    assert resp.status_code == 200


@pytest.mark.anyio
async def test_document_exists_rejects(client: AsyncClient):
    missing = str(uuid4())

    resp = await client.get(f"/things/{missing}")

    assert resp.status_code == 404
    assert resp.json()["component"] == "DocumentExistsMiddleware"
    assert resp.json()["detail"] == f"Thing with {missing} not found."


@pytest.mark.anyio
async def test_malformed_id_stops_before_lookup(client: AsyncClient):
    resp = await client.get("/things/nope")

    assert resp.status_code == 400
    assert resp.json()["component"] == "ValidateObjectIdMiddleware"
    assert resp.json()["detail"] == "nope is invalid ObjectID"


@pytest.mark.anyio
async def test_first_failing_guard_wins(client: AsyncClient):
    # no token, bad id, bad body: only the auth failure is reported
    resp = await client.post("/things/nope", json={})

    assert resp.status_code == 401
    assert resp.json()["component"] == "AuthorizeMiddleware"


@pytest.mark.anyio
async def test_authorized_chain_reaches_handler(client: AsyncClient, create_test_user):
    user = await create_test_user()

    bad_id = await client.post("/things/nope", json={"name": "neo", "count": 1}, headers=auth_headers(user))
    ok = await client.post(f"/things/{KNOWN_ID}", json={"name": "neo", "count": 1}, headers=auth_headers(user))

    assert bad_id.status_code == 400
    assert ok.status_code == 200
    assert ok.json() == {"user": str(user.id)}
