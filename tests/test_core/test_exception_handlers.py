import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from moviecatalog.core.exception_handlers import collect_violations, install_exception_handlers
from moviecatalog.core.exceptions import InvalidPasswordLengthError


def test_collect_violations_groups_by_property():
    errors = [
        {"loc": ("body", "title"), "type": "missing", "msg": "Field required", "input": {}},
        {"loc": ("body", "genre"), "type": "enum", "msg": "Input should be 'comedy'", "input": "western"},
        {"loc": ("body", "genre"), "type": "string_too_long", "msg": "Too long", "input": "western"},
    ]

    result = collect_violations(errors, skip_loc_prefix=True)

    assert [v["property"] for v in result] == ["title", "genre"]
    assert result[0]["value"] is None
    assert result[1]["value"] == "western"
    assert result[1]["messages"] == ["Input should be 'comedy'", "Too long"]


def test_collect_violations_nested_and_empty_loc():
    result = collect_violations([
        {"loc": ("actors", 0), "type": "string_too_short", "msg": "Too short", "input": ""},
        {"loc": (), "type": "model_type", "msg": "Input should be an object", "input": []},
    ])

    assert [v["property"] for v in result] == ["actors.0", "body"]


def _app() -> FastAPI:
    app = FastAPI()
    install_exception_handlers(app)

    @app.get("/boom")
    async def boom():
        raise RuntimeError("db password is hunter2")

    @app.get("/rule")
    async def rule():
        raise InvalidPasswordLengthError(6, 12)

    return app


@pytest.mark.anyio
async def test_unhandled_error_hides_internals():
    transport = ASGITransport(app=_app(), raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        resp = await client.get("/boom")

    assert resp.status_code == 500
    assert resp.headers["content-type"].startswith("application/problem+json")
    assert "hunter2" not in resp.text
    assert resp.json()["detail"] == "An unexpected error occurred."


@pytest.mark.anyio
async def test_domain_rule_is_bad_request():
    async with AsyncClient(transport=ASGITransport(app=_app()), base_url="http://test") as client:
        resp = await client.get("/rule")

    assert resp.status_code == 400
    assert "between 6 and 12" in resp.json()["detail"]
