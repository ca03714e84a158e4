import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from src.base.client.api_client import ApiError
from src.base.middleware.correlation_middleware import (
    CORRELATION_HEADER,
    CorrelationMiddleware,
    correlation_id,
)
from src.base.middleware.global_exception_handler_middleware import (
    GlobalExceptionHandlerMiddleware,
)


@pytest.fixture
def app(monkeypatch):
    monkeypatch.setenv("ENVIRONMENT", "production")
    test_app = FastAPI()
    test_app.add_middleware(GlobalExceptionHandlerMiddleware)
    test_app.add_middleware(CorrelationMiddleware)

    @test_app.get("/backend-down")
    async def backend_down():
        raise ApiError("Service Unavailable", status_code=503)

    @test_app.get("/boom")
    async def boom():
        raise RuntimeError("kaput")

    @test_app.get("/cid")
    async def cid():
        return {"cid": correlation_id.get()}

    return test_app


@pytest.fixture
async def client(app):
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test"
    ) as c:
        yield c


async def test_unhandled_api_error_is_bad_gateway(client):
    resp = await client.get("/backend-down")
    assert resp.status_code == 502
    body = resp.json()
    assert body["title"] == "Backend Error"
    assert body["detail"] == "Service Unavailable"
    assert body["instance"] == "/backend-down"
    assert "trace" not in body


async def test_unhandled_exception_is_problem_details(client):
    resp = await client.get("/boom")
    assert resp.status_code == 500
    assert resp.json()["title"] == "RuntimeError"
    assert resp.json()["detail"] == "kaput"


async def test_correlation_id_visible_inside_request(client):
    resp = await client.get("/cid", headers={CORRELATION_HEADER: "req-42"})
    assert resp.json() == {"cid": "req-42"}
    assert resp.headers[CORRELATION_HEADER] == "req-42"


async def test_correlation_id_generated(client):
    resp = await client.get("/cid")
    assert resp.json()["cid"] == resp.headers[CORRELATION_HEADER]
    assert resp.json()["cid"]
