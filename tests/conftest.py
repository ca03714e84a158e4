import json

import httpx
import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from src.app import create_app
from src.base.auth.token_store import TOKEN_KEY, MemoryTokenStorage, TokenStore
from src.base.client.api_client import ApiClient, ApiError
from src.base.config.backend_config import BackendConfig, BackendMode
from src.base.core.lifespan import init_services
from src.domain.repositories.mock_backend import MockUserHubBackend

TEST_TOKEN = "test-token"


def make_user(index: int, **overrides) -> dict:
    """A backend-shaped user record."""
    user = {
        "id": str(index),
        "firstName": f"First{index}",
        "lastName": f"Last{index}",
        "email": f"user{index}@example.com",
        "roles": "ROLE_USER",
        "accountNonExpired": True,
        "accountNonLocked": True,
        "credentialsNonExpired": True,
        "enabled": True,
        "createdDate": "2024-01-01T00:00:00Z",
        "updatedDate": "2024-01-02T00:00:00Z",
        "lastLoginDate": None,
    }
    user.update(overrides)
    return user


class FailingBackend:
    """Backend whose every call fails the way an unreachable server would."""

    def __init__(self, message: str = "Service Unavailable", status_code: int | None = 503):
        self.message = message
        self.status_code = status_code
        self.calls: list[str] = []

    def __getattr__(self, name: str):
        async def fail(*args, **kwargs):
            self.calls.append(name)
            raise ApiError(self.message, status_code=self.status_code)

        return fail


class RecordingTransport:
    """httpx MockTransport handler that records requests and replays canned responses."""

    def __init__(self, response: httpx.Response | None = None):
        self.requests: list[httpx.Request] = []
        self.response = response or httpx.Response(200, json={})

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.response

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self):
        return json.loads(self.last.content)


@pytest.fixture
def recorder():
    return RecordingTransport()


@pytest.fixture
async def http_client(recorder):
    async with httpx.AsyncClient(
        transport=httpx.MockTransport(recorder), base_url="http://backend/api"
    ) as c:
        yield c


@pytest.fixture
def api_client(http_client):
    async def provider():
        return TEST_TOKEN

    return ApiClient(http_client, token_provider=provider)


@pytest.fixture
def mock_backend():
    return MockUserHubBackend()


@pytest.fixture
def token_storage():
    return MemoryTokenStorage()


@pytest.fixture
def app(mock_backend, token_storage) -> FastAPI:
    test_app = create_app()
    config = BackendConfig()
    config.mode = BackendMode.MOCK
    test_app.state.backend_config = config
    test_app.state.mock_backend = mock_backend
    init_services(test_app, TokenStore(token_storage))
    return test_app


@pytest.fixture
async def client(app):
    """Client without an auth cookie."""
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test"
    ) as c:
        yield c


@pytest.fixture
async def auth_client(app):
    """Client carrying an auth cookie, as after a successful login."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
        cookies={TOKEN_KEY: TEST_TOKEN},
    ) as c:
        yield c
