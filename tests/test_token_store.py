import time
from unittest.mock import AsyncMock

import pytest
from fastapi import Response
from redis.exceptions import ConnectionError as RedisConnectionError

from src.base.auth.token_store import (
    TOKEN_KEY,
    TOKEN_TTL_SECONDS,
    MemoryTokenStorage,
    RedisTokenStorage,
    TokenStore,
    _auth_cookie,
    build_token_store,
    clear_auth_cookie,
    set_auth_cookie,
)
from src.base.config import redis as redis_config


@pytest.fixture
def storage():
    return MemoryTokenStorage()


@pytest.fixture
def store(storage):
    return TokenStore(storage)


class TestTokenStore:
    async def test_set_then_get_returns_same_token(self, store):
        await store.set("tok-123")
        assert await store.get() == "tok-123"

    async def test_clear_removes_token(self, store):
        await store.set("tok-123")
        await store.clear()
        assert await store.get() is None

    async def test_get_without_token(self, store):
        assert await store.get() is None

    async def test_set_writes_both_locations(self, store, storage):
        await store.set("tok-123")
        assert await storage.get(TOKEN_KEY) == "tok-123"
        assert store.cookies.get(TOKEN_KEY) == "tok-123"

    async def test_cookie_is_site_wide_with_seven_day_expiry(self, store):
        before = int(time.time())
        await store.set("tok-123")
        cookie = next(c for c in store.cookies.jar if c.name == TOKEN_KEY)
        assert cookie.path == "/"
        assert before + TOKEN_TTL_SECONDS <= cookie.expires <= before + TOKEN_TTL_SECONDS + 5

    async def test_falls_back_to_cookie(self, store, storage):
        await store.set("tok-123")
        await storage.delete(TOKEN_KEY)
        assert await store.get() == "tok-123"

    async def test_prefers_persistent_storage(self, store, storage):
        await store.set("tok-123")
        await storage.set(TOKEN_KEY, "newer")
        assert await store.get() == "newer"

    async def test_expired_cookie_is_ignored(self, store):
        store.cookies.jar.set_cookie(_auth_cookie("stale", int(time.time()) - 10))
        assert await store.get() is None

    async def test_set_replaces_previous_token(self, store):
        await store.set("first")
        await store.set("second")
        assert await store.get() == "second"


class TestRedisTokenStorage:
    async def test_prefixed_keys(self):
        redis = AsyncMock()
        redis.get.return_value = b"tok"
        storage = RedisTokenStorage(redis, prefix="hub:")

        await storage.set(TOKEN_KEY, "tok")
        assert await storage.get(TOKEN_KEY) == "tok"
        await storage.delete(TOKEN_KEY)

        redis.set.assert_awaited_once_with("hub:authToken", "tok")
        redis.get.assert_awaited_once_with("hub:authToken")
        redis.delete.assert_awaited_once_with("hub:authToken")

    async def test_token_store_over_redis(self):
        redis = AsyncMock()
        redis.get.return_value = None
        store = TokenStore(RedisTokenStorage(redis))

        await store.set("tok")
        # Redis returned nothing, so the cookie copy is used
        assert await store.get() == "tok"


class TestBuildTokenStore:
    async def test_memory_without_redis(self):
        store = build_token_store(None)
        await store.set("tok")
        store.cookies.clear()
        assert await store.get() == "tok"

    async def test_uses_redis_client(self):
        redis = AsyncMock()
        store = build_token_store(redis)
        await store.set("tok")
        redis.set.assert_awaited_once_with("userhub:authToken", "tok")

    async def test_init_redis_without_url(self, monkeypatch):
        monkeypatch.delenv("REDIS_URL", raising=False)
        assert await redis_config.init_redis() is None

    async def test_init_redis_falls_back_when_unreachable(self, monkeypatch):
        client = AsyncMock()
        client.ping.side_effect = RedisConnectionError("refused")
        monkeypatch.setenv("REDIS_URL", "redis://localhost:6399/0")
        monkeypatch.setattr(
            redis_config.Redis, "from_url", lambda url, **kwargs: client
        )

        assert await redis_config.init_redis() is None
        client.aclose.assert_awaited_once()

    async def test_init_redis_connected(self, monkeypatch):
        client = AsyncMock()
        monkeypatch.setenv("REDIS_URL", "redis://localhost:6379/0")
        monkeypatch.setattr(
            redis_config.Redis, "from_url", lambda url, **kwargs: client
        )

        assert await redis_config.init_redis() is client
        await redis_config.close_redis(client)
        client.aclose.assert_awaited_once()


class TestResponseCookies:
    def test_set_auth_cookie(self):
        response = Response()
        set_auth_cookie(response, "tok-123")
        header = response.headers["set-cookie"]
        assert header.startswith(f"{TOKEN_KEY}=tok-123")
        assert f"Max-Age={TOKEN_TTL_SECONDS}" in header
        assert "Path=/" in header

    def test_clear_auth_cookie(self):
        response = Response()
        clear_auth_cookie(response)
        header = response.headers["set-cookie"]
        assert header.startswith(f'{TOKEN_KEY}=""')
        assert "Max-Age=0" in header
