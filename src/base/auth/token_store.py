"""
Bearer token lifecycle: store, read, clear.

The token is written to two places, a persistent key-value store and a
site-wide cookie, so that server-rendered requests (cookies only) and
programmatic clients (either) observe the same token.
"""

import logging
import time
from http.cookiejar import Cookie
from typing import Protocol

import httpx
from fastapi import Request, Response
from redis.asyncio import Redis

from src.base.utils.env_utils import is_local_development

logger = logging.getLogger(__name__)

TOKEN_KEY = "authToken"
TOKEN_COOKIE_PATH = "/"
TOKEN_TTL_DAYS = 7
TOKEN_TTL_SECONDS = TOKEN_TTL_DAYS * 24 * 60 * 60


class TokenStorage(Protocol):
    async def get(self, key: str) -> str | None: ...

    async def set(self, key: str, value: str) -> None: ...

    async def delete(self, key: str) -> None: ...


class MemoryTokenStorage:
    """Process-local storage, mainly for scripts and tests."""

    def __init__(self):
        self._values: dict[str, str] = {}

    async def get(self, key: str) -> str | None:
        return self._values.get(key)

    async def set(self, key: str, value: str) -> None:
        self._values[key] = value

    async def delete(self, key: str) -> None:
        self._values.pop(key, None)


class RedisTokenStorage:
    """Token storage backed by redis.asyncio, namespaced by a key prefix."""

    def __init__(self, redis_client: Redis, prefix: str = "userhub:"):
        self._redis = redis_client
        self._prefix = prefix

    def _key(self, key: str) -> str:
        return f"{self._prefix}{key}"

    async def get(self, key: str) -> str | None:
        value = await self._redis.get(self._key(key))
        if isinstance(value, bytes):
            return value.decode()
        return value

    async def set(self, key: str, value: str) -> None:
        await self._redis.set(self._key(key), value)

    async def delete(self, key: str) -> None:
        await self._redis.delete(self._key(key))


def _auth_cookie(token: str, expires: int) -> Cookie:
    return Cookie(
        version=0,
        name=TOKEN_KEY,
        value=token,
        port=None,
        port_specified=False,
        domain="",
        domain_specified=False,
        domain_initial_dot=False,
        path=TOKEN_COOKIE_PATH,
        path_specified=True,
        secure=False,
        expires=expires,
        discard=False,
        comment=None,
        comment_url=None,
        rest={},
        rfc2109=False,
    )


class TokenStore:
    """
    Dual-write token store.

    set() writes to both the persistent storage and the cookie jar, get()
    prefers the storage and falls back to the cookie, clear() removes both.
    Writes replace the whole value.
    """

    def __init__(self, storage: TokenStorage, cookies: httpx.Cookies | None = None):
        self._storage = storage
        self.cookies = cookies if cookies is not None else httpx.Cookies()

    async def set(self, token: str) -> None:
        await self._storage.set(TOKEN_KEY, token)
        expires = int(time.time()) + TOKEN_TTL_SECONDS
        self.cookies.jar.set_cookie(_auth_cookie(token, expires))
        logger.info("Auth token stored")

    async def get(self) -> str | None:
        token = await self._storage.get(TOKEN_KEY)
        if token:
            return token

        self.cookies.jar.clear_expired_cookies()
        return self.cookies.get(TOKEN_KEY) or None

    async def clear(self) -> None:
        await self._storage.delete(TOKEN_KEY)
        self.cookies.delete(TOKEN_KEY, path=TOKEN_COOKIE_PATH)
        logger.info("Auth token cleared")


def build_token_store(redis_client: Redis | None = None) -> TokenStore:
    """Token store over Redis when a client is available, else process memory."""
    if redis_client is None:
        return TokenStore(MemoryTokenStorage())
    return TokenStore(RedisTokenStorage(redis_client))


# ------------------------
# Console (server-side) helpers
# ------------------------
def set_auth_cookie(response: Response, token: str) -> None:
    response.set_cookie(
        key=TOKEN_KEY,
        value=token,
        max_age=TOKEN_TTL_SECONDS,
        path=TOKEN_COOKIE_PATH,
        secure=not is_local_development(),
        httponly=True,
        samesite="lax",
    )


def clear_auth_cookie(response: Response) -> None:
    response.delete_cookie(key=TOKEN_KEY, path=TOKEN_COOKIE_PATH)


def read_auth_cookie(request: Request) -> str | None:
    return request.cookies.get(TOKEN_KEY) or None


def cookie_token_provider(request: Request):
    """Token provider for the API client that reads the request's auth cookie."""

    async def provider() -> str | None:
        return read_auth_cookie(request)

    return provider
