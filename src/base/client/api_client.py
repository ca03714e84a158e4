import json
import logging
from typing import Any, Awaitable, Callable

import httpx

from src.base.middleware.correlation_middleware import correlation_id

logger = logging.getLogger(__name__)

TokenProvider = Callable[[], Awaitable[str | None]]

UNKNOWN_ERROR_MESSAGE = "An unknown API error occurred"


class ApiError(Exception):
    """
    Single error type raised for every failed backend call.

    Covers transport failures (status_code is None), non-2xx responses and
    empty or malformed bodies on successful responses. str(error) is the
    message shown to the user.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        details: Any = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.details = details


class ApiClient:
    """Thin wrapper around httpx.AsyncClient for the User Hub REST backend."""

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        token_provider: TokenProvider | None = None,
    ):
        self._http = http_client
        self._token_provider = token_provider

    async def _build_headers(self, is_multipart: bool) -> dict[str, str]:
        headers: dict[str, str] = {}
        if not is_multipart:
            headers["Content-Type"] = "application/json"

        if self._token_provider is not None:
            token = await self._token_provider()
            if token:
                headers["Authorization"] = f"Bearer {token}"

        correlation_id_value = correlation_id.get("")
        if correlation_id_value:
            headers["x-correlation-id"] = correlation_id_value

        return headers

    async def request(
        self,
        endpoint: str,
        method: str = "GET",
        body: Any = None,
        files: dict[str, Any] | None = None,
        params: dict[str, str] | None = None,
    ) -> Any:
        """
        Issue a request and return the decoded JSON body.

        Args:
            endpoint: Path relative to the backend base URL, e.g. "/users".
            method: HTTP method.
            body: JSON-serializable payload, or form fields when files is set.
            files: Multipart file parts; switches the request to multipart.
            params: Query string parameters.

        Returns:
            The parsed JSON body, or None for 204 No Content.

        Raises:
            ApiError: On transport failure, non-2xx status or bad body.
        """
        is_multipart = files is not None
        headers = await self._build_headers(is_multipart)

        kwargs: dict[str, Any] = {"headers": headers}
        if params:
            kwargs["params"] = params
        if is_multipart:
            kwargs["files"] = files
            if body:
                kwargs["data"] = body
        elif body is not None:
            kwargs["content"] = json.dumps(body)

        logger.debug(f"Backend request: {method} {endpoint}")

        try:
            response = await self._http.request(method, endpoint, **kwargs)
        except httpx.TransportError as e:
            logger.error(f"Backend unreachable for {method} {endpoint}: {e}")
            raise ApiError(str(e) or UNKNOWN_ERROR_MESSAGE) from e

        if not response.is_success:
            raise self._error_from_response(method, endpoint, response)

        if response.status_code == 204:
            return None

        try:
            return response.json()
        except ValueError as e:
            logger.error(f"Malformed JSON from backend for {method} {endpoint}")
            raise ApiError(
                "Invalid response from server", status_code=response.status_code
            ) from e

    @staticmethod
    def _error_from_response(
        method: str, endpoint: str, response: httpx.Response
    ) -> ApiError:
        message = f"HTTP error! status: {response.status_code}"
        details = None
        try:
            data = response.json()
        except ValueError:
            message = response.reason_phrase or message
        else:
            if isinstance(data, dict):
                message = data.get("message") or UNKNOWN_ERROR_MESSAGE
                details = data.get("details")
            else:
                message = UNKNOWN_ERROR_MESSAGE

        logger.error(
            f"API error for {method} {endpoint}: {response.status_code} {message}"
        )
        return ApiError(message, status_code=response.status_code, details=details)
