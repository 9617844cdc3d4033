"""HttpTransport — JSON-over-HTTP transport built on ``httpx.AsyncClient``."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import httpx

from .exceptions import ApiError, AuthenticationError, TransportError

if TYPE_CHECKING:
    from types import TracebackType

logger = logging.getLogger(__name__)

_AUTH_STATUSES = frozenset({401, 403})


class HttpTransport:
    """
    Thin wrapper over ``httpx.AsyncClient`` for the Mixcore REST API.

    Responses are decoded as JSON (``None`` for empty bodies).  Failures
    are mapped to SDK exceptions:

    - 401 / 403 → :class:`AuthenticationError`
    - any other error status → :class:`ApiError` with the body's ``code``
    - no response at all → :class:`TransportError`

    Example:
        ```python
        async with HttpTransport("https://api.mixcore.io/api/v2") as http:
            http.set_auth_token(access_token)
            settings = await http.get("/rest/shared/get-global-settings")
        ```
    """

    def __init__(
        self,
        base_url: str,
        *,
        headers: dict[str, str] | None = None,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the transport.

        Args:
            base_url: Prefix for every request path.
            headers: Default headers sent with every request.
            timeout: Request timeout in seconds.
            transport: Optional httpx transport (e.g. ``httpx.MockTransport``).
        """
        self._client = httpx.AsyncClient(
            base_url=base_url,
            headers=headers,
            timeout=timeout,
            transport=transport,
        )

    @property
    def base_url(self) -> str:
        return str(self._client.base_url)

    def set_base_url(self, base_url: str) -> None:
        self._client.base_url = httpx.URL(base_url)

    def set_auth_token(self, token: str | None, token_type: str = "Bearer") -> None:
        """Set the ``Authorization`` header, or remove it when *token* is falsy."""
        if token:
            self._client.headers["Authorization"] = f"{token_type} {token}"
        else:
            self._client.headers.pop("Authorization", None)

    @property
    def headers(self) -> httpx.Headers:
        return self._client.headers

    # -- verbs ---------------------------------------------------------------

    async def get(self, path: str, *, params: dict[str, Any] | None = None) -> Any:
        return await self._request("GET", path, params=params)

    async def post(
        self,
        path: str,
        json: Any = None,
        *,
        files: dict[str, Any] | None = None,
        data: dict[str, Any] | None = None,
    ) -> Any:
        if files is not None:
            return await self._request("POST", path, files=files, data=data)
        return await self._request("POST", path, json=json)

    async def put(self, path: str, json: Any = None) -> Any:
        return await self._request("PUT", path, json=json)

    async def patch(self, path: str, json: Any = None) -> Any:
        return await self._request("PATCH", path, json=json)

    async def delete(
        self, path: str, *, params: dict[str, Any] | None = None
    ) -> Any:
        return await self._request("DELETE", path, params=params)

    # -- lifecycle -----------------------------------------------------------

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> HttpTransport:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    # -- internals -----------------------------------------------------------

    async def _request(
        self,
        method: str,
        path: str,
        **kwargs: Any,
    ) -> Any:
        logger.debug("%s %s", method, path)
        try:
            response = await self._client.request(method, path, **kwargs)
        except httpx.TimeoutException as e:
            logger.error("%s %s timed out: %s", method, path, e)
            raise TransportError(f"{method} {path} timed out") from e
        except httpx.RequestError as e:
            logger.error("%s %s failed: %s", method, path, e)
            raise TransportError(f"{method} {path} failed: {e}") from e

        if response.is_error:
            raise self._map_error(method, path, response)
        return _decode(response)

    @staticmethod
    def _map_error(method: str, path: str, response: httpx.Response) -> ApiError:
        status = response.status_code
        body = _decode(response)
        message = body.get("message") if isinstance(body, dict) else None
        logger.error("%s %s returned HTTP %s", method, path, status)
        if status in _AUTH_STATUSES:
            return AuthenticationError(status, message=message)
        code = body.get("code") if isinstance(body, dict) else None
        return ApiError(status, code=code or "default", message=message)


def _decode(response: httpx.Response) -> Any:
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text


__all__: list[str] = ["HttpTransport"]
