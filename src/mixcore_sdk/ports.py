"""Protocols for the collaborators the SDK services depend on."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ITransport(Protocol):
    """
    HTTP transport returning decoded JSON bodies.

    Implementations raise :class:`~mixcore_sdk.exceptions.ApiError` (or a
    subclass) on non-success statuses and
    :class:`~mixcore_sdk.exceptions.TransportError` when no response was
    received.
    """

    async def get(self, path: str, *, params: dict[str, Any] | None = None) -> Any:
        ...

    async def post(
        self,
        path: str,
        json: Any = None,
        *,
        files: dict[str, Any] | None = None,
        data: dict[str, Any] | None = None,
    ) -> Any:
        ...

    async def put(self, path: str, json: Any = None) -> Any:
        ...

    async def patch(self, path: str, json: Any = None) -> Any:
        ...

    async def delete(
        self, path: str, *, params: dict[str, Any] | None = None
    ) -> Any:
        ...

    def set_auth_token(self, token: str | None, token_type: str = "Bearer") -> None:
        """Set (or with ``None`` remove) the ``Authorization`` header."""
        ...


@runtime_checkable
class ITokenStore(Protocol):
    """Key-value persistence for the access and refresh tokens."""

    def get(self, key: str) -> str | None:
        """Return the stored value, or ``None`` if missing or unreadable."""
        ...

    def set(self, key: str, value: str) -> None:
        ...

    def remove(self, key: str) -> None:
        ...


__all__: list[str] = ["ITransport", "ITokenStore"]
