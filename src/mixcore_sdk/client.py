"""MixcoreClient — entry point wiring transport, token store and services."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .auth import MixcoreAuth
from .callbacks import ActionCallback, run_with_callback
from .config import ClientConfig, Endpoints
from .database import MixcoreDatabase
from .models import GlobalSettings
from .storage import MixcoreStorage
from .token_store import InMemoryTokenStore
from .transport import HttpTransport

if TYPE_CHECKING:
    from types import TracebackType

    import httpx

    from .ports import ITokenStore, ITransport

logger = logging.getLogger(__name__)


class MixcoreClient:
    """
    Facade over the Mixcore REST API.

    Exposes ``auth``, ``database`` and ``storage`` services sharing one
    transport and one token store.  Use it as an async context manager so
    the HTTP connection pool is closed on exit.

    Example:
        ```python
        config = ClientConfig(endpoint="https://my.site/api/v2")
        async with MixcoreClient(config) as client:
            await client.auth.login({"username": "admin", "password": "secret"})
            page = await client.database.get_data(
                "products", QueryBuilder().default().like("title", "shoe")
            )
        ```
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        *,
        token_store: ITokenStore | None = None,
        transport: ITransport | None = None,
        http_transport: httpx.AsyncBaseTransport | None = None,
        endpoints: Endpoints | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            config: Client configuration; defaults to the public Mixcore API.
            token_store: Where tokens are persisted; defaults to in-memory.
            transport: Fully custom transport (skips ``HttpTransport``).
            http_transport: httpx transport handed to the default
                ``HttpTransport`` (e.g. ``httpx.MockTransport`` in tests).
            endpoints: Endpoint tables; defaults to the standard paths.
        """
        self.config = config or ClientConfig()
        self.endpoints = endpoints or Endpoints()
        self.token_store: ITokenStore = token_store or InMemoryTokenStore()
        self.transport: ITransport = transport or HttpTransport(
            self.config.endpoint,
            headers=self.config.sdk_headers(),
            timeout=self.config.timeout,
            transport=http_transport,
        )

        self.auth = MixcoreAuth(
            self.transport, self.token_store, self.config, self.endpoints
        )
        self.database = MixcoreDatabase(self.transport, self.endpoints)
        self.storage = MixcoreStorage(self.transport, self.endpoints)

        self.global_setting: GlobalSettings | None = None

        if self.auth.restore_session():
            logger.debug("Client created with a stored session")

    async def get_global_setting(
        self, callback: ActionCallback[GlobalSettings] | None = None
    ) -> GlobalSettings:
        """Fetch and cache the backend's global settings."""
        return await run_with_callback(self._fetch_global_setting(), callback)

    async def _fetch_global_setting(self) -> GlobalSettings:
        body = await self.transport.get(self.endpoints.global_.global_setting)
        self.global_setting = GlobalSettings.model_validate(body or {})
        return self.global_setting

    async def aclose(self) -> None:
        if isinstance(self.transport, HttpTransport):
            await self.transport.aclose()

    async def __aenter__(self) -> MixcoreClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()


__all__: list[str] = ["MixcoreClient"]
