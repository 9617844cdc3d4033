"""MixcoreAuth — login, registration, logout and current-user profile."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from .callbacks import ActionCallback, run_with_callback
from .models import LoginRequest, Profile, RegisterAccountRequest, TokenInfo

if TYPE_CHECKING:
    from collections.abc import Callable

    from .config import ClientConfig, Endpoints
    from .ports import ITokenStore, ITransport

logger = logging.getLogger(__name__)


class MixcoreAuth:
    """
    Authentication against the Mixcore user endpoints.

    A successful login stores both tokens in the token store under the
    configured keys and installs the access token on the transport, so
    every later request is authenticated.

    Example:
        ```python
        token = await client.auth.login(
            LoginRequest(username="admin", password="secret")
        )
        profile = await client.auth.init_user_data()
        ```
    """

    def __init__(
        self,
        transport: ITransport,
        token_store: ITokenStore,
        config: ClientConfig,
        endpoints: Endpoints,
    ) -> None:
        self._transport = transport
        self._token_store = token_store
        self._config = config
        self._endpoints = endpoints
        self.token_info: TokenInfo | None = None
        self.current_user: Profile | None = None

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def is_authenticated(self) -> bool:
        return self.token_info is not None

    async def login(
        self,
        request: LoginRequest | Mapping[str, Any],
        callback: ActionCallback[TokenInfo] | None = None,
    ) -> TokenInfo:
        """Authenticate and persist the returned tokens.

        Raises:
            AuthenticationError: If the credentials are rejected.
        """
        login = (
            request
            if isinstance(request, LoginRequest)
            else LoginRequest.model_validate(request)
        )
        return await run_with_callback(self._login(login), callback)

    async def _login(self, request: LoginRequest) -> TokenInfo:
        body = await self._transport.post(
            self._endpoints.auth.sign_in, request.to_payload()
        )
        token = TokenInfo.model_validate(body)
        self._handle_auth_success(token)
        logger.info("Signed in as %s", request.username or request.email)
        return token

    async def register(
        self,
        request: RegisterAccountRequest | Mapping[str, Any],
        callback: ActionCallback[Any] | None = None,
    ) -> Any:
        """Create a new user account."""
        account = (
            request
            if isinstance(request, RegisterAccountRequest)
            else RegisterAccountRequest.model_validate(request)
        )
        return await run_with_callback(
            self._transport.post(self._endpoints.auth.register, account.to_payload()),
            callback,
        )

    def logout(self, callback: Callable[[], None] | None = None) -> None:
        """Forget both tokens and the cached user."""
        self._token_store.remove(self._config.token_key)
        self._token_store.remove(self._config.refresh_token_key)
        self._transport.set_auth_token(None)

        self.token_info = None
        self.current_user = None
        logger.info("Signed out")

        if callback is not None:
            callback()

    async def init_user_data(self) -> Profile:
        """Fetch and cache the signed-in user's profile."""
        body = await self._transport.get(self._endpoints.auth.get_profile)
        self.current_user = Profile.model_validate(body)
        return self.current_user

    def restore_session(self) -> bool:
        """Install a previously stored access token on the transport.

        Returns:
            ``True`` if a token was found.
        """
        token = self._token_store.get(self._config.token_key)
        if not token:
            return False
        self._transport.set_auth_token(token, self._config.token_type)
        logger.debug("Restored stored access token")
        return True

    def _handle_auth_success(self, token: TokenInfo) -> None:
        self.token_info = token
        self._token_store.set(self._config.token_key, token.access_token)
        if token.refresh_token:
            self._token_store.set(self._config.refresh_token_key, token.refresh_token)
        self._transport.set_auth_token(
            token.access_token, token.token_type or self._config.token_type
        )


__all__: list[str] = ["MixcoreAuth"]
