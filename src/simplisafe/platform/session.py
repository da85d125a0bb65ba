"""
SessionManager - credentials, tokens, and authenticated requests.

Every SimpliSafe API call goes through authenticated_request, which renews
the session at most once by refresh and at most once by re-login.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from simplisafe.client.rest import AsyncRestClient
from simplisafe.core.exceptions import (
    ApiError,
    NotAuthenticatedError,
    SimpliSafeError,
    UnexpectedShapeError,
    VendorError,
)
from simplisafe.core.retry import AuthRetryState, RetryStage
from simplisafe.core.shape import require
from simplisafe.core.types import ApiRequest, ClientSettings, TokenSet

logger = logging.getLogger(__name__)

# Refresh failures with these statuses fall back to a full login
RELOGIN_STATUSES = frozenset({401, 403})


class SessionManager:
    """
    Owns the session for one SimpliSafe account.

    Token state is a single TokenSet swapped as a whole. Refresh and re-login
    run under one lock, so concurrent requests that all hit 401 trigger a
    single renewal.

    Example:
        session = SessionManager()
        await session.login("me@example.com", "secret", persist_credentials=True)
        data = await session.authenticated_request(
            ApiRequest("GET", "/api/authCheck")
        )
    """

    def __init__(
        self,
        settings: ClientSettings | None = None,
        rest: AsyncRestClient | None = None,
    ):
        self.settings = settings or ClientSettings()
        self.rest = rest or AsyncRestClient(self.settings)

        self._tokens: TokenSet | None = None
        self._username: str | None = None
        self._password: str | None = None

        self.user_id: int | str | None = None
        self.subscription_id: int | str | None = None

        self._auth_lock = asyncio.Lock()

    # --- Session state ---

    @property
    def tokens(self) -> TokenSet | None:
        return self._tokens

    @property
    def access_token(self) -> str | None:
        return self._tokens.access_token if self._tokens else None

    @property
    def username(self) -> str | None:
        return self._username

    @property
    def has_credentials(self) -> bool:
        return bool(self._username and self._password)

    def is_logged_in(self) -> bool:
        """True if a refresh token is held, or an unexpired access token."""
        tokens = self._tokens
        if tokens is None:
            return False
        if tokens.refresh_token:
            return True
        return bool(tokens.access_token) and not tokens.is_expired()

    def logout(self, keep_credentials: bool = False) -> None:
        """Drop tokens and cached ids; drop credentials unless keep_credentials."""
        self._reset(keep_credentials)
        self.user_id = None
        self.subscription_id = None
        logger.info("Logged out")

    def _reset(self, keep_credentials: bool) -> None:
        self._tokens = None
        if not keep_credentials:
            self._username = None
            self._password = None

    def _store_tokens(self, response: dict[str, Any]) -> None:
        try:
            tokens = TokenSet.from_response(response)
        except (KeyError, TypeError, ValueError) as e:
            raise UnexpectedShapeError(f"Token response not understood: {e}") from e
        self._tokens = tokens

    # --- Login / refresh ---

    async def login(
        self, username: str, password: str, persist_credentials: bool = False
    ) -> None:
        """
        Log in with the password grant.

        Args:
            username: Account email
            password: Account password
            persist_credentials: Keep username/password in memory so an
                expired refresh token can be replaced by a silent re-login

        Raises:
            AuthFailureError: Credentials rejected
            TransportFailureError: API unreachable
        """
        async with self._auth_lock:
            await self._login(username, password, persist_credentials)

    async def _login(
        self, username: str, password: str, persist_credentials: bool
    ) -> None:
        if persist_credentials:
            self._username = username
            self._password = password

        try:
            response = await self.rest.request_token(
                {
                    "username": username,
                    "password": password,
                    "grant_type": "password",
                }
            )
            self._store_tokens(response)
        except SimpliSafeError as e:
            logger.warning(f"Login failed: {e}")
            self._reset(keep_credentials=persist_credentials)
            raise

        logger.info("Logged in to SimpliSafe")

    async def refresh_access_token(self) -> None:
        """
        Exchange the refresh token for a new token set.

        On failure the session is logged out, keeping credentials if a
        username is stored.

        Raises:
            NotAuthenticatedError: No refresh token held
            AuthFailureError: Refresh rejected
            TransportFailureError: API unreachable
        """
        async with self._auth_lock:
            await self._refresh()

    async def _refresh(self) -> None:
        tokens = self._tokens
        if tokens is None or not tokens.refresh_token:
            raise NotAuthenticatedError()

        try:
            response = await self.rest.request_token(
                {
                    "refresh_token": tokens.refresh_token,
                    "grant_type": "refresh_token",
                }
            )
            self._store_tokens(response)
        except SimpliSafeError as e:
            logger.warning(f"Token refresh failed: {e}")
            self._reset(keep_credentials=self._username is not None)
            raise

        logger.debug("Access token refreshed")

    # --- Requests ---

    async def authenticated_request(self, request: ApiRequest) -> Any:
        """
        Send a request with the session's Authorization header.

        A 401 triggers one refresh and one retry. If the refresh itself is
        rejected with 401/403 and credentials are stored, one re-login and
        one more retry follow. Everything else propagates unchanged.

        Raises:
            NotAuthenticatedError: No session to authenticate with
            VendorError: API error response (after retries)
            AuthFailureError: Refresh or re-login rejected
            TransportFailureError: API unreachable
        """
        if not self.is_logged_in():
            raise NotAuthenticatedError()

        retry = AuthRetryState()
        while True:
            tokens = self._tokens
            authorization = tokens.authorization if tokens else None
            try:
                return await self.rest.send(request, authorization)
            except VendorError as e:
                if e.status_code != 401 or not retry.can_refresh:
                    raise
                logger.info(
                    f"{request.method} {request.url} returned 401, renewing session"
                )
                await self._renew(retry, tokens)

    async def _renew(self, retry: AuthRetryState, rejected: TokenSet | None) -> None:
        """Refresh (or re-login) once, unless another request already did."""
        async with self._auth_lock:
            retry.advance(RetryStage.REFRESH_ATTEMPTED)

            if self._tokens is not None and self._tokens is not rejected:
                logger.debug("Session already renewed by a concurrent request")
                return

            try:
                await self._refresh()
            except ApiError as e:
                if (
                    e.status_code not in RELOGIN_STATUSES
                    or not self.has_credentials
                    or not retry.can_relogin
                ):
                    raise
                logger.warning(
                    f"Refresh rejected with HTTP {e.status_code}, logging in again"
                )
                retry.advance(RetryStage.RELOGIN_ATTEMPTED)
                await self._login(self._username, self._password, True)

    async def get_user_id(self) -> int | str:
        """Return the account's user id, resolving it once via authCheck."""
        if self.user_id:
            return self.user_id

        data = await self.authenticated_request(ApiRequest("GET", "/api/authCheck"))
        self.user_id = require(data, "userId")
        logger.debug(f"Resolved user id {self.user_id}")
        return self.user_id

    async def aclose(self) -> None:
        await self.rest.aclose()
