"""
Thin async HTTP transport for the SimpliSafe REST API.

Knows nothing about sessions: token grants and single requests in,
decoded JSON or typed SDK errors out.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from simplisafe.core.exceptions import (
    AuthFailureError,
    TransportFailureError,
    VendorError,
)
from simplisafe.core.types import ApiRequest, ClientSettings

logger = logging.getLogger(__name__)

TOKEN_PATH = "/api/token"


def decode_body(response: httpx.Response) -> Any:
    """Return the JSON body, the raw text if it isn't JSON, or None if empty."""
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text


class AsyncRestClient:
    """
    httpx-backed client bound to one API base URL.

    Usage:
        async with AsyncRestClient(ClientSettings()) as rest:
            tokens = await rest.request_token({"grant_type": "password", ...})
            data = await rest.send(ApiRequest("GET", "/api/authCheck"), "Bearer abc")
    """

    def __init__(
        self,
        settings: ClientSettings,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.settings = settings
        self._http = httpx.AsyncClient(
            base_url=settings.api_url,
            timeout=settings.timeout_seconds,
            transport=transport,
        )

    async def __aenter__(self) -> AsyncRestClient:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    async def request_token(self, data: dict[str, Any]) -> dict[str, Any]:
        """
        POST an OAuth grant to the token endpoint.

        Raises:
            AuthFailureError: API rejected the grant
            TransportFailureError: No response received
        """
        grant_type = data.get("grant_type")
        logger.debug(f"Requesting token with {grant_type} grant")
        try:
            response = await self._http.post(
                TOKEN_PATH,
                json=data,
                auth=(self.settings.client_id, self.settings.client_secret),
            )
        except httpx.HTTPError as e:
            raise TransportFailureError(f"Token request failed: {e}") from e

        if response.is_error:
            raise AuthFailureError(
                response.status_code,
                decode_body(response),
                f"Token request ({grant_type}) rejected: HTTP {response.status_code}",
            )

        body = decode_body(response)
        if not isinstance(body, dict):
            raise AuthFailureError(
                response.status_code, body, "Token response is not a JSON object"
            )
        return body

    async def send(self, request: ApiRequest, authorization: str | None) -> Any:
        """
        Send one request with the given Authorization header value.

        Returns:
            Decoded response body

        Raises:
            VendorError: API answered with an error status
            TransportFailureError: No response received
        """
        headers = dict(request.headers)
        if authorization:
            headers["Authorization"] = authorization

        logger.debug(f"{request.method} {request.url}")
        try:
            response = await self._http.request(
                request.method,
                request.url,
                json=request.json,
                params=request.params,
                headers=headers,
            )
        except httpx.HTTPError as e:
            raise TransportFailureError(
                f"{request.method} {request.url} failed: {e}"
            ) from e

        if response.is_error:
            raise VendorError(response.status_code, decode_body(response))

        return decode_body(response)
