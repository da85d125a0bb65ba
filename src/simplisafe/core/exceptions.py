"""
SimpliSafe SDK error types.

Everything raised by the SDK derives from SimpliSafeError. Errors that carry
a vendor response (status code + decoded body) derive from ApiError.
"""

from __future__ import annotations

from typing import Any


class SimpliSafeError(Exception):
    """Base class for all SDK errors."""

    pass


class NotAuthenticatedError(SimpliSafeError):
    """Raised when an operation needs a session and none is held."""

    def __init__(self, message: str = "User is not logged in"):
        super().__init__(message)


class ApiError(SimpliSafeError):
    """
    Error response returned by the SimpliSafe API.

    Attributes:
        status_code: HTTP status of the response
        payload: Decoded response body (JSON when possible, else text)
    """

    def __init__(self, status_code: int, payload: Any = None, message: str = ""):
        self.status_code = status_code
        self.payload = payload
        super().__init__(message or f"SimpliSafe API returned HTTP {status_code}")

    def __repr__(self) -> str:
        return f"{type(self).__name__}(status_code={self.status_code}, payload={self.payload!r})"


class AuthFailureError(ApiError):
    """Login or token refresh rejected by the vendor."""

    pass


class VendorError(ApiError):
    """Structured error payload returned for a non-auth API failure."""

    pass


class TransportFailureError(SimpliSafeError):
    """
    Network-level failure with no response from the API.

    The underlying httpx error is chained as __cause__.
    """

    pass


class AmbiguousSubscriptionError(SimpliSafeError):
    """More than one (or no) subscription and none was selected."""

    def __init__(self, message: str = "Subscription ID is ambiguous"):
        super().__init__(message)


class InvalidArgumentError(SimpliSafeError, ValueError):
    """Caller passed an argument the SDK refuses to send."""

    pass


class UnexpectedShapeError(SimpliSafeError):
    """Response is missing fields the SDK depends on."""

    pass
