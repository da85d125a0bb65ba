"""Core types, errors and retry tracking shared across the SDK."""

from .exceptions import (
    AmbiguousSubscriptionError,
    ApiError,
    AuthFailureError,
    InvalidArgumentError,
    NotAuthenticatedError,
    SimpliSafeError,
    TransportFailureError,
    UnexpectedShapeError,
    VendorError,
)
from .retry import AuthRetryState, RetryStage
from .types import (
    AlarmEventTag,
    AlarmState,
    ApiRequest,
    ClientSettings,
    EventListener,
    RealtimeEvent,
    TokenSet,
)

__all__ = [
    # Errors
    "SimpliSafeError",
    "NotAuthenticatedError",
    "ApiError",
    "AuthFailureError",
    "VendorError",
    "TransportFailureError",
    "AmbiguousSubscriptionError",
    "InvalidArgumentError",
    "UnexpectedShapeError",
    # Retry
    "AuthRetryState",
    "RetryStage",
    # Types
    "AlarmEventTag",
    "AlarmState",
    "ApiRequest",
    "ClientSettings",
    "EventListener",
    "RealtimeEvent",
    "TokenSet",
]
