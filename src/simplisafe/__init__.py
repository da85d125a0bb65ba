"""
SimpliSafe SDK - async client for the SimpliSafe 3 API and realtime events.

Platform Layer:
    SessionManager: Credentials, tokens, authenticated requests with renewal
    RealtimeChannel: Push channel with semantic alarm event tags

Runtime Layer:
    AlarmSystem: Subscriptions, alarm state, events, sensors

Example:
    from simplisafe import SimpliSafe, AlarmEventTag, RealtimeEvent

    async def on_event(event: RealtimeEvent):
        if event.tag is AlarmEventTag.ENTRY:
            print("Entry detected:", event.payload)

    async with SimpliSafe() as ss:
        await ss.login("me@example.com", "secret", persist_credentials=True)
        print(await ss.get_alarm_state())
        await ss.set_alarm_state("home")
        await ss.subscribe(on_event)
"""

# Composition layer
from .api import SimpliSafe

# Platform layer
from .platform import RealtimeChannel, SessionManager

# Runtime layer
from .runtime import AlarmSystem

# Core
from .core import (
    AlarmEventTag,
    AlarmState,
    AmbiguousSubscriptionError,
    ApiError,
    ApiRequest,
    AuthFailureError,
    ClientSettings,
    InvalidArgumentError,
    NotAuthenticatedError,
    RealtimeEvent,
    SimpliSafeError,
    TransportFailureError,
    UnexpectedShapeError,
    VendorError,
)

__all__ = [
    # Composition
    "SimpliSafe",
    # Platform
    "SessionManager",
    "RealtimeChannel",
    # Runtime
    "AlarmSystem",
    # Types
    "AlarmEventTag",
    "AlarmState",
    "ApiRequest",
    "ClientSettings",
    "RealtimeEvent",
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
]

__version__ = "0.1.0"
