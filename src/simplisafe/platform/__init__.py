"""
Platform layer - session and realtime transport.

Usage:
    from simplisafe.platform import SessionManager, RealtimeChannel

    session = SessionManager()
    await session.login(username, password)
    channel = RealtimeChannel(session)
    await channel.subscribe(on_event)
"""

from .event import EVENT_CODE_TAGS, SUPPRESSED_EVENT_CODES, classify_event
from .realtime import ConnectionState, RealtimeChannel
from .session import SessionManager

__all__ = [
    "SessionManager",
    "RealtimeChannel",
    "ConnectionState",
    "classify_event",
    "EVENT_CODE_TAGS",
    "SUPPRESSED_EVENT_CODES",
]
