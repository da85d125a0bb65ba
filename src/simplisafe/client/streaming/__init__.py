"""SimpliSafe realtime push channel (Socket.IO).

Usage:
    from simplisafe.client.streaming import EventStreamClient
"""

from simplisafe.client.streaming.client import EventPayload, EventStreamClient

__all__ = [
    "EventStreamClient",
    "EventPayload",
]
