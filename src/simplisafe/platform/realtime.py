"""
RealtimeChannel - push channel for alarm events.

Keeps at most one EventStreamClient per session and fans its events out
to any number of listeners.
"""

from __future__ import annotations

import asyncio
import logging
from enum import Enum
from typing import Any

from socketio.exceptions import ConnectionError as SocketConnectionError

from simplisafe.client.streaming import EventStreamClient
from simplisafe.core.exceptions import NotAuthenticatedError
from simplisafe.core.types import EventListener, RealtimeEvent

from .event import classify_event
from .session import SessionManager

logger = logging.getLogger(__name__)


class ConnectionState(str, Enum):
    DISCONNECTED = "disconnected"
    CONNECTED = "connected"


class RealtimeChannel:
    """
    Realtime alarm events for the logged-in user.

    The first subscribe() opens the connection; later calls only add
    listeners. Any connection error drops the connection so the next
    subscribe() opens a fresh one.

    Example:
        channel = RealtimeChannel(session)

        async def on_event(event: RealtimeEvent):
            if event.tag is AlarmEventTag.ENTRY:
                print("Entry detected", event.payload)

        await channel.subscribe(on_event)
        ...
        await channel.unsubscribe()
    """

    def __init__(self, session: SessionManager):
        self.session = session
        self._stream: EventStreamClient | None = None
        self._listeners: list[EventListener] = []
        self._lock = asyncio.Lock()

    @property
    def state(self) -> ConnectionState:
        if self.is_connected():
            return ConnectionState.CONNECTED
        return ConnectionState.DISCONNECTED

    @property
    def listeners(self) -> list[EventListener]:
        return list(self._listeners)

    def is_connected(self) -> bool:
        return self._stream is not None and self._stream.connected

    async def subscribe(self, listener: EventListener) -> None:
        """
        Attach listener, opening the connection if none is live.

        Raises:
            NotAuthenticatedError: No session to connect with
            VendorError: Resolving the user id failed
        """
        async with self._lock:
            if self._stream is not None:
                self._listeners.append(listener)
                logger.debug(f"Listener added ({len(self._listeners)} total)")
                return

            if not self.session.is_logged_in():
                raise NotAuthenticatedError()

            user_id = await self.session.get_user_id()
            stream = EventStreamClient(
                self.session.settings.realtime_url,
                str(user_id),
                self.session.access_token,
                on_event=self._dispatch,
            )
            stream.on_closed = lambda reason: self._teardown(stream, reason)

            # A fresh connection starts with only this listener
            self._listeners = [listener]
            self._stream = stream

            try:
                await stream.connect()
            except SocketConnectionError as e:
                logger.warning(f"Realtime connection failed: {e}")
                self._teardown(stream, "connect_failed")
            except BaseException:
                # Cancelled or crashed mid-connect; never reuse this stream
                self._teardown(stream, "connect_aborted")
                raise

    async def unsubscribe(self) -> None:
        """Close the connection and drop all listeners. No-op when closed."""
        async with self._lock:
            stream = self._stream
            if stream is None:
                return
            self._stream = None
            self._listeners = []
            await stream.close()
            logger.info("Realtime channel closed")

    def _teardown(self, stream: EventStreamClient, reason: str) -> None:
        # Ignore late callbacks from a connection that was already replaced
        if self._stream is not stream:
            return
        logger.info(f"Realtime connection dropped ({reason})")
        self._stream = None

    async def _dispatch(self, payload: dict[str, Any]) -> None:
        event = classify_event(payload)
        if event is None:
            logger.debug(f"Suppressed event {payload.get('eventCid')}")
            return

        for listener in list(self._listeners):
            await self._notify(listener, event)

    async def _notify(self, listener: EventListener, event: RealtimeEvent) -> None:
        try:
            await listener(event)
        except Exception as e:
            logger.error(f"Realtime listener error: {e}", exc_info=True)
