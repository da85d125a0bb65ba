import logging
from typing import Any, Awaitable, Callable, Optional
from urllib.parse import urlencode

import socketio
from pydantic import BaseModel, ConfigDict, StrictInt

logger = logging.getLogger(__name__)


# Push channel message payloads.
# Using Pydantic for runtime validation


class EventPayload(BaseModel):
    """
    Payload of an 'event' message.

    Only eventCid is read; every other field passes through untyped.
    """

    model_config = ConfigDict(
        extra="allow"
    )  # Panel events carry many vendor-specific fields

    # Strict: "3401" or 3401.0 is not an event code
    eventCid: Optional[StrictInt] = None


class EventStreamClient:
    """
    One Socket.IO connection to a user's event namespace.

    Bound to a single user id and access token for its whole life; a new
    token means a new client.
    """

    def __init__(
        self,
        url: str,
        user_id: str,
        access_token: str,
        on_event: Callable[[dict[str, Any]], Awaitable[None]],
        on_closed: Optional[Callable[[str], None]] = None,
    ):
        self.url = url
        self.user_id = user_id
        self.access_token = access_token
        self.on_event = on_event
        self.on_closed = on_closed

        self.sio = socketio.AsyncClient(
            reconnection=False,
            logger=logger.getChild("socketio"),
            engineio_logger=logger.getChild("engineio"),
        )
        self.sio.on("event", self._handle_event, namespace=self.namespace)
        self.sio.on("connect_error", self._handle_connect_error, namespace=self.namespace)
        self.sio.on("disconnect", self._handle_disconnect, namespace=self.namespace)

    @property
    def namespace(self) -> str:
        return f"/v1/user/{self.user_id}"

    @property
    def connection_url(self) -> str:
        query = urlencode({"ns": self.namespace, "accessToken": self.access_token})
        return f"{self.url}?{query}"

    @property
    def connected(self) -> bool:
        return bool(self.sio.connected)

    async def connect(self) -> None:
        """
        Open the connection, preferring websocket and falling back to polling.

        Raises:
            socketio.exceptions.ConnectionError: Connection could not be made
        """
        logger.info(f"[Realtime] Connecting to namespace {self.namespace}")
        await self.sio.connect(
            self.connection_url,
            namespaces=[self.namespace],
            transports=["websocket", "polling"],
            socketio_path="socket.io",
        )
        logger.info(f"[Realtime] Connected to namespace {self.namespace}")

    async def close(self) -> None:
        logger.info(f"[Realtime] Closing connection to {self.namespace}")
        await self.sio.disconnect()

    async def _handle_event(self, data: Any) -> None:
        if not isinstance(data, dict):
            logger.warning(f"[Realtime] Ignoring non-object event payload: {data!r}")
            return
        logger.debug(f"[Realtime] Received event {data.get('eventCid')}")
        await self.on_event(data)

    async def _handle_connect_error(self, data: Any = None) -> None:
        logger.warning(f"[Realtime] Connect error on {self.namespace}: {data}")
        self._notify_closed("connect_error")

    async def _handle_disconnect(self, *args: Any) -> None:
        logger.info(f"[Realtime] Disconnected from {self.namespace}")
        self._notify_closed("disconnect")

    def _notify_closed(self, reason: str) -> None:
        if self.on_closed:
            self.on_closed(reason)
