"""SimpliSafe - composes session, alarm system, and realtime channel."""

from __future__ import annotations

import logging
from typing import Any, Mapping

from simplisafe.config import load_account_config, load_client_settings
from simplisafe.core.types import AlarmState, ClientSettings, EventListener
from simplisafe.platform.realtime import RealtimeChannel
from simplisafe.platform.session import SessionManager
from simplisafe.runtime.system import AlarmSystem

logger = logging.getLogger(__name__)


class SimpliSafe:
    """
    One SimpliSafe 3 account: session, API operations, and realtime events.

    Two ways to create:

    1. Explicit login:
        async with SimpliSafe() as ss:
            await ss.login("me@example.com", "secret", persist_credentials=True)
            print(await ss.get_alarm_state())

    2. From simplisafe_config.yaml:
        ss = await SimpliSafe.from_config("home")
    """

    def __init__(
        self,
        settings: ClientSettings | None = None,
        session: SessionManager | None = None,
    ):
        self._session = session or SessionManager(settings)
        self._system = AlarmSystem(self._session)
        self._realtime = RealtimeChannel(self._session)

    @classmethod
    async def from_config(cls, account_key: str) -> "SimpliSafe":
        """Load settings and credentials for account_key and log in, retaining credentials."""
        username, password = load_account_config(account_key)
        client = cls(settings=load_client_settings(account_key))
        await client.login(username, password, persist_credentials=True)
        return client

    @property
    def session(self) -> SessionManager:
        return self._session

    @property
    def system(self) -> AlarmSystem:
        return self._system

    @property
    def realtime(self) -> RealtimeChannel:
        return self._realtime

    async def __aenter__(self) -> "SimpliSafe":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the realtime channel and the HTTP client."""
        await self._realtime.unsubscribe()
        await self._session.aclose()

    # --- Session ---

    async def login(
        self, username: str, password: str, persist_credentials: bool = False
    ) -> None:
        await self._session.login(username, password, persist_credentials)

    def logout(self, keep_credentials: bool = False) -> None:
        self._session.logout(keep_credentials)

    def is_logged_in(self) -> bool:
        return self._session.is_logged_in()

    async def get_user_id(self) -> int | str:
        return await self._session.get_user_id()

    # --- Alarm system ---

    async def get_user_info(self) -> dict[str, Any]:
        return await self._system.get_user_info()

    async def get_subscriptions(self) -> list[dict[str, Any]]:
        return await self._system.get_subscriptions()

    async def get_subscription(
        self, subscription_id: int | str | None = None
    ) -> dict[str, Any]:
        return await self._system.get_subscription(subscription_id)

    def set_default_subscription(self, subscription_id: int | str) -> None:
        self._system.set_default_subscription(subscription_id)

    async def get_alarm_state(self) -> AlarmState:
        return await self._system.get_alarm_state()

    async def set_alarm_state(self, target: str) -> Any:
        return await self._system.set_alarm_state(target)

    async def get_events(
        self, params: Mapping[str, Any] | None = None
    ) -> list[dict[str, Any]]:
        return await self._system.get_events(params)

    async def get_sensors(self, force_update: bool = False) -> list[dict[str, Any]]:
        return await self._system.get_sensors(force_update)

    # --- Realtime ---

    async def subscribe(self, listener: EventListener) -> None:
        await self._realtime.subscribe(listener)

    async def unsubscribe(self) -> None:
        await self._realtime.unsubscribe()

    def is_connected(self) -> bool:
        return self._realtime.is_connected()
