"""
AlarmSystem - account, subscription, alarm, event and sensor calls.

Stateless request plumbing on top of SessionManager.authenticated_request.
The default subscription id lives on the session.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from simplisafe.core.exceptions import (
    AmbiguousSubscriptionError,
    InvalidArgumentError,
    UnexpectedShapeError,
)
from simplisafe.core.shape import require
from simplisafe.core.types import TARGET_ALARM_STATES, AlarmState, ApiRequest
from simplisafe.platform.session import SessionManager

logger = logging.getLogger(__name__)


def format_query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def build_query(params: Mapping[str, Any] | None) -> str:
    """Render params as key=value pairs joined by '&'. Empty -> ''."""
    if not params:
        return ""
    return "&".join(f"{key}={format_query_value(value)}" for key, value in params.items())


class AlarmSystem:
    """SimpliSafe 3 account operations for one session."""

    def __init__(self, session: SessionManager):
        self.session = session

    async def _get(self, url: str) -> Any:
        return await self.session.authenticated_request(ApiRequest("GET", url))

    # --- Account ---

    async def get_user_info(self) -> dict[str, Any]:
        user_id = await self.session.get_user_id()
        data = await self._get(f"/users/{user_id}/loginInfo")
        return require(data, "loginInfo")

    # --- Subscriptions ---

    async def get_subscriptions(self) -> list[dict[str, Any]]:
        """
        List all subscriptions (active or not) for the user.

        Caches the subscription id when the account has exactly one.
        """
        user_id = await self.session.get_user_id()
        data = await self._get(f"/users/{user_id}/subscriptions?activeOnly=false")
        subscriptions = require(data, "subscriptions")

        if len(subscriptions) == 1:
            self.session.subscription_id = require(subscriptions[0], "sid")

        return subscriptions

    async def resolve_subscription_id(self) -> int | str:
        """
        Return the default subscription id, looking it up if needed.

        Raises:
            AmbiguousSubscriptionError: Account doesn't have exactly one subscription
        """
        if self.session.subscription_id:
            return self.session.subscription_id

        subscriptions = await self.get_subscriptions()
        if len(subscriptions) != 1:
            raise AmbiguousSubscriptionError(
                f"Subscription ID is ambiguous ({len(subscriptions)} subscriptions); "
                "call set_default_subscription() first"
            )
        return self.session.subscription_id

    async def get_subscription(
        self, subscription_id: int | str | None = None
    ) -> dict[str, Any]:
        """Fetch one subscription; defaults to the default subscription."""
        sid = subscription_id or await self.resolve_subscription_id()
        data = await self._get(f"/subscriptions/{sid}/")
        return require(data, "subscription")

    def set_default_subscription(self, subscription_id: int | str) -> None:
        if not subscription_id:
            raise InvalidArgumentError("Subscription ID not defined")
        self.session.subscription_id = subscription_id

    # --- Alarm ---

    async def get_alarm_state(self) -> AlarmState:
        """
        Current alarm state of the default subscription.

        isAlarming wins over alarmState.

        Raises:
            UnexpectedShapeError: Subscription has no location.system or an
                unknown alarmState
        """
        subscription = await self.get_subscription()
        try:
            system = require(subscription, "location", "system")
        except UnexpectedShapeError as e:
            raise UnexpectedShapeError("Subscription format not understood") from e

        if system.get("isAlarming"):
            return AlarmState.ALARM

        raw_state = system.get("alarmState")
        try:
            return AlarmState(str(raw_state).upper())
        except ValueError as e:
            raise UnexpectedShapeError(f"Unknown alarm state {raw_state!r}") from e

    async def set_alarm_state(self, target: str) -> Any:
        """
        Arm or disarm the system.

        Args:
            target: "off", "home" or "away" (any case)

        Raises:
            InvalidArgumentError: target is not a settable state
        """
        state = target.lower() if isinstance(target, str) else ""
        if state not in TARGET_ALARM_STATES:
            raise InvalidArgumentError(f"Invalid target state {target!r}")

        sid = await self.resolve_subscription_id()
        logger.info(f"Setting alarm state of subscription {sid} to {state}")
        return await self.session.authenticated_request(
            ApiRequest("POST", f"/ss3/subscriptions/{sid}/state/{state}")
        )

    # --- Events / sensors ---

    async def get_events(
        self, params: Mapping[str, Any] | None = None
    ) -> list[dict[str, Any]]:
        """
        Fetch the event log.

        Args:
            params: Query parameters, e.g. {"numEvents": 50}
        """
        sid = await self.resolve_subscription_id()
        url = f"/subscriptions/{sid}/events"
        query = build_query(params)
        if query:
            url = f"{url}?{query}"

        data = await self._get(url)
        return require(data, "events")

    async def get_sensors(self, force_update: bool = False) -> list[dict[str, Any]]:
        """Fetch sensors; force_update asks the base station for fresh readings."""
        sid = await self.resolve_subscription_id()
        data = await self._get(
            f"/ss3/subscriptions/{sid}/sensors"
            f"?forceUpdate={format_query_value(bool(force_update))}"
        )
        return require(data, "sensors")
