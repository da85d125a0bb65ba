"""
Core data structures shared by the session and realtime layers.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Awaitable, Callable

# Fixed client identity of the SimpliSafe web app. The API rejects token
# grants from any other client id.
DEFAULT_CLIENT_ID = "4df55627-46b2-4e2c-866b-1521b395ded2.1-28-0.WebApp.simplisafe.com"
DEFAULT_CLIENT_SECRET = ""


@dataclass
class ClientSettings:
    """Endpoints and client identity used by SessionManager and RealtimeChannel."""

    api_url: str = "https://api.simplisafe.com/v1"
    realtime_url: str = "https://api.simplisafe.com"
    client_id: str = DEFAULT_CLIENT_ID
    client_secret: str = DEFAULT_CLIENT_SECRET
    timeout_seconds: float = 30.0


@dataclass(frozen=True)
class TokenSet:
    """
    Access/refresh token pair plus type and absolute expiry.

    Frozen so the session can only swap the whole set, never one field.
    """

    access_token: str
    refresh_token: str | None
    token_type: str
    expires_at: float  # Unix timestamp

    def is_expired(self, now: float | None = None) -> bool:
        now = time.time() if now is None else now
        return now >= self.expires_at

    @property
    def authorization(self) -> str:
        return f"{self.token_type} {self.access_token}"

    @classmethod
    def from_response(cls, response: dict[str, Any]) -> TokenSet:
        """Build from a /api/token response body."""
        return cls(
            access_token=response["access_token"],
            refresh_token=response.get("refresh_token"),
            token_type=response.get("token_type", "Bearer"),
            expires_at=time.time() + float(response.get("expires_in", 0)),
        )


@dataclass
class ApiRequest:
    """
    A single SimpliSafe API call, relative to ClientSettings.api_url.

    The Authorization header is added by SessionManager; anything in
    headers is sent as-is on top of it.
    """

    method: str
    url: str
    json: Any = None
    params: dict[str, Any] | None = None
    headers: dict[str, str] = field(default_factory=dict)


class AlarmState(str, Enum):
    """Alarm state reported by the base station."""

    OFF = "OFF"
    HOME = "HOME"
    AWAY = "AWAY"
    AWAY_COUNT = "AWAY_COUNT"
    HOME_COUNT = "HOME_COUNT"
    ALARM_COUNT = "ALARM_COUNT"
    ALARM = "ALARM"


# States accepted by the state-change endpoint
TARGET_ALARM_STATES = ("off", "home", "away")


class AlarmEventTag(str, Enum):
    """Semantic tag for a realtime event code."""

    OFF = "OFF"
    HOME_COUNT = "HOME_COUNT"
    HOME = "HOME"
    AWAY_COUNT = "AWAY_COUNT"
    AWAY = "AWAY"
    ENTRY = "ENTRY"
    MOTION = "MOTION"


@dataclass
class RealtimeEvent:
    """
    Event delivered to realtime listeners.

    tag is None for event codes without a semantic mapping; payload is
    always the raw message from the push channel.
    """

    tag: AlarmEventTag | None
    payload: dict[str, Any]

    @property
    def event_code(self) -> int | None:
        return self.payload.get("eventCid")


EventListener = Callable[[RealtimeEvent], Awaitable[None]]
