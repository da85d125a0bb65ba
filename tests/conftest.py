"""
Pytest fixtures for simplisafe SDK tests.

Provides a scripted fake of the SimpliSafe HTTP API so tests run without
network access.

Key fixture pattern:
- api: FakeSimpliSafeApi with authCheck scripted
- session: SessionManager wired to the fake API (not logged in)
- logged_in_session: same, after a successful password login
- Tests add routes with api.add() and assert with api.calls() / api.token_grants
"""

from typing import Any, Callable

import pytest

from simplisafe.testing import FakeSimpliSafeApi, token_body

USER_ID = 1234
SUBSCRIPTION_ID = 555


@pytest.fixture
def make_subscription() -> Callable[..., dict[str, Any]]:
    """Factory for subscription records shaped like /subscriptions/{sid}/ data."""

    def _make(
        sid: int = SUBSCRIPTION_ID,
        alarm_state: str | None = "OFF",
        is_alarming: bool = False,
    ) -> dict[str, Any]:
        return {
            "sid": sid,
            "uid": USER_ID,
            "location": {
                "system": {
                    "alarmState": alarm_state,
                    "isAlarming": is_alarming,
                    "version": 3,
                }
            },
        }

    return _make


@pytest.fixture
def api() -> FakeSimpliSafeApi:
    """Fake API with authCheck scripted.

    Token responses are added per test (or by logged_in_session). Responses
    for a route are served in order and the last one repeats.
    """
    fake = FakeSimpliSafeApi()
    fake.add("GET", "/api/authCheck", fake.json(200, {"userId": USER_ID}))
    return fake


@pytest.fixture
async def session(api):
    session = api.session()
    yield session
    await session.aclose()


@pytest.fixture
async def logged_in_session(api, session):
    """Session after a password login returning access-1/refresh-1."""
    api.add("POST", "/api/token", api.json(200, token_body()))
    await session.login("me@example.com", "secret")
    return session
