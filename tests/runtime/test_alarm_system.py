"""
Unit tests for AlarmSystem - subscription resolution and alarm operations.

Runs against FakeSimpliSafeApi with a logged-in session (user id 1234).
"""

import pytest

from simplisafe.core.exceptions import (
    AmbiguousSubscriptionError,
    InvalidArgumentError,
    UnexpectedShapeError,
)
from simplisafe.core.types import AlarmState
from simplisafe.runtime.system import AlarmSystem, build_query

SUBSCRIPTIONS_PATH = "/users/1234/subscriptions"


@pytest.fixture
def system(logged_in_session):
    return AlarmSystem(logged_in_session)


@pytest.fixture
def one_subscription(api, make_subscription):
    """Account with a single subscription (sid 555)."""
    sub = make_subscription()
    api.add("GET", SUBSCRIPTIONS_PATH, api.json(200, {"subscriptions": [sub]}))
    api.add("GET", "/subscriptions/555/", api.json(200, {"subscription": sub}))
    return sub


@pytest.fixture
def two_subscriptions(api, make_subscription):
    subs = [make_subscription(sid=555), make_subscription(sid=777)]
    api.add("GET", SUBSCRIPTIONS_PATH, api.json(200, {"subscriptions": subs}))
    return subs


class TestUserInfo:
    async def test_get_user_info(self, api, system):
        api.add(
            "GET",
            "/users/1234/loginInfo",
            api.json(200, {"loginInfo": {"email": "me@example.com"}}),
        )

        assert await system.get_user_info() == {"email": "me@example.com"}


class TestSubscriptions:
    async def test_get_subscriptions_lists_inactive_too(self, api, system, one_subscription):
        subs = await system.get_subscriptions()

        assert subs == [one_subscription]
        assert api.calls("GET", SUBSCRIPTIONS_PATH)[0].url.params["activeOnly"] == "false"

    async def test_single_subscription_is_cached(self, system, one_subscription):
        await system.get_subscriptions()

        assert system.session.subscription_id == 555

    async def test_multiple_subscriptions_not_cached(self, system, two_subscriptions):
        subs = await system.get_subscriptions()

        assert len(subs) == 2
        assert system.session.subscription_id is None

    async def test_get_subscription_resolves_single(self, api, system, one_subscription):
        sub = await system.get_subscription()

        assert sub == one_subscription
        assert system.session.subscription_id == 555
        assert len(api.calls("GET", "/subscriptions/555/")) == 1

    async def test_get_subscription_uses_cache(self, api, system, one_subscription):
        await system.get_subscription()
        await system.get_subscription()

        assert len(api.calls("GET", SUBSCRIPTIONS_PATH)) == 1

    async def test_get_subscription_ambiguous(self, api, system, two_subscriptions):
        with pytest.raises(AmbiguousSubscriptionError):
            await system.get_subscription()

        assert system.session.subscription_id is None
        assert api.calls("GET", "/subscriptions/555/") == []

    async def test_get_subscription_no_subscriptions(self, api, system):
        api.add("GET", SUBSCRIPTIONS_PATH, api.json(200, {"subscriptions": []}))

        with pytest.raises(AmbiguousSubscriptionError):
            await system.get_subscription()

    async def test_get_subscription_explicit_id(
        self, api, system, two_subscriptions, make_subscription
    ):
        api.add(
            "GET",
            "/subscriptions/777/",
            api.json(200, {"subscription": make_subscription(sid=777)}),
        )

        sub = await system.get_subscription(777)

        assert sub["sid"] == 777
        assert api.calls("GET", SUBSCRIPTIONS_PATH) == []

    async def test_missing_subscriptions_key(self, api, system):
        api.add("GET", SUBSCRIPTIONS_PATH, api.json(200, {"other": []}))

        with pytest.raises(UnexpectedShapeError):
            await system.get_subscriptions()


class TestSetDefaultSubscription:
    @pytest.mark.parametrize("value", [None, "", 0])
    def test_rejects_empty(self, system, value):
        with pytest.raises(InvalidArgumentError):
            system.set_default_subscription(value)

    def test_overrides_resolved_id(self, system):
        system.session.subscription_id = 555

        system.set_default_subscription(777)

        assert system.session.subscription_id == 777

    async def test_used_by_later_calls(self, api, system, two_subscriptions, make_subscription):
        api.add(
            "GET",
            "/subscriptions/777/",
            api.json(200, {"subscription": make_subscription(sid=777)}),
        )
        system.set_default_subscription(777)

        sub = await system.get_subscription()

        assert sub["sid"] == 777


class TestAlarmState:
    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("OFF", AlarmState.OFF),
            ("HOME", AlarmState.HOME),
            ("AWAY", AlarmState.AWAY),
            ("AWAY_COUNT", AlarmState.AWAY_COUNT),
            ("HOME_COUNT", AlarmState.HOME_COUNT),
            ("ALARM_COUNT", AlarmState.ALARM_COUNT),
            ("ALARM", AlarmState.ALARM),
        ],
    )
    async def test_maps_alarm_state(self, api, system, make_subscription, raw, expected):
        system.set_default_subscription(555)
        api.add(
            "GET",
            "/subscriptions/555/",
            api.json(200, {"subscription": make_subscription(alarm_state=raw)}),
        )

        assert await system.get_alarm_state() is expected

    @pytest.mark.parametrize("raw", ["OFF", "HOME", "AWAY", None])
    async def test_alarming_overrides_state(self, api, system, make_subscription, raw):
        system.set_default_subscription(555)
        api.add(
            "GET",
            "/subscriptions/555/",
            api.json(
                200,
                {"subscription": make_subscription(alarm_state=raw, is_alarming=True)},
            ),
        )

        assert await system.get_alarm_state() is AlarmState.ALARM

    async def test_missing_system_status(self, api, system):
        system.set_default_subscription(555)
        api.add(
            "GET",
            "/subscriptions/555/",
            api.json(200, {"subscription": {"sid": 555, "location": {}}}),
        )

        with pytest.raises(UnexpectedShapeError):
            await system.get_alarm_state()

    async def test_unknown_state(self, api, system, make_subscription):
        system.set_default_subscription(555)
        api.add(
            "GET",
            "/subscriptions/555/",
            api.json(200, {"subscription": make_subscription(alarm_state="PANIC")}),
        )

        with pytest.raises(UnexpectedShapeError):
            await system.get_alarm_state()


class TestSetAlarmState:
    @pytest.mark.parametrize("target", ["Away", "away", "AWAY"])
    async def test_case_insensitive(self, api, system, one_subscription, target):
        api.add(
            "POST",
            "/ss3/subscriptions/555/state/away",
            api.json(200, {"state": "AWAY_COUNT"}),
        )

        result = await system.set_alarm_state(target)

        assert result == {"state": "AWAY_COUNT"}
        assert len(api.calls("POST", "/ss3/subscriptions/555/state/away")) == 1

    @pytest.mark.parametrize("target", ["invalid", "alarm", "", None])
    async def test_invalid_target_makes_no_call(self, api, system, target):
        sent_before = len(api.requests)

        with pytest.raises(InvalidArgumentError):
            await system.set_alarm_state(target)

        assert len(api.requests) == sent_before

    async def test_resolves_subscription_first(self, api, system, one_subscription):
        api.add("POST", "/ss3/subscriptions/555/state/off", api.json(200, {}))

        await system.set_alarm_state("off")

        assert len(api.calls("GET", SUBSCRIPTIONS_PATH)) == 1

    async def test_ambiguous_subscription(self, api, system, two_subscriptions):
        with pytest.raises(AmbiguousSubscriptionError):
            await system.set_alarm_state("home")

        assert api.calls("POST", "/ss3/subscriptions/555/state/home") == []


class TestEventsAndSensors:
    async def test_get_events_with_params(self, api, system):
        system.set_default_subscription(555)
        api.add(
            "GET",
            "/subscriptions/555/events",
            api.json(200, {"events": [{"eventCid": 1400}]}),
        )

        events = await system.get_events({"numEvents": 2, "cached": True})

        assert events == [{"eventCid": 1400}]
        url = api.calls("GET", "/subscriptions/555/events")[0].url
        assert url.query == b"numEvents=2&cached=true"

    async def test_get_events_without_params(self, api, system):
        system.set_default_subscription(555)
        api.add("GET", "/subscriptions/555/events", api.json(200, {"events": []}))

        assert await system.get_events({}) == []

        url = api.calls("GET", "/subscriptions/555/events")[0].url
        assert url.query == b""

    @pytest.mark.parametrize("force, expected", [(True, "true"), (False, "false")])
    async def test_get_sensors_force_update(self, api, system, force, expected):
        system.set_default_subscription(555)
        api.add(
            "GET",
            "/ss3/subscriptions/555/sensors",
            api.json(200, {"sensors": [{"serial": "abc"}]}),
        )

        sensors = await system.get_sensors(force_update=force)

        assert sensors == [{"serial": "abc"}]
        url = api.calls("GET", "/ss3/subscriptions/555/sensors")[0].url
        assert url.params["forceUpdate"] == expected


class TestBuildQuery:
    def test_empty(self):
        assert build_query({}) == ""
        assert build_query(None) == ""

    def test_keeps_order_and_formats_booleans(self):
        assert build_query({"a": 1, "b": False, "c": "x"}) == "a=1&b=false&c=x"
