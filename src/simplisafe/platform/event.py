"""
Realtime event classification.

Maps the vendor's numeric event codes (eventCid) onto AlarmEventTag.
Pure lookup, no transport involved.
"""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError

from simplisafe.client.streaming import EventPayload
from simplisafe.core.types import AlarmEventTag, RealtimeEvent

EVENT_CODE_TAGS: dict[int, AlarmEventTag] = {
    # 1400: master PIN, 1407: remote
    1400: AlarmEventTag.OFF,
    1407: AlarmEventTag.OFF,
    9441: AlarmEventTag.HOME_COUNT,
    3441: AlarmEventTag.HOME,
    # 9401/3401: keypad, 9407/3407: remote
    9401: AlarmEventTag.AWAY_COUNT,
    9407: AlarmEventTag.AWAY_COUNT,
    3401: AlarmEventTag.AWAY,
    3407: AlarmEventTag.AWAY,
    1429: AlarmEventTag.ENTRY,
    1170: AlarmEventTag.MOTION,  # camera motion
}

# Automatic self-test; never delivered
SUPPRESSED_EVENT_CODES: frozenset[int] = frozenset({1602})


def event_code(payload: dict[str, Any]) -> int | None:
    """Extract eventCid, or None if missing or not an integer."""
    try:
        return EventPayload.model_validate(payload).eventCid
    except ValidationError:
        return None


def classify_event(payload: dict[str, Any]) -> RealtimeEvent | None:
    """
    Build the RealtimeEvent for a raw push payload.

    Returns None for suppressed codes. Unknown codes get tag None.
    """
    code = event_code(payload)
    if code in SUPPRESSED_EVENT_CODES:
        return None
    return RealtimeEvent(tag=EVENT_CODE_TAGS.get(code), payload=payload)
