"""
Read and change the alarm state.

Credentials come from simplisafe_config.yaml (see simplisafe_config.yaml.example).

Run with:
    python 01_alarm_state.py            # print state, sensors, recent events
    python 01_alarm_state.py home       # arm home
"""

import asyncio
import logging
import sys

from setup_logging import setup_logging
from simplisafe import SimpliSafe

setup_logging()
logger = logging.getLogger(__name__)


async def main():
    ss = await SimpliSafe.from_config("home")

    async with ss:
        subscriptions = await ss.get_subscriptions()
        if len(subscriptions) > 1:
            # Pick the first one; a real app would ask the user
            ss.set_default_subscription(subscriptions[0]["sid"])

        logger.info(f"Alarm state: {(await ss.get_alarm_state()).value}")

        sensors = await ss.get_sensors(force_update=False)
        logger.info(f"{len(sensors)} sensors")

        for event in await ss.get_events({"numEvents": 5}):
            logger.info(f"Event {event.get('eventCid')}: {event.get('messageBody')}")

        if len(sys.argv) > 1:
            await ss.set_alarm_state(sys.argv[1])
            logger.info(f"Requested state {sys.argv[1]}")


if __name__ == "__main__":
    asyncio.run(main())
