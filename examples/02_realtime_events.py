"""
Print realtime alarm events until interrupted.

Run with:
    python 02_realtime_events.py
"""

import asyncio
import logging

from setup_logging import setup_logging
from simplisafe import AlarmEventTag, RealtimeEvent, SimpliSafe

setup_logging()
logger = logging.getLogger(__name__)


async def on_event(event: RealtimeEvent):
    if event.tag is None:
        logger.info(f"Unmapped event {event.event_code}: {event.payload.get('messageBody')}")
        return
    if event.tag in (AlarmEventTag.ENTRY, AlarmEventTag.MOTION):
        logger.warning(f"{event.tag.value}: {event.payload.get('messageBody')}")
    else:
        logger.info(f"Alarm is now {event.tag.value}")


async def main():
    ss = await SimpliSafe.from_config("home")

    async with ss:
        await ss.subscribe(on_event)
        while True:
            if not ss.is_connected():
                logger.info("Realtime channel down, reconnecting")
                await ss.subscribe(on_event)
            await asyncio.sleep(30)


if __name__ == "__main__":
    asyncio.run(main())
