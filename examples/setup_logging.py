"""Shared logging configuration for SimpliSafe examples."""

import logging


def setup_logging(level=logging.INFO):
    """Configure logging to show only simplisafe logs, hiding noisy dependencies."""
    logging.basicConfig(
        level=logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logging.getLogger("simplisafe").setLevel(level)
    # Socket.IO loggers are children of the streaming client logger
    logging.getLogger("simplisafe.client.streaming.client.socketio").setLevel(logging.WARNING)
    logging.getLogger("simplisafe.client.streaming.client.engineio").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)
