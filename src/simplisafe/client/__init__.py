"""Client modules for SimpliSafe API communication."""

from simplisafe.client.rest import AsyncRestClient
from simplisafe.client.streaming import EventStreamClient

__all__ = ["AsyncRestClient", "EventStreamClient"]
