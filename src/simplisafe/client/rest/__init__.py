"""
SimpliSafe REST transport.

Usage:
    from simplisafe.client.rest import AsyncRestClient
    rest = AsyncRestClient(ClientSettings())
"""

from simplisafe.client.rest.client import AsyncRestClient, decode_body

__all__ = [
    "AsyncRestClient",
    "decode_body",
]
