"""Test doubles for code built on the SDK."""

from .fake_api import FakeSimpliSafeApi, token_body

__all__ = ["FakeSimpliSafeApi", "token_body"]
