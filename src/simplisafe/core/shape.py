"""Helpers for picking fields out of SimpliSafe response bodies."""

from __future__ import annotations

from typing import Any

from .exceptions import UnexpectedShapeError


def require(data: Any, *path: str) -> Any:
    """
    Walk nested dicts along path and return the value found.

    Raises:
        UnexpectedShapeError: If any step is missing or not a dict
    """
    current = data
    for depth, key in enumerate(path):
        if not isinstance(current, dict) or current.get(key) is None:
            missing = ".".join(path[: depth + 1])
            raise UnexpectedShapeError(f"Response is missing '{missing}'")
        current = current[key]
    return current
