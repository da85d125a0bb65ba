"""
Runtime layer - alarm system operations over a SessionManager.

Usage:
    from simplisafe.runtime import AlarmSystem

    system = AlarmSystem(session)
    state = await system.get_alarm_state()
"""

from .system import AlarmSystem, build_query, format_query_value

__all__ = [
    "AlarmSystem",
    "build_query",
    "format_query_value",
]
