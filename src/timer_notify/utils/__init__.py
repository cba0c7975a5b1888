"""Utility functions.

Modules:
    time: Duration and timestamp formatting
    platform: Platform detection and compatibility
"""

from timer_notify.utils.platform import (
    detect_notifier,
    get_shell,
    notifier_available,
    supports_background_timers,
)
from timer_notify.utils.time import format_duration, format_timestamp

__all__ = [
    "format_duration",
    "format_timestamp",
    "detect_notifier",
    "get_shell",
    "notifier_available",
    "supports_background_timers",
]
