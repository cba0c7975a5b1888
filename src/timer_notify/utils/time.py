"""Time formatting utilities.

Provides the human-readable duration used in confirmations and default
messages, and the timestamp written into diagnostic blocks.
"""

from __future__ import annotations

from datetime import datetime

from timer_notify.config.settings import UNITS


def format_duration(seconds: int) -> str:
    """Format a number of seconds as a human-readable duration.

    Units are emitted largest first, zero counts are omitted and unit names
    are pluralized when the count is not 1.

    Args:
        seconds: Non-negative number of seconds.

    Returns:
        String like "1 hour, 1 minute, 1 second", or "" for 0.
    """
    parts = []
    remaining = seconds
    for _, unit_seconds, name in UNITS:
        count, remaining = divmod(remaining, unit_seconds)
        if count:
            parts.append(f"{count} {name}{'' if count == 1 else 's'}")
    return ", ".join(parts)


def format_timestamp(moment: datetime | None = None) -> str:
    """Format a moment as local ISO 8601 time to the second.

    Args:
        moment: Datetime to format. Defaults to now.

    Returns:
        String like "2024-12-19T14:30:00+01:00".
    """
    if moment is None:
        moment = datetime.now()
    return moment.astimezone().isoformat(timespec="seconds")


__all__ = ["format_duration", "format_timestamp"]
