"""Fill in everything the user left out.

Resolution runs once the arguments are parsed: the minimum delay, the default
title and message, and finally the command to run when the timer fires. The
command is built last because it depends on every other field.
"""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime

from timer_notify.config.settings import DEFAULT_DELAY, DEFAULT_TITLE
from timer_notify.models import TimerConfig
from timer_notify.notify.notifier import build_custom_command, build_notifier_command
from timer_notify.utils.time import format_duration


def resolve_defaults(config: TimerConfig, now: datetime | None = None) -> TimerConfig:
    """Return a fully resolved copy of a parsed configuration.

    Resolving an already resolved configuration again gives an equal result
    for the same ``now``.

    Args:
        config: Configuration from parse_arguments.
        now: Moment written into a custom command's diagnostic block.
            Defaults to the current time.

    Returns:
        New TimerConfig with time_description and resolved_command set.
    """
    delay = config.delay or DEFAULT_DELAY
    time_description = format_duration(delay)
    title = config.title if config.title is not None else DEFAULT_TITLE
    message = config.message if config.message is not None else time_description

    if config.command:
        resolved = build_custom_command(config.command, delay, title, message, now)
    else:
        resolved = build_notifier_command(title, message)

    return replace(
        config,
        delay=delay,
        title=title,
        message=message,
        time_description=time_description,
        resolved_command=resolved,
    )


__all__ = ["resolve_defaults"]
