"""Notification command construction with cross-platform support.

Builds the invocation that fires when a timer elapses: the desktop notifier
for the current platform, or a user command fed a diagnostic block on stdin.
Nothing here runs a process; the launcher does that after the delay.
"""

from __future__ import annotations

from datetime import datetime

from timer_notify.config.settings import APP_NAME, NOTIFY_URGENCY
from timer_notify.models import ResolvedCommand
from timer_notify.utils.platform import detect_notifier, get_shell
from timer_notify.utils.time import format_timestamp


def build_linux_command(title: str, message: str, urgency: str = NOTIFY_URGENCY) -> ResolvedCommand:
    """Build a notify-send invocation."""
    argv = ["notify-send", "-u", urgency, "-a", APP_NAME, "--", title]
    if message:
        argv.append(message)
    return ResolvedCommand(argv=argv)


def build_macos_command(title: str, message: str, urgency: str = NOTIFY_URGENCY) -> ResolvedCommand:
    """Build an osascript invocation."""
    title_escaped = title.replace("\\", "\\\\").replace('"', '\\"')
    message_escaped = message.replace("\\", "\\\\").replace('"', '\\"')

    script = f'display notification "{message_escaped}" with title "{title_escaped}"'
    return ResolvedCommand(argv=["osascript", "-e", script])


def build_notifier_command(title: str, message: str, urgency: str = NOTIFY_URGENCY) -> ResolvedCommand:
    """Build the desktop notification command for this platform.

    Args:
        title: Notification title.
        message: Notification body. Left out when empty.
        urgency: Notification urgency (low, normal, critical).

    Returns:
        ResolvedCommand for notify-send or osascript.
    """
    if detect_notifier() == "osascript":
        return build_macos_command(title, message, urgency)
    return build_linux_command(title, message, urgency)


def build_diagnostic_block(
    delay: int,
    title: str,
    message: str,
    now: datetime | None = None,
) -> str:
    """Build the text piped into a custom command.

    Lines, in order: timestamp, delay in seconds, title, message.
    """
    return "\n".join([format_timestamp(now), str(delay), title, message])


def build_custom_command(
    command: str,
    delay: int,
    title: str,
    message: str,
    now: datetime | None = None,
) -> ResolvedCommand:
    """Build a shell invocation of a user command with the diagnostic block on stdin.

    Args:
        command: Command line as typed by the user.
        delay: Timer delay in seconds.
        title: Resolved title.
        message: Resolved message.
        now: Moment recorded in the block. Defaults to now.

    Returns:
        ResolvedCommand running the command through the shell.
    """
    return ResolvedCommand(
        argv=[get_shell(), "-c", command],
        stdin=build_diagnostic_block(delay, title, message, now),
    )


__all__ = [
    "build_linux_command",
    "build_macos_command",
    "build_notifier_command",
    "build_diagnostic_block",
    "build_custom_command",
]
