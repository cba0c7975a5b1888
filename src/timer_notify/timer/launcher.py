"""Start the background timer process.

The timer is a shell in its own session that sleeps and then runs the
resolved command. Nothing of it is owned by the launching process: there is
no wait, no monitoring and no way to cancel it from here.
"""

from __future__ import annotations

import subprocess

from timer_notify.config.settings import APP_NAME
from timer_notify.errors import LaunchError, UnsupportedPlatformError
from timer_notify.models import TimerConfig
from timer_notify.utils.platform import get_shell, supports_background_timers

# User strings arrive as positional parameters ($1 = delay, then the command).
# An interrupted or failed sleep ends the timer without running anything.
SLEEP_THEN_EXEC = 'sleep "$1" || exit; shift; exec "$@"'
SLEEP_THEN_PIPE = 'sleep "$1" || exit; input=$2; shift 2; printf \'%s\\n\' "$input" | "$@"'


def build_spawn_argv(config: TimerConfig) -> list[str]:
    """Build the argv of the detached sleep-then-run shell.

    Args:
        config: Resolved configuration.

    Returns:
        Argument list for subprocess.Popen.
    """
    resolved = config.resolved_command
    if resolved is None:
        raise ValueError("configuration has not been resolved")

    if resolved.stdin is None:
        return [get_shell(), "-c", SLEEP_THEN_EXEC, APP_NAME, str(config.delay), *resolved.argv]
    return [
        get_shell(),
        "-c",
        SLEEP_THEN_PIPE,
        APP_NAME,
        str(config.delay),
        resolved.stdin,
        *resolved.argv,
    ]


def launch_timer(config: TimerConfig) -> int:
    """Spawn the detached timer process without waiting for it.

    Args:
        config: Resolved configuration.

    Returns:
        Process ID of the background shell.

    Raises:
        UnsupportedPlatformError: No POSIX shell on this platform.
        LaunchError: The process could not be started.
    """
    if not supports_background_timers():
        raise UnsupportedPlatformError("Background timers are not supported on this platform.")

    argv = build_spawn_argv(config)
    try:
        process = subprocess.Popen(
            argv,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            start_new_session=True,
            close_fds=True,
        )
    except OSError as e:
        raise LaunchError(
            "Could not start the background timer process.",
            details=str(e),
        ) from e
    return process.pid


__all__ = ["SLEEP_THEN_EXEC", "SLEEP_THEN_PIPE", "build_spawn_argv", "launch_timer"]
