"""Help and version output."""

import platform
import sys

from timer_notify._version import __version__
from timer_notify.config.settings import APP_NAME, DEFAULT_DELAY, DEFAULT_TITLE

HELP_TEXT = f"""\
usage: {APP_NAME} [DURATION...] [MESSAGE [TITLE]] [-c COMMAND] [-n] [-V] [-h]

Wait for a delay in the background, then show a desktop notification.

Durations:
  A duration is a number with an optional unit: d (days), h (hours),
  m (minutes) or s (seconds). Units are case-insensitive and default to
  seconds. Durations add up, in any order: "1h 10m" and "10m 1h" both
  wait 4200 seconds. Without a duration the timer waits {DEFAULT_DELAY} seconds.

Message and title:
  The first argument that is not a duration is the message, the second
  one is the title. Further arguments are ignored. The message defaults
  to the length of the delay, the title defaults to "{DEFAULT_TITLE}".

Options:
  -c, --command COMMAND  Run COMMAND through the shell instead of the
                         notifier. It receives the time, the delay in
                         seconds, the title and the message on stdin,
                         one per line.
  -n, --dry-run          Show what would run without starting a timer
  -V, --version          Show version and system information
  -h, --help             Show this help and exit

Examples:
  {APP_NAME} 5m Tea                      Notify "Tea" in 5 minutes
  {APP_NAME} 1h 10m Laundry              Notify "Laundry" in 1 hour 10 minutes
  {APP_NAME} 45 "Fresh is best" Pasta    Title "Pasta", in 45 seconds
  {APP_NAME} 25m -c 'cat >> ~/log.txt'   Append the details to a file
  timer 90                               Short alias
"""


def print_help() -> None:
    """Print usage text to stdout."""
    print(HELP_TEXT, end="")


def print_version() -> None:
    """Print version and system information."""
    print(
        f"{APP_NAME} {__version__} "
        f"(Python {sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}, "
        f"{platform.system()} {platform.machine()})"
    )


__all__ = ["HELP_TEXT", "print_help", "print_version"]
