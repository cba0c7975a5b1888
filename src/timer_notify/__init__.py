"""timer-notify - wait in the background, then show a desktop notification.

This package provides the duration parser, default resolution, notifier
command construction and the detached launcher behind the timer-notify CLI.
"""

from timer_notify._version import __version__
from timer_notify.cli import main
from timer_notify.timer import launch_timer, parse_arguments, resolve_defaults

__all__ = [
    "__version__",
    "main",
    "parse_arguments",
    "resolve_defaults",
    "launch_timer",
]
