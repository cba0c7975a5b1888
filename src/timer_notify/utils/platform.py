"""Platform detection and compatibility utilities.

Provides functions for picking the notifier backend and checking whether
detached background timers can run on this system.
"""

import platform
import shutil

from timer_notify.config.settings import SHELL


def detect_notifier() -> str:
    """Detect which notification backend to use.

    Returns:
        "osascript" on macOS, "notify-send" everywhere else.
    """
    if platform.system() == "Darwin":
        return "osascript"
    return "notify-send"


def supports_background_timers() -> bool:
    """Check whether a POSIX shell is available for the sleep wrapper.

    Returns:
        False on Windows, True otherwise.
    """
    return platform.system() != "Windows"


def notifier_available(name: str) -> bool:
    """Check whether a notifier program is on PATH."""
    return shutil.which(name) is not None


def get_shell() -> str:
    """Get the shell used to run timers and custom commands."""
    return SHELL


__all__ = [
    "detect_notifier",
    "supports_background_timers",
    "notifier_available",
    "get_shell",
]
