"""Terminal color handling and detection.

Provides ANSI color codes for diagnostics written to stderr, with automatic
detection of color support.
"""

import platform
import sys


class Colors:
    """ANSI color codes for terminal output."""

    RESET = "\033[0m"
    YELLOW = "\033[93m"
    RED = "\033[91m"


def supports_color(stream=None) -> bool:
    """Check if the given stream supports color output.

    Args:
        stream: Stream to check. Defaults to sys.stderr.

    Returns:
        True if colors should be displayed, False otherwise.
    """
    stream = stream if stream is not None else sys.stderr
    if not hasattr(stream, "isatty") or not stream.isatty():
        return False
    if platform.system() == "Windows":
        return False
    return True


def disable_colors() -> None:
    """Blank out every color code."""
    for attr in dir(Colors):
        if not attr.startswith("_"):
            setattr(Colors, attr, "")


def init_colors() -> None:
    """Initialize colors based on terminal support.

    Disables all color codes if the terminal doesn't support colors.
    """
    if not supports_color():
        disable_colors()


# Auto-initialize on import
init_colors()

__all__ = ["Colors", "supports_color", "disable_colors", "init_colors"]
