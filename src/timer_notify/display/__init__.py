"""Terminal display helpers.

Modules:
    colors: ANSI color codes and terminal detection
    help: Usage text and version output
"""

from timer_notify.display.colors import Colors, disable_colors, init_colors, supports_color
from timer_notify.display.help import HELP_TEXT, print_help, print_version

__all__ = [
    "Colors",
    "supports_color",
    "disable_colors",
    "init_colors",
    "HELP_TEXT",
    "print_help",
    "print_version",
]
