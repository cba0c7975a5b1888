"""Configuration constants.

Modules:
    settings: Defaults, unit table and flag names
"""

from timer_notify.config.settings import (
    APP_NAME,
    COMMAND_FLAGS,
    DEFAULT_DELAY,
    DEFAULT_TITLE,
    DRY_RUN_FLAGS,
    DURATION_PATTERN,
    HELP_FLAGS,
    NOTIFY_URGENCY,
    SHELL,
    UNIT_MULTIPLIERS,
    UNITS,
    VERSION_FLAGS,
)

__all__ = [
    "APP_NAME",
    "DEFAULT_DELAY",
    "DEFAULT_TITLE",
    "NOTIFY_URGENCY",
    "SHELL",
    "UNITS",
    "UNIT_MULTIPLIERS",
    "DURATION_PATTERN",
    "HELP_FLAGS",
    "COMMAND_FLAGS",
    "VERSION_FLAGS",
    "DRY_RUN_FLAGS",
]
