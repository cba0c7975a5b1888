"""Configuration constants for timer-notify.

Everything the tool needs to know ahead of time lives here as module-level
constants. There is no configuration file and no environment override.
"""

import re

APP_NAME = "timer-notify"

# Used when no duration token (or only zero-valued ones) was given
DEFAULT_DELAY = 5

DEFAULT_TITLE = "Timer"

# notify-send urgency level (low, normal, critical)
NOTIFY_URGENCY = "critical"

# Shell used for the sleep wrapper and for custom commands
SHELL = "/bin/sh"

# Duration units, largest first: (suffix, seconds, singular name)
UNITS = (
    ("d", 86400, "day"),
    ("h", 3600, "hour"),
    ("m", 60, "minute"),
    ("s", 1, "second"),
)

UNIT_MULTIPLIERS = {suffix: seconds for suffix, seconds, _ in UNITS}

# <digits><unit>?  e.g. "45", "5m", "1H"
DURATION_PATTERN = re.compile(r"^([0-9]+)([dhms]?)$", re.IGNORECASE)

# Flags are compared after lowercasing the token
HELP_FLAGS = frozenset({"-h", "--help"})
COMMAND_FLAGS = frozenset({"-c", "--command"})
VERSION_FLAGS = frozenset({"-v", "--version"})
DRY_RUN_FLAGS = frozenset({"-n", "--dry-run"})


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
