"""Argument scanning for timer-notify.

Arguments are scanned left to right. Duration tokens add to the delay, the
recognized flags act immediately, and everything else fills the message and
title slots in that order. No token is ever rejected.
"""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from timer_notify.config.settings import (
    COMMAND_FLAGS,
    DRY_RUN_FLAGS,
    DURATION_PATTERN,
    HELP_FLAGS,
    UNIT_MULTIPLIERS,
    VERSION_FLAGS,
)
from timer_notify.display.help import print_help, print_version
from timer_notify.models import TimerConfig


def parse_duration_token(token: str) -> Optional[int]:
    """Convert a duration token to seconds.

    Args:
        token: Argument such as "45", "5m" or "2H".

    Returns:
        Number of seconds, or None if the token is not a duration.
    """
    match = DURATION_PATTERN.fullmatch(token)
    if match is None:
        return None
    digits, unit = match.groups()
    return int(digits) * UNIT_MULTIPLIERS[unit.lower() or "s"]


def parse_arguments(args: Sequence[str]) -> TimerConfig:
    """Build a timer configuration from command-line arguments.

    -h/--help and -V/--version print their output and exit with status 0
    as soon as they are reached; tokens after them are never looked at.

    Args:
        args: Arguments without the program name.

    Returns:
        Unresolved TimerConfig.
    """
    config = TimerConfig()
    positionals = []

    tokens = iter(args)
    for token in tokens:
        flag = token.lower()
        if flag in HELP_FLAGS:
            print_help()
            sys.exit(0)
        if flag in VERSION_FLAGS:
            print_version()
            sys.exit(0)
        if flag in COMMAND_FLAGS:
            # A trailing -c without a value leaves the default notifier in place
            config.command = next(tokens, None) or None
            continue
        if flag in DRY_RUN_FLAGS:
            config.dry_run = True
            continue

        seconds = parse_duration_token(token)
        if seconds is not None:
            config.delay += seconds
        else:
            positionals.append(token)

    # Arguments beyond message and title are dropped
    if len(positionals) > 0:
        config.message = positionals[0]
    if len(positionals) > 1:
        config.title = positionals[1]

    return config


__all__ = ["parse_duration_token", "parse_arguments"]
