"""Command-line interface for timer-notify.

This module provides the main entry point: parse the arguments, resolve the
defaults and hand the timer to a detached background process.
"""

import sys
from typing import Optional, Sequence

from timer_notify.display.colors import Colors
from timer_notify.errors import TimerNotifyError, format_error_for_user, get_exit_code
from timer_notify.timer.defaults import resolve_defaults
from timer_notify.timer.launcher import launch_timer
from timer_notify.timer.parser import parse_arguments
from timer_notify.utils.platform import notifier_available


def format_confirmation(pid: int, time_description: str) -> str:
    """Format the line printed once the timer is running."""
    return f"[{pid}] Set timer for {time_description}."


def run_dry(config) -> None:
    """Show what a resolved configuration would run, without starting it."""
    resolved = config.resolved_command
    print(f"[dry-run] Would run after {config.time_description}: {resolved.display()}")

    program = resolved.argv[0]
    if resolved.stdin is None and not notifier_available(program):
        print(
            f"{Colors.YELLOW}Warning: '{program}' was not found on PATH; "
            f"the notification would fail.{Colors.RESET}",
            file=sys.stderr,
        )


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Main entry point for the timer-notify CLI.

    This function is the primary entry point when installed via pip/pipx/uv.

    Args:
        argv: Arguments without the program name. Defaults to sys.argv[1:].
    """
    if argv is None:
        argv = sys.argv[1:]

    config = resolve_defaults(parse_arguments(argv))

    if config.dry_run:
        run_dry(config)
        return

    try:
        pid = launch_timer(config)
    except TimerNotifyError as e:
        print(f"{Colors.RED}{format_error_for_user(e, verbose=True)}{Colors.RESET}", file=sys.stderr)
        sys.exit(get_exit_code(e))

    print(format_confirmation(pid, config.time_description))


__all__ = ["format_confirmation", "run_dry", "main"]
