"""Timer pipeline.

Modules:
    parser: Argument scanning and duration tokens
    defaults: Default values and command resolution
    launcher: Detached background process
"""

from timer_notify.timer.defaults import resolve_defaults
from timer_notify.timer.launcher import build_spawn_argv, launch_timer
from timer_notify.timer.parser import parse_arguments, parse_duration_token

__all__ = [
    "parse_arguments",
    "parse_duration_token",
    "resolve_defaults",
    "build_spawn_argv",
    "launch_timer",
]
