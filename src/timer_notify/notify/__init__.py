"""Notification command construction for timer-notify."""

from timer_notify.notify.notifier import (
    build_custom_command,
    build_diagnostic_block,
    build_linux_command,
    build_macos_command,
    build_notifier_command,
)

__all__ = [
    "build_custom_command",
    "build_diagnostic_block",
    "build_linux_command",
    "build_macos_command",
    "build_notifier_command",
]
