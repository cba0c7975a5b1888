"""Categorized error handling with actionable messages.

Provides structured error types with exit codes and recovery suggestions.
Argument parsing never fails, so every category here is about starting the
background timer.
"""

from __future__ import annotations

from enum import IntEnum
from typing import ClassVar


class ExitCode(IntEnum):
    """Exit codes for scripting integration.

    Standard categories:
    - 0: Success (including --help, --version and --dry-run)
    - 40-49: System errors
    """

    SUCCESS = 0

    # System errors (40-49)
    LAUNCH_FAILED = 40
    UNSUPPORTED_PLATFORM = 41
    SYSTEM_ERROR = 49


class TimerNotifyError(Exception):
    """Base exception for timer-notify with structured error info.

    Attributes:
        message: Human-readable error message.
        code: Exit code for scripting.
        suggestion: Actionable recovery suggestion.
        details: Optional additional context.
    """

    code: ClassVar[ExitCode] = ExitCode.SYSTEM_ERROR
    suggestion: ClassVar[str] = ""

    def __init__(
        self,
        message: str,
        suggestion: str | None = None,
        details: str | None = None,
    ):
        self.message = message
        self._suggestion = suggestion
        self.details = details
        super().__init__(message)

    def get_suggestion(self) -> str:
        """Get the recovery suggestion."""
        return self._suggestion or self.suggestion

    def format_full(self) -> str:
        """Format the complete error message with suggestion."""
        parts = [f"Error: {self.message}"]
        if self.details:
            parts.append(f"Details: {self.details}")
        suggestion = self.get_suggestion()
        if suggestion:
            parts.append(f"Suggestion: {suggestion}")
        return "\n".join(parts)


class LaunchError(TimerNotifyError):
    """The background timer process could not be started."""

    code = ExitCode.LAUNCH_FAILED
    suggestion = "Check that /bin/sh exists and that the system allows new processes."


class UnsupportedPlatformError(TimerNotifyError):
    """Background timers need a POSIX shell."""

    code = ExitCode.UNSUPPORTED_PLATFORM
    suggestion = "Run timer-notify on Linux or macOS, or under WSL on Windows."


def format_error_for_user(error: Exception, verbose: bool = False) -> str:
    """Format any exception for user display.

    Args:
        error: Exception to format.
        verbose: If True, include details and suggestions.

    Returns:
        Formatted error message string.
    """
    if isinstance(error, TimerNotifyError):
        if verbose:
            return error.format_full()
        return f"Error: {error.message}"
    return f"Error: {error}"


def get_exit_code(error: Exception) -> int:
    """Get the exit code for an exception.

    Args:
        error: Exception to get code for.

    Returns:
        Integer exit code.
    """
    if isinstance(error, TimerNotifyError):
        return error.code
    return ExitCode.SYSTEM_ERROR


__all__ = [
    "ExitCode",
    "TimerNotifyError",
    "LaunchError",
    "UnsupportedPlatformError",
    "format_error_for_user",
    "get_exit_code",
]
