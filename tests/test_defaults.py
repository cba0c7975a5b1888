"""
Tests for default resolution.
"""

import pytest

from timer_notify.models import TimerConfig
from timer_notify.timer.defaults import resolve_defaults
from timer_notify.timer.parser import parse_arguments


@pytest.mark.usefixtures("linux")
class TestResolveDefaults:
    """Tests for resolve_defaults function."""

    def test_no_arguments(self):
        """Test an empty command line gives the 5 second default timer."""
        config = resolve_defaults(parse_arguments([]))
        assert config.delay == 5
        assert config.title == "Timer"
        assert config.message == "5 seconds"
        assert config.time_description == "5 seconds"

    def test_zero_durations_use_minimum(self):
        """Test '0m 0s' is raised to the minimum delay."""
        config = resolve_defaults(parse_arguments(["0m", "0s"]))
        assert config.delay == 5

    def test_message_defaults_to_description(self):
        config = resolve_defaults(parse_arguments(["1h", "10m"]))
        assert config.message == "1 hour, 10 minutes"

    def test_given_values_kept(self):
        config = resolve_defaults(parse_arguments(["45", "Fresh is best", "Pasta"]))
        assert config.delay == 45
        assert config.message == "Fresh is best"
        assert config.title == "Pasta"
        assert config.time_description == "45 seconds"

    def test_input_not_modified(self):
        """Test resolution returns a new object."""
        parsed = TimerConfig()
        resolve_defaults(parsed)
        assert parsed.delay == 0
        assert parsed.resolved_command is None

    def test_default_notifier(self):
        config = resolve_defaults(parse_arguments(["5m", "Tea"]))
        assert config.resolved_command.argv == [
            "notify-send", "-u", "critical", "-a", "timer-notify", "--", "Timer", "Tea",
        ]
        assert config.resolved_command.stdin is None

    def test_empty_message_left_out(self):
        """Test an explicit empty message is not passed to the notifier."""
        config = resolve_defaults(parse_arguments(["5m", "", "Kitchen"]))
        assert config.message == ""
        assert config.resolved_command.argv[-1] == "Kitchen"

    def test_dash_message(self):
        """Test a message such as '-x' reaches the notifier after '--'."""
        config = resolve_defaults(parse_arguments(["5m", "-x"]))
        assert config.message == "-x"
        assert config.resolved_command.argv[-3:] == ["--", "Timer", "-x"]

    def test_custom_command(self, fixed_now):
        config = resolve_defaults(
            parse_arguments(["45", "Fresh is best", "Pasta", "-c", "cat >> log.txt"]),
            now=fixed_now,
        )
        resolved = config.resolved_command
        assert resolved.argv == ["/bin/sh", "-c", "cat >> log.txt"]
        lines = resolved.stdin.split("\n")
        assert len(lines) == 4
        assert lines[1:] == ["45", "Pasta", "Fresh is best"]

    def test_idempotent(self, fixed_now):
        """Test resolving twice changes nothing."""
        once = resolve_defaults(parse_arguments(["90", "-c", "wall"]), now=fixed_now)
        twice = resolve_defaults(once, now=fixed_now)
        assert twice == once

    def test_idempotent_default_notifier(self):
        once = resolve_defaults(parse_arguments([]))
        assert resolve_defaults(once) == once


def test_macos_notifier(macos):
    """Test macOS uses osascript with escaped quotes."""
    config = resolve_defaults(parse_arguments(["5m", 'Say "hi"', "Tea"]))
    assert config.resolved_command.argv == [
        "osascript",
        "-e",
        'display notification "Say \\"hi\\"" with title "Tea"',
    ]
