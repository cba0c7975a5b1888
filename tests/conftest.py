"""
Pytest fixtures for timer-notify tests.

Test imports use the src/timer_notify/ package via --import-mode=importlib (see pyproject.toml).
"""

from datetime import datetime, timezone
from unittest.mock import MagicMock, patch

import pytest

from timer_notify.models import TimerConfig
from timer_notify.timer.defaults import resolve_defaults


# ═══════════════════════════════════════════════════════════════════════════════
# Platform Fixtures
# ═══════════════════════════════════════════════════════════════════════════════


@pytest.fixture
def linux():
    """Pretend to run on Linux."""
    with patch("timer_notify.utils.platform.platform.system", return_value="Linux") as mock:
        yield mock


@pytest.fixture
def macos():
    """Pretend to run on macOS."""
    with patch("timer_notify.utils.platform.platform.system", return_value="Darwin") as mock:
        yield mock


@pytest.fixture
def windows():
    """Pretend to run on Windows."""
    with patch("timer_notify.utils.platform.platform.system", return_value="Windows") as mock:
        yield mock


# ═══════════════════════════════════════════════════════════════════════════════
# Time Fixtures
# ═══════════════════════════════════════════════════════════════════════════════


@pytest.fixture
def fixed_now():
    """Fixed datetime for reproducible tests."""
    return datetime(2024, 12, 19, 14, 30, 0, tzinfo=timezone.utc)


# ═══════════════════════════════════════════════════════════════════════════════
# Config Fixtures
# ═══════════════════════════════════════════════════════════════════════════════


@pytest.fixture
def tea_config(linux):
    """Resolved 5 minute timer with the default notifier."""
    return resolve_defaults(TimerConfig(delay=300, message="Tea"))


@pytest.fixture
def custom_config(linux, fixed_now):
    """Resolved 45 second timer with a custom command."""
    return resolve_defaults(
        TimerConfig(delay=45, message="Fresh is best", title="Pasta", command="cat >> log.txt"),
        now=fixed_now,
    )


# ═══════════════════════════════════════════════════════════════════════════════
# Process Fixtures
# ═══════════════════════════════════════════════════════════════════════════════


@pytest.fixture
def mock_popen():
    """Mock subprocess.Popen in the launcher; the spawned pid is 4242."""
    process = MagicMock()
    process.pid = 4242
    with patch("timer_notify.timer.launcher.subprocess.Popen", return_value=process) as mock:
        yield mock
