"""Value objects shared by the parser, resolver and launcher."""

from __future__ import annotations

import shlex
from dataclasses import dataclass, field


@dataclass
class ResolvedCommand:
    """The invocation to run once the delay has elapsed."""

    argv: list[str] = field(default_factory=list)
    stdin: str | None = None

    def display(self) -> str:
        """Render the equivalent shell command line."""
        line = shlex.join(self.argv)
        if self.stdin is None:
            return line
        return f"printf '%s\\n' {shlex.quote(self.stdin)} | {line}"


@dataclass
class TimerConfig:
    """Configuration for a single timer, built once per invocation."""

    delay: int = 0
    title: str | None = None
    message: str | None = None
    command: str | None = None
    dry_run: bool = False
    time_description: str = ""
    resolved_command: ResolvedCommand | None = None


__all__ = ["ResolvedCommand", "TimerConfig"]
