"""Shared configuration for command-line test runners."""

from collections.abc import Sequence
from pathlib import Path

from pydantic import BaseModel, Field


class RunnerConfig(BaseModel):
    """Configuration common to every external test runner."""

    command: Sequence[str] = Field(..., min_length=1)
    cwd: Path | None = None
    extra_args: Sequence[str] = ()
    # Send the runner's stdout to our stderr
    stdout_to_stderr: bool = False

    def fixed_args(
        self,
        timeout_ms: int | None = None,
        *,
        override_timeout_ms: int | None = None,
    ) -> Sequence[str]:
        """Build the flags passed ahead of the suite pattern.

        Args:
            timeout_ms: Per-test timeout derived from the selected suites
            override_timeout_ms: Timeout requested on the command line, which
                takes precedence over any configured or derived timeout

        """
        return list(self.extra_args)
