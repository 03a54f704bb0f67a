"""Configuration for the pytest test runner."""

from collections.abc import Sequence

from pydantic import Field

from suite_orchestrator.executors.config import RunnerConfig


class PytestConfig(RunnerConfig):
    """Configuration for running suites with pytest."""

    command: Sequence[str] = Field(default=("python", "-m", "pytest"), min_length=1)
    # Plugin module loaded before collection, e.g. "tests.env_loader"
    setup: str | None = None
    quiet: bool = True

    def fixed_args(
        self,
        timeout_ms: int | None = None,
        *,
        override_timeout_ms: int | None = None,
    ) -> Sequence[str]:
        """Build pytest flags.

        Timeouts are not forwarded: pytest has no built-in per-test timeout
        flag.
        """
        args: list[str] = []
        if self.setup:
            args.extend(["-p", self.setup])
        args.append("-q" if self.quiet else "-v")
        args.extend(self.extra_args)
        return args
