"""Configuration for the mocha test runner."""

from collections.abc import Sequence

from pydantic import Field

from suite_orchestrator.executors.config import RunnerConfig
from suite_orchestrator.models.category import DEFAULT_TIMEOUT_MS


class MochaConfig(RunnerConfig):
    """Configuration for running suites with mocha through npx."""

    command: Sequence[str] = Field(default=("npx", "mocha"), min_length=1)
    setup: str | None = "tests/config/envLoader.js"
    recursive: bool = True
    colors: bool = True
    # Wins over the categories' timeout, loses to the command-line one
    timeout_ms: int | None = Field(default=None, gt=0)

    def fixed_args(
        self,
        timeout_ms: int | None = None,
        *,
        override_timeout_ms: int | None = None,
    ) -> Sequence[str]:
        """Build mocha flags; the suite pattern is appended after these."""
        args: list[str] = []
        if self.setup:
            args.extend(["--require", self.setup])
        if self.recursive:
            args.append("--recursive")
        effective_timeout = (
            override_timeout_ms or self.timeout_ms or timeout_ms or DEFAULT_TIMEOUT_MS
        )
        args.extend(["--timeout", str(effective_timeout)])
        if self.colors:
            args.append("--colors")
        args.extend(self.extra_args)
        return args
