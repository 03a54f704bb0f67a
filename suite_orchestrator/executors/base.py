"""Abstract base class for suite executors."""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class SuiteExecutor(ABC):
    """Abstract base for launching the external test runner.

    An executor turns one suite pattern into one external runner invocation
    and hands back its exit code. It never interprets the runner's output.
    """

    @abstractmethod
    async def run(self, pattern: str, fixed_args: Sequence[str]) -> int:
        """Run the external test runner for a single suite.

        Args:
            pattern: Suite pattern, passed as the last positional argument
            fixed_args: Flags passed identically to every invocation

        Returns:
            Exit code of the external runner

        """
