"""Suite runner executing one suite pattern at a time."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from suite_orchestrator.console import (
    FAILURE_SYMBOL,
    RUNNING_SYMBOL,
    SUCCESS_SYMBOL,
    Console,
)
from suite_orchestrator.executors.base import SuiteExecutor

log = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class SuiteRunner:
    """Runs a single suite through an executor and reports pass or fail.

    A nonzero exit code is an ordinary outcome and never raises. Anything
    the executor raises (a missing runner binary, for instance) propagates.
    """

    executor: SuiteExecutor
    fixed_args: Sequence[str] = ()
    console: Console

    async def run(self, pattern: str) -> bool:
        """Run ``pattern`` and return True iff the runner exited with 0."""
        if not pattern:
            raise ValueError("Suite pattern must not be empty")

        self.console.emit(f"{RUNNING_SYMBOL} Running {pattern}", tone="heading")
        exit_code = await self.executor.run(pattern, self.fixed_args)
        passed = exit_code == 0

        if passed:
            self.console.emit(f"{SUCCESS_SYMBOL} {pattern} passed", tone="success")
        else:
            self.console.emit(
                f"{FAILURE_SYMBOL} {pattern} failed (exit code {exit_code})",
                tone="failure",
            )
        log.debug("Suite %s finished: exit_code=%d", pattern, exit_code)
        return passed
