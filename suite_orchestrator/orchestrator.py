"""Suite orchestrator driving every configured suite to completion."""

import asyncio
import logging
import time
from collections.abc import Sequence
from dataclasses import dataclass

from suite_orchestrator.console import FAILURE_SYMBOL, SUCCESS_SYMBOL, Console
from suite_orchestrator.models.result import RunSummary, SuiteResult
from suite_orchestrator.runner import SuiteRunner

log = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class SuiteOrchestrator:
    """Runs suite patterns in declared order and aggregates their outcomes.

    A failing suite is recorded and the remaining suites still run, unless
    ``stop_on_failure`` is set. With ``concurrency`` above one, up to that
    many suites run at once; results are still reported in declared order.
    """

    runner: SuiteRunner
    console: Console
    stop_on_failure: bool = False
    concurrency: int = 1

    def __post_init__(self) -> None:
        if self.concurrency < 1:
            raise ValueError(f"concurrency must be at least 1, got {self.concurrency}")

    async def run(self, patterns: Sequence[str]) -> int:
        """Run all suites, print the report and return the exit code."""
        results = await self.run_suites(patterns)
        return self.report(results).exit_code

    async def run_suites(self, patterns: Sequence[str]) -> Sequence[SuiteResult]:
        """Run every pattern once and return the results ledger.

        Args:
            patterns: Suite patterns in the order they were declared

        Returns:
            One result per suite that ran, in declared order

        """
        if not patterns:
            log.info("No suites to run")
            return []

        log.info("Running %d suite(s)...", len(patterns))
        if self.concurrency == 1:
            results = await self._run_sequential(patterns)
        else:
            results = await self._run_concurrent(patterns)
        log.info("Suite execution completed")
        return results

    def report(self, results: Sequence[SuiteResult]) -> RunSummary:
        """Print the ledger followed by the pass/fail summary line."""
        summary = RunSummary.from_results(results)

        self.console.emit("=" * 60, tone="muted")
        self.console.emit("Suite Results:", tone="heading")
        for result in results:
            if result.passed:
                self.console.emit(f"{SUCCESS_SYMBOL} {result.pattern}", tone="success")
            else:
                self.console.emit(f"{FAILURE_SYMBOL} {result.pattern}", tone="failure")
        self.console.emit(
            f"{summary.passed} passed, {summary.failed} failed",
            tone="success" if summary.failed == 0 else "failure",
        )
        return summary

    async def _run_sequential(self, patterns: Sequence[str]) -> Sequence[SuiteResult]:
        ledger: list[SuiteResult] = []
        for pattern in patterns:
            result = await self._run_suite(pattern)
            ledger.append(result)
            if not result.passed and self.stop_on_failure:
                log.warning("Stopping after failed suite %s", pattern)
                break
        return ledger

    async def _run_concurrent(self, patterns: Sequence[str]) -> Sequence[SuiteResult]:
        semaphore = asyncio.Semaphore(self.concurrency)
        halted = asyncio.Event()

        async def run_bounded(pattern: str) -> SuiteResult | None:
            async with semaphore:
                if halted.is_set():
                    log.info("Skipping suite %s after earlier failure", pattern)
                    return None
                result = await self._run_suite(pattern)
                if not result.passed and self.stop_on_failure:
                    halted.set()
                return result

        tasks = [asyncio.create_task(run_bounded(pattern)) for pattern in patterns]
        try:
            outcomes = await asyncio.gather(*tasks)
        except BaseException:
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            raise

        return [result for result in outcomes if result is not None]

    async def _run_suite(self, pattern: str) -> SuiteResult:
        started = time.monotonic()
        passed = await self.runner.run(pattern)
        return SuiteResult(
            pattern=pattern,
            passed=passed,
            duration=time.monotonic() - started,
        )
