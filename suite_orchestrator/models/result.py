"""Models for suite execution results."""

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class SuiteResult:
    """Outcome of running one suite pattern through the external runner."""

    pattern: str
    passed: bool
    duration: float = 0.0


@dataclass(frozen=True, kw_only=True)
class RunSummary:
    """Pass/fail counts derived from a results ledger."""

    passed: int
    failed: int

    @classmethod
    def from_results(cls, results: Sequence[SuiteResult]) -> "RunSummary":
        """Count every ledger entry exactly once."""
        passed = sum(1 for result in results if result.passed)
        return cls(passed=passed, failed=len(results) - passed)

    @property
    def total(self) -> int:
        """Number of suites that ran."""
        return self.passed + self.failed

    @property
    def exit_code(self) -> int:
        """Process exit code for this run: 0 only when nothing failed."""
        return 0 if self.failed == 0 else 1
