"""Executor spawning the external test runner as a child process."""

import asyncio
import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path

from suite_orchestrator.executors.base import SuiteExecutor
from suite_orchestrator.executors.config import RunnerConfig

log = logging.getLogger(__name__)

STDERR_FD = 2


@dataclass(frozen=True, kw_only=True)
class CommandExecutor(SuiteExecutor):
    """Run each suite as ``command + fixed_args + [pattern]``.

    The child inherits stdin, stdout and stderr so the runner's own output
    reaches the terminal untouched. With ``stdout_to_stderr`` its stdout is
    attached to our stderr instead.
    """

    command: Sequence[str]
    cwd: Path | None = None
    env: Mapping[str, str] | None = field(default=None, repr=False)
    stdout_to_stderr: bool = False

    @classmethod
    def from_config(
        cls, config: RunnerConfig, env: Mapping[str, str] | None = None
    ) -> "CommandExecutor":
        """Create an executor for the configured runner command."""
        return cls(
            command=tuple(config.command),
            cwd=config.cwd,
            env=env,
            stdout_to_stderr=config.stdout_to_stderr,
        )

    async def run(self, pattern: str, fixed_args: Sequence[str]) -> int:
        """Spawn the runner for ``pattern`` and wait for it to exit.

        Raises:
            FileNotFoundError: If the runner executable does not exist

        """
        argv = [*self.command, *fixed_args, pattern]
        log.debug("Spawning: %s", " ".join(argv))

        process = await asyncio.create_subprocess_exec(
            *argv,
            cwd=self.cwd,
            env=dict(self.env) if self.env is not None else None,
            stdout=STDERR_FD if self.stdout_to_stderr else None,
        )
        try:
            returncode = await process.wait()
        except asyncio.CancelledError:
            log.warning("Suite %s cancelled, killing pid %d", pattern, process.pid)
            if process.returncode is None:
                process.kill()
                await process.wait()
            raise

        log.debug("Runner for %s exited with code %d", pattern, returncode)
        return returncode
