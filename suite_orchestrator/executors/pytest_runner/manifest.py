"""Pytest executor manifest."""

from suite_orchestrator.executors.command import CommandExecutor
from suite_orchestrator.executors.manifest import ExecutorManifest
from suite_orchestrator.executors.pytest_runner.config import PytestConfig

pytest_manifest = ExecutorManifest(
    config_cls=PytestConfig,
    executor_factory=CommandExecutor.from_config,
)
