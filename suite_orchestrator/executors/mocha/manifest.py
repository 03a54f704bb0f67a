"""Mocha executor manifest."""

from suite_orchestrator.executors.command import CommandExecutor
from suite_orchestrator.executors.manifest import ExecutorManifest
from suite_orchestrator.executors.mocha.config import MochaConfig

mocha_manifest = ExecutorManifest(
    config_cls=MochaConfig,
    executor_factory=CommandExecutor.from_config,
)
