"""Executor manifest definition for the plugin system."""

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Generic, TypeVar

from suite_orchestrator.executors.base import SuiteExecutor
from suite_orchestrator.executors.config import RunnerConfig

ConfigT = TypeVar("ConfigT", bound=RunnerConfig)


@dataclass(frozen=True, kw_only=True)
class ExecutorManifest(Generic[ConfigT]):
    """Manifest describing an executor plugin.

    The manifest pairs the runner's configuration class with the factory
    building an executor from a validated configuration and the environment
    the child processes should see.
    """

    config_cls: type[ConfigT]
    executor_factory: Callable[[ConfigT, Mapping[str, str] | None], SuiteExecutor]
