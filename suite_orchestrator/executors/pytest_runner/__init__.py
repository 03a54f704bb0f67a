"""Pytest executor module."""

from suite_orchestrator.executors.pytest_runner.config import PytestConfig
from suite_orchestrator.executors.pytest_runner.manifest import pytest_manifest

__all__ = ["PytestConfig", "pytest_manifest"]
