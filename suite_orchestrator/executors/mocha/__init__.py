"""Mocha executor module."""

from suite_orchestrator.executors.mocha.config import MochaConfig
from suite_orchestrator.executors.mocha.manifest import mocha_manifest

__all__ = ["MochaConfig", "mocha_manifest"]
