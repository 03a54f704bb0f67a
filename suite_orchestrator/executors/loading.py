"""Loading of executors from entry points."""

import difflib
from importlib.metadata import entry_points
from typing import Any

from suite_orchestrator.executors.manifest import ExecutorManifest

ENTRY_POINT_GROUP = "suite_orchestrator.executors"


class ExecutorNotFoundError(Exception):
    """Raised when an executor is not found."""


def load_executor_manifest(key: str) -> ExecutorManifest[Any]:
    """Load an executor manifest by key.

    Args:
        key: The executor key as registered in pyproject.toml
             (e.g., "mocha", "pytest")

    Returns:
        The executor manifest instance

    Raises:
        ExecutorNotFoundError: If no executor with the given key is found

    """
    entries = entry_points(group=ENTRY_POINT_GROUP)

    for entry in entries:
        if entry.name == key:
            manifest: ExecutorManifest[Any] = entry.load()
            return manifest

    available = sorted(e.name for e in entries)
    message = f"Executor '{key}' not found. Available executors: {available}"
    if close := difflib.get_close_matches(key, available, n=1):
        message += f". Did you mean '{close[0]}'?"
    raise ExecutorNotFoundError(message)
