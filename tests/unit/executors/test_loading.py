"""Tests for executor loading module."""

import pytest

from suite_orchestrator.executors.loading import (
    ExecutorNotFoundError,
    load_executor_manifest,
)
from suite_orchestrator.executors.mocha import mocha_manifest
from suite_orchestrator.executors.pytest_runner import pytest_manifest


@pytest.mark.parametrize(
    ("key", "expected"),
    [("mocha", mocha_manifest), ("pytest", pytest_manifest)],
)
def test_load_executor_manifest_returns_manifest(key: str, expected: object) -> None:
    """Loads executor manifest by key."""
    assert load_executor_manifest(key) is expected


def test_load_executor_manifest_raises_for_unknown_executor() -> None:
    """Raises ExecutorNotFoundError for unknown executor key."""
    with pytest.raises(ExecutorNotFoundError) as exc_info:
        load_executor_manifest("unknown-runner")

    assert "unknown-runner" in str(exc_info.value)
    assert "Available executors" in str(exc_info.value)
    assert "mocha" in str(exc_info.value)
    assert "Did you mean" not in str(exc_info.value)


def test_load_executor_manifest_suggests_close_match() -> None:
    """Suggests the registered executor closest to a misspelled key."""
    with pytest.raises(ExecutorNotFoundError, match="Did you mean 'mocha'\\?"):
        load_executor_manifest("mocah")
