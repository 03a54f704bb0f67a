"""Fixtures for integration tests."""

import sys
from pathlib import Path

import pytest

# Stand-in for an external test runner: records its arguments and fails any
# suite whose pattern contains "fail".
FAKE_RUNNER = """\
import json
import os
import sys

with open(os.environ["RUNNER_LOG"], "a") as log:
    log.write(json.dumps({"argv": sys.argv[1:], "cwd": os.getcwd(),
                          "mark": os.environ.get("SUITE_MARK")}) + "\\n")
print(f"running {sys.argv[-1]}")
sys.exit(1 if "fail" in sys.argv[-1] else 0)
"""


@pytest.fixture
def runner_log(tmp_path: Path) -> Path:
    """Path the fake runner appends its invocations to."""
    return tmp_path / "runner.log"


@pytest.fixture
def runner_command(tmp_path: Path) -> tuple[str, ...]:
    """Command launching the fake runner with the current interpreter."""
    script = tmp_path / "fake_runner.py"
    script.write_text(FAKE_RUNNER)
    return (sys.executable, str(script))
