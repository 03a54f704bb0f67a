"""Environment preparation for external runner processes."""

import logging
from collections.abc import Mapping, Sequence
from pathlib import Path

from dotenv import dotenv_values

from suite_orchestrator.models.category import SuiteCategory

log = logging.getLogger(__name__)

SKIP_OPENAI_VAR = "SKIP_OPENAI_TESTS"
SKIP_SUPABASE_VAR = "SKIP_SUPABASE_TESTS"


class EnvironmentFileNotFoundError(FileNotFoundError):
    """Raised when a suite requires an env file that does not exist."""


def prepare_environment(
    root: Path,
    suites: Sequence[SuiteCategory],
    base_env: Mapping[str, str],
    *,
    skip_openai: bool = False,
    skip_supabase: bool = False,
) -> dict[str, str]:
    """Build the environment handed to every runner process.

    Args:
        root: Project root the env files are relative to
        suites: Suites selected for this run
        base_env: Environment of the current process; its values win over
            values read from env files
        skip_openai: Ask the suites to skip OpenAI-dependent tests
        skip_supabase: Ask the suites to skip Supabase-dependent tests

    Returns:
        The merged environment

    Raises:
        EnvironmentFileNotFoundError: If a suite that needs its env file
            cannot find it

    """
    file_values: dict[str, str] = {}
    for env_file, required in _env_files(suites).items():
        env_path = root / env_file
        if not env_path.is_file():
            if required:
                raise EnvironmentFileNotFoundError(
                    f"Environment file not found: {env_path}"
                )
            log.debug("No env file at %s, using process environment", env_path)
            continue

        log.info("Loading environment from %s", env_path)
        for key, value in dotenv_values(env_path).items():
            if value is not None:
                file_values.setdefault(key, value)

    env = {**file_values, **base_env}

    if any(suite.needs_env for suite in suites):
        warn_missing_credentials(env)

    if skip_openai:
        env[SKIP_OPENAI_VAR] = "true"
        log.warning("OpenAI tests will be skipped")
    if skip_supabase:
        env[SKIP_SUPABASE_VAR] = "true"
        log.warning("Supabase tests will be skipped")

    return env


def warn_missing_credentials(env: Mapping[str, str]) -> Sequence[str]:
    """Warn about external service credentials missing from ``env``.

    Returns:
        Names of the services whose credentials are missing

    """
    missing: list[str] = []
    if not env.get("SUPABASE_URL") or not (
        env.get("SUPABASE_KEY") or env.get("SUPABASE_ANON_KEY")
    ):
        log.warning(
            "Supabase credentials missing. Supabase-dependent tests may fail "
            "or be skipped."
        )
        missing.append("supabase")
    if not env.get("OPENAI_API_KEY"):
        log.warning(
            "OpenAI API key missing. OpenAI-dependent tests may fail or be skipped."
        )
        missing.append("openai")
    return missing


def _env_files(suites: Sequence[SuiteCategory]) -> Mapping[str, bool]:
    """Map each distinct env file to whether any suite requires it."""
    files: dict[str, bool] = {}
    for suite in suites:
        files[suite.env_file] = files.get(suite.env_file, False) or suite.needs_env
    return files
