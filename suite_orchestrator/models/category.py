"""Models for the suite catalog."""

from pydantic import Field

from suite_orchestrator.models.base import Model

DEFAULT_TIMEOUT_MS = 15_000
EXTERNAL_TIMEOUT_MS = 60_000


class SuiteCategory(Model):
    """Named group of tests run as a single suite."""

    name: str = Field(..., description="Category key used on the command line")
    pattern: str = Field(..., min_length=1, description="Suite pattern")
    description: str = Field(default="", description="Human-readable summary")
    env_file: str = Field(
        default=".env.test", description="Env file relative to the project root"
    )
    needs_env: bool = Field(
        default=False, description="Whether the env file must exist"
    )
    timeout_ms: int = Field(
        default=DEFAULT_TIMEOUT_MS,
        gt=0,
        description="Per-test timeout handed to the external runner",
    )
