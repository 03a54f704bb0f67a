"""Compiled-in suite catalog and target selection."""

import logging
from collections.abc import Mapping, Sequence

from suite_orchestrator.models.category import EXTERNAL_TIMEOUT_MS, SuiteCategory

log = logging.getLogger(__name__)

TEST_FILE_GLOB = "**/*.test.js"
ALL_CATEGORY = "all"

CATEGORIES: Mapping[str, SuiteCategory] = {
    category.name: category
    for category in (
        SuiteCategory(
            name=ALL_CATEGORY,
            pattern=f"tests/{TEST_FILE_GLOB}",
            description="All tests in the test directory",
        ),
        SuiteCategory(
            name="domain",
            pattern=f"tests/domain/{TEST_FILE_GLOB}",
            description="Domain tests (business logic)",
        ),
        SuiteCategory(
            name="integration",
            pattern=f"tests/integration/{TEST_FILE_GLOB}",
            description="Integration tests (multiple components working together)",
            needs_env=True,
        ),
        SuiteCategory(
            name="external",
            pattern=f"tests/external/{TEST_FILE_GLOB}",
            description="External tests (Supabase, OpenAI)",
            needs_env=True,
            timeout_ms=EXTERNAL_TIMEOUT_MS,
        ),
        SuiteCategory(
            name="e2e",
            pattern=f"tests/e2e/{TEST_FILE_GLOB}",
            description="End-to-end tests",
            needs_env=True,
            timeout_ms=EXTERNAL_TIMEOUT_MS,
        ),
        SuiteCategory(
            name="unit",
            pattern=f"tests/unit/{TEST_FILE_GLOB}",
            description="Unit tests (individual components)",
        ),
        SuiteCategory(
            name="application",
            pattern=f"tests/application/{TEST_FILE_GLOB}",
            description="Application tests (services, controllers)",
        ),
    )
}

# "all" overlaps every other category, so it only runs when asked for.
DEFAULT_SUITES: Sequence[SuiteCategory] = tuple(
    category for name, category in CATEGORIES.items() if name != ALL_CATEGORY
)


def select_suites(targets: Sequence[str]) -> Sequence[SuiteCategory]:
    """Resolve command-line targets into suites, keeping their order.

    Args:
        targets: Category names or literal suite patterns

    Returns:
        One suite per target, or DEFAULT_SUITES when no target is given.
        Targets that are not category names become ad-hoc suites whose
        pattern is the target itself.

    """
    if not targets:
        return DEFAULT_SUITES

    suites: list[SuiteCategory] = []
    for target in targets:
        if (category := CATEGORIES.get(target)) is not None:
            suites.append(category)
        else:
            suites.append(SuiteCategory(name=target, pattern=target))
    return suites


def is_path_like(focus: str) -> bool:
    """Check if a focus value names a file or path rather than a filter."""
    return "/" in focus or focus.endswith(".js")


def apply_focus(category: SuiteCategory, focus: str) -> SuiteCategory:
    """Narrow a suite to tests whose directory matches ``focus``.

    A path-like focus replaces the pattern outright. Anything else is used
    as a directory filter inside the category's test glob.
    """
    if is_path_like(focus):
        pattern = focus
    else:
        pattern = category.pattern.replace(
            TEST_FILE_GLOB, f"**/*{focus}*/{TEST_FILE_GLOB}"
        )
    if pattern == category.pattern:
        log.warning(
            "Focus %r does not narrow suite %s (pattern %s)",
            focus,
            category.name,
            category.pattern,
        )
    return category.model_copy(update={"pattern": pattern})


def focus_suites(
    suites: Sequence[SuiteCategory], focus: str | None
) -> Sequence[SuiteCategory]:
    """Apply a focus to every selected suite.

    A path-like focus collapses the selection to that single path, carrying
    over the first suite's env settings.
    """
    if not focus or not suites:
        return suites
    if is_path_like(focus):
        return [apply_focus(suites[0], focus)]
    return [apply_focus(suite, focus) for suite in suites]


def suite_timeout_ms(suites: Sequence[SuiteCategory]) -> int | None:
    """Return the largest per-test timeout among the selected suites."""
    return max((suite.timeout_ms for suite in suites), default=None)
