"""Tests for the suite catalog."""

import pytest

from suite_orchestrator.categories import (
    CATEGORIES,
    DEFAULT_SUITES,
    apply_focus,
    focus_suites,
    select_suites,
    suite_timeout_ms,
)
from suite_orchestrator.testing.factories import SuiteCategoryFactory


def test_default_suites_exclude_all_in_declared_order() -> None:
    """Runs every category but the catch-all one, in catalog order."""
    assert [suite.name for suite in DEFAULT_SUITES] == [
        "domain",
        "integration",
        "external",
        "e2e",
        "unit",
        "application",
    ]


def test_external_suites_need_env_and_longer_timeout() -> None:
    """Marks suites talking to external services."""
    assert CATEGORIES["external"].needs_env
    assert CATEGORIES["external"].timeout_ms == 60_000
    assert CATEGORIES["e2e"].timeout_ms == 60_000
    assert not CATEGORIES["unit"].needs_env
    assert CATEGORIES["unit"].timeout_ms == 15_000


class TestSelectSuites:
    """Tests for select_suites."""

    def test_defaults_when_no_targets(self) -> None:
        """Returns the default suites when nothing is selected."""
        assert select_suites([]) == DEFAULT_SUITES

    def test_keeps_target_order(self) -> None:
        """Resolves category names in the order given."""
        suites = select_suites(["unit", "domain"])

        assert [s.pattern for s in suites] == [
            "tests/unit/**/*.test.js",
            "tests/domain/**/*.test.js",
        ]

    def test_unknown_target_is_literal_pattern(self) -> None:
        """Treats anything that is not a category as a suite pattern."""
        suites = select_suites(["tests/unit/user.test.js"])

        assert len(suites) == 1
        assert suites[0].pattern == "tests/unit/user.test.js"
        assert not suites[0].needs_env


class TestFocus:
    """Tests for focus handling."""

    def test_filter_focus_narrows_directory(self) -> None:
        """Inserts a directory filter into the test glob."""
        focused = apply_focus(CATEGORIES["domain"], "challenge")

        assert focused.pattern == "tests/domain/**/*challenge*/**/*.test.js"
        assert focused.name == "domain"

    @pytest.mark.parametrize(
        "focus", ["tests/domain/user.test.js", "tests/domain/user", "user.test.js"]
    )
    def test_path_focus_replaces_pattern(self, focus: str) -> None:
        """Uses path-like focus values verbatim."""
        assert apply_focus(CATEGORIES["domain"], focus).pattern == focus

    def test_path_focus_collapses_selection(self) -> None:
        """Runs a focused path once instead of once per suite."""
        suites = focus_suites(DEFAULT_SUITES, "tests/unit/a.test.js")

        assert [s.pattern for s in suites] == ["tests/unit/a.test.js"]

    def test_filter_focus_applies_to_every_suite(self) -> None:
        """Filters every selected suite."""
        suites = focus_suites(select_suites(["unit", "domain"]), "user")

        assert [s.pattern for s in suites] == [
            "tests/unit/**/*user*/**/*.test.js",
            "tests/domain/**/*user*/**/*.test.js",
        ]

    def test_filter_focus_on_literal_target_warns(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Warns when a filter focus cannot narrow a literal pattern."""
        [suite] = focus_suites(select_suites(["spec/foo"]), "user")

        assert suite.pattern == "spec/foo"
        assert "does not narrow suite spec/foo" in caplog.text

    def test_filter_focus_on_category_does_not_warn(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Stays quiet when the focus rewrites the pattern."""
        apply_focus(CATEGORIES["unit"], "user")

        assert "does not narrow" not in caplog.text

    def test_no_focus_is_noop(self) -> None:
        """Leaves the selection alone without a focus."""
        assert focus_suites(DEFAULT_SUITES, None) == DEFAULT_SUITES


def test_suite_timeout_is_largest_of_selection() -> None:
    """Picks the longest per-test timeout among the suites."""
    suites = [
        SuiteCategoryFactory.build(timeout_ms=1_000),
        SuiteCategoryFactory.build(timeout_ms=5_000),
    ]

    assert suite_timeout_ms(suites) == 5_000
    assert suite_timeout_ms(select_suites(["unit", "e2e"])) == 60_000
    assert suite_timeout_ms([]) is None
