"""CLI entry point for the suite orchestrator."""

import argparse
import asyncio
import json
import logging
import os
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from suite_orchestrator.categories import (
    CATEGORIES,
    DEFAULT_SUITES,
    focus_suites,
    select_suites,
    suite_timeout_ms,
)
from suite_orchestrator.console import FAILURE_SYMBOL, Console, StreamConsole
from suite_orchestrator.environment import prepare_environment
from suite_orchestrator.executors.loading import load_executor_manifest
from suite_orchestrator.models.result import RunSummary, SuiteResult
from suite_orchestrator.orchestrator import SuiteOrchestrator
from suite_orchestrator.runner import SuiteRunner

log = logging.getLogger("suite_orchestrator")


def list_categories(console: Console) -> None:
    """Print the suite catalog, marking the suites run by default."""
    console.emit("Categories:", tone="heading")
    for name, category in CATEGORIES.items():
        marker = "*" if category in DEFAULT_SUITES else " "
        console.emit(f" {marker} {name:<12} {category.description}")
    console.emit("(* runs when no target is given)", tone="muted")


def format_output(results: Sequence[SuiteResult]) -> dict[str, Any]:
    """Format the results ledger for JSON output."""
    summary = RunSummary.from_results(results)
    return {
        "total": summary.total,
        "passed": summary.passed,
        "failed": summary.failed,
        "results": [
            {
                "pattern": result.pattern,
                "passed": result.passed,
                "duration": result.duration,
            }
            for result in results
        ],
    }


async def run(
    targets: Sequence[str],
    runner_key: str,
    runner_config_json: str,
    root: Path,
    console: Console,
    *,
    focus: str | None = None,
    timeout_ms: int | None = None,
    skip_openai: bool = False,
    skip_supabase: bool = False,
    stop_on_failure: bool = False,
    concurrency: int = 1,
    json_output: bool = False,
) -> int:
    """Run the selected suites and return exit code."""
    suites = focus_suites(select_suites(targets), focus)
    patterns = [suite.pattern for suite in suites]
    log.info("Selected suites: %s", ", ".join(suite.name for suite in suites))

    log.info("Loading executor: %s", runner_key)
    manifest = load_executor_manifest(runner_key)

    config_dict = json.loads(runner_config_json)
    config_dict.setdefault("cwd", str(root))
    if json_output:
        config_dict.setdefault("stdout_to_stderr", True)
    config = manifest.config_cls(**config_dict)

    env = prepare_environment(
        root,
        suites,
        os.environ,
        skip_openai=skip_openai,
        skip_supabase=skip_supabase,
    )

    fixed_args = config.fixed_args(
        suite_timeout_ms(suites), override_timeout_ms=timeout_ms
    )
    log.info("Runner command: %s", " ".join([*config.command, *fixed_args]))

    orchestrator = SuiteOrchestrator(
        runner=SuiteRunner(
            executor=manifest.executor_factory(config, env),
            fixed_args=fixed_args,
            console=console,
        ),
        console=console,
        stop_on_failure=stop_on_failure,
        concurrency=concurrency,
    )
    results = await orchestrator.run_suites(patterns)
    summary = orchestrator.report(results)

    if json_output:
        print(json.dumps(format_output(results), indent=2))

    return summary.exit_code


def positive_int(value: str) -> int:
    """Argparse type for integers of at least one."""
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line parser."""
    parser = argparse.ArgumentParser(
        description="Run test suites through an external test runner, one "
        "process per suite"
    )
    parser.add_argument(
        "targets",
        nargs="*",
        metavar="TARGET",
        help="Category name or suite pattern (default: every category but 'all')",
    )
    parser.add_argument(
        "--runner",
        default="mocha",
        help="Executor key (mocha, pytest)",
    )
    parser.add_argument(
        "--runner-config",
        default="{}",
        help="JSON configuration for the executor",
    )
    parser.add_argument(
        "--root",
        type=Path,
        default=Path.cwd(),
        help="Project root: runner working directory and base of env files",
    )
    parser.add_argument(
        "--focus",
        help="Only run tests under directories matching this, or this exact path",
    )
    parser.add_argument(
        "--timeout",
        type=positive_int,
        help="Per-test timeout in milliseconds passed to the runner",
    )
    parser.add_argument(
        "--skip-openai",
        action="store_true",
        help="Skip OpenAI-dependent tests",
    )
    parser.add_argument(
        "--skip-supabase",
        action="store_true",
        help="Skip Supabase-dependent tests",
    )
    parser.add_argument(
        "--stop-on-failure",
        action="store_true",
        help="Do not start further suites once one has failed",
    )
    parser.add_argument(
        "--concurrency",
        type=positive_int,
        default=1,
        help="Maximum number of suites running at once (default: 1)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print a JSON summary to stdout, moving all other output to stderr",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="List the available categories and exit",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def main() -> None:
    """CLI entry point."""
    args = build_parser().parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )
    # With --json, stdout carries only the JSON document
    console = StreamConsole.for_stream(sys.stderr if args.json else sys.stdout)

    if args.list:
        list_categories(console)
        sys.exit(0)

    try:
        exit_code = asyncio.run(
            run(
                targets=args.targets,
                runner_key=args.runner,
                runner_config_json=args.runner_config,
                root=args.root,
                console=console,
                focus=args.focus,
                timeout_ms=args.timeout,
                skip_openai=args.skip_openai,
                skip_supabase=args.skip_supabase,
                stop_on_failure=args.stop_on_failure,
                concurrency=args.concurrency,
                json_output=args.json,
            )
        )
    except Exception as exc:
        log.exception("Orchestration failed")
        console.emit(f"{FAILURE_SYMBOL} Orchestration failed: {exc}", tone="error")
        exit_code = 1
    sys.exit(exit_code)


if __name__ == "__main__":  # pragma: no cover
    main()
