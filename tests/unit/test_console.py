"""Tests for console output."""

import io

from colorama import Fore, Style

from suite_orchestrator.console import StreamConsole


def test_plain_output_without_color() -> None:
    """Writes the bare message when color is off."""
    stream = io.StringIO()
    console = StreamConsole(stream=stream, color=False)

    console.emit("✓ tests/unit passed", tone="success")

    assert stream.getvalue() == "✓ tests/unit passed\n"


def test_colorizes_by_tone() -> None:
    """Wraps the message in the tone's color codes."""
    stream = io.StringIO()
    console = StreamConsole(stream=stream, color=True)

    console.emit("✗ tests/unit failed", tone="failure")

    assert stream.getvalue() == f"{Fore.RED}✗ tests/unit failed{Style.RESET_ALL}\n"


def test_for_stream_disables_color_off_terminal() -> None:
    """Only colorizes when attached to a terminal."""
    console = StreamConsole.for_stream(io.StringIO())

    assert console.color is False
