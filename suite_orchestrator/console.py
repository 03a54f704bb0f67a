"""Console sink for user-facing run output."""

import sys
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Literal, Protocol, TextIO

from colorama import Fore, Style

Tone = Literal["info", "success", "failure", "error", "muted", "heading"]

TONE_STYLES: Mapping[Tone, str] = {
    "info": Fore.CYAN,
    "success": Fore.GREEN,
    "failure": Fore.RED,
    "error": Fore.RED + Style.BRIGHT,
    "muted": Style.DIM,
    "heading": Fore.BLUE + Style.BRIGHT,
}

SUCCESS_SYMBOL = "✓"
FAILURE_SYMBOL = "✗"
RUNNING_SYMBOL = "▶"


class Console(Protocol):
    """Destination for status lines, ledger entries and summaries."""

    def emit(self, message: str, *, tone: Tone = "info") -> None:
        """Write one line of output."""


@dataclass(kw_only=True)
class StreamConsole:
    """Console writing colorized lines to a text stream."""

    stream: TextIO = field(default_factory=lambda: sys.stdout)
    color: bool = True

    @classmethod
    def for_stream(cls, stream: TextIO) -> "StreamConsole":
        """Create a console that only colorizes when writing to a terminal."""
        return cls(stream=stream, color=stream.isatty())

    def emit(self, message: str, *, tone: Tone = "info") -> None:
        """Write ``message`` styled for ``tone`` and flush immediately.

        Flushing keeps our lines ordered relative to the child processes,
        which write straight to the inherited file descriptors.
        """
        if self.color:
            message = f"{TONE_STYLES[tone]}{message}{Style.RESET_ALL}"
        print(message, file=self.stream, flush=True)
