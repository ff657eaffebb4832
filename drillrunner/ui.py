"""Console helpers for status messages and progress spinners."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from rich.console import Console
from rich.text import Text

_console = Console(highlight=False, soft_wrap=True, markup=False, emoji=False)


def _symbol(emoji: str, fallback: str) -> str:
    """Return the emoji if the output stream can encode it, else the fallback."""
    try:
        emoji.encode(_console.encoding)
    except (UnicodeEncodeError, LookupError):
        return fallback
    return emoji


def _report(emoji: str, fallback: str, message: str, style: str) -> None:
    _console.print(
        Text.assemble((_symbol(emoji, fallback), style), " ", (message, style))
    )


def warn(message: str) -> None:
    """Print a message in red, preceded by a warning sign."""
    _report("⚠️ ", "!", message, "red")


def success(message: str) -> None:
    """Print a message in green, preceded by a check mark."""
    _report("✅", "✓", message, "green")


class _Spinner:
    """A running spinner whose message can be changed and which can be stopped early."""

    def __init__(self, message: str) -> None:
        self.message = message
        self._status = _console.status(message)
        self._running = False

    def start(self) -> None:
        self._status.start()
        self._running = True

    def update(self, message: str) -> None:
        self.message = message
        self._status.update(message)

    def stop(self) -> None:
        if self._running:
            self._status.stop()
            self._running = False


@contextmanager
def spinner(message: str) -> Iterator[_Spinner]:
    """Show a spinner with a message for the duration of the block."""
    progress = _Spinner(message)
    progress.start()
    try:
        yield progress
    finally:
        progress.stop()