"""Command line entry point: run, verify, watch and give hints for exercises."""

from __future__ import annotations

import argparse
import itertools
import os
import queue
import subprocess
import sys
import threading
from collections.abc import Sequence
from importlib import metadata
from pathlib import Path

from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer

from drillrunner.exercise import Exercise, load_exercises
from drillrunner.run import RunFailed, run
from drillrunner.verify import VerificationFailed, verify

_PROG = "drillrunner"
_INFO_FILE = "info.toml"
_DEFAULT_OUT_FILE = "default_out.txt"
_WATCHED_DIR = "./exercises"
_DEBOUNCE_SECONDS = 2.0

_BANNER = (
    "",
    "       welcome to...",
    "     _      _ _ _                                 ",
    "  __| |_ __(_) | |_ __ _   _ _ __  _ __   ___ _ __",
    " / _` | '__| | | | '__| | | | '_ \\| '_ \\ / _ \\ '__|",
    "| (_| | |  | | | | |  | |_| | | | | | | |  __/ |",
    " \\__,_|_|  |_|_|_|_|   \\__,_|_| |_|_| |_|\\___|_|",
    "",
)


class _Parser(argparse.ArgumentParser):
    """Argument parser that exits with status 1 on usage errors."""

    def error(self, message: str):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def _version() -> str:
    try:
        return metadata.version(_PROG)
    except metadata.PackageNotFoundError:
        return "unknown"


def _build_parser() -> argparse.ArgumentParser:
    parser = _Parser(
        prog=_PROG,
        description=(
            "A collection of small exercises to get you used to "
            "writing and reading Rust code"
        ),
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {_version()}")
    parser.add_argument(
        "--nocapture",
        action="store_true",
        help="Show outputs from the test exercises",
    )
    parser.set_defaults(command=None)
    subcommands = parser.add_subparsers(dest="subcommand")

    verify_parser = subcommands.add_parser(
        "verify", aliases=["v"], help="Verifies all exercises according to the recommended order"
    )
    verify_parser.set_defaults(command="verify")

    watch_parser = subcommands.add_parser(
        "watch", aliases=["w"], help="Reruns `verify` when files were edited"
    )
    watch_parser.set_defaults(command="watch")

    run_parser = subcommands.add_parser(
        "run", aliases=["r"], help="Runs/Tests a single exercise"
    )
    run_parser.add_argument("name")
    run_parser.set_defaults(command="run")

    hint_parser = subcommands.add_parser(
        "hint", aliases=["h"], help="Returns a hint for the current exercise"
    )
    hint_parser.add_argument("name")
    hint_parser.set_defaults(command="hint")
    return parser


def _celebration_symbol() -> str:
    encoding = getattr(sys.stdout, "encoding", None) or "ascii"
    try:
        "🎉".encode(encoding)
    except (UnicodeEncodeError, LookupError):
        return "★"
    return "🎉"


def _find_exercise(exercises: Sequence[Exercise], name: str) -> Exercise | None:
    return next((exercise for exercise in exercises if exercise.name == name), None)


def main(argv: Sequence[str] | None = None) -> int:
    """Parse the command line, carry out the subcommand and return the exit status."""
    args = _build_parser().parse_args(argv)

    if args.command is None:
        print("\n".join(_BANNER))

    if not Path(_INFO_FILE).exists():
        print(f"{_PROG} must be run from the exercises directory")
        print(f"Try changing into the directory that holds {_INFO_FILE}!")
        return 1

    if not rustc_exists():
        print("We cannot find `rustc`.")
        print("Try running `rustc --version` to diagnose your problem.")
        print("For instructions on how to install Rust, check the README.")
        return 1

    exercises = load_exercises(_INFO_FILE)
    verbose = args.nocapture

    match args.command:
        case "run":
            exercise = _find_exercise(exercises, args.name)
            if exercise is None:
                print("No exercise found for your given name!")
                return 1
            try:
                run(exercise, verbose)
            except RunFailed:
                return 1
        case "hint":
            exercise = _find_exercise(exercises, args.name)
            if exercise is None:
                print("No exercise found for your given name!")
                return 1
            print(exercise.hint)
        case "verify":
            try:
                verify(exercises, verbose)
            except VerificationFailed:
                return 1
        case "watch":
            watch(exercises, verbose)
            symbol = _celebration_symbol()
            print(f"{symbol} All exercises completed! {symbol}")
            print()
            print("We hope you enjoyed learning about the various aspects of Rust!")
            print("If you noticed any issues, please don't hesitate to report them.")
            print("You can also contribute your own exercises to help the greater community!")
            print()
            print("Before reporting an issue or contributing, please read CONTRIBUTING.md.")
        case None:
            print(Path(_DEFAULT_OUT_FILE).read_text(encoding="utf-8"))
    return 0


class _Hint:
    """The hint of the exercise that failed last, shared with the shell thread."""

    def __init__(self, text: str | None = None) -> None:
        self._lock = threading.Lock()
        self._text = text

    def get(self) -> str | None:
        with self._lock:
            return self._text

    def set(self, text: str) -> None:
        with self._lock:
            self._text = text


class _ChangeHandler(FileSystemEventHandler):
    def __init__(self, events: queue.Queue[str]) -> None:
        super().__init__()
        self._events = events

    def on_created(self, event: FileSystemEvent) -> None:
        self._push(event)

    def on_modified(self, event: FileSystemEvent) -> None:
        self._push(event)

    def _push(self, event: FileSystemEvent) -> None:
        if not event.is_directory:
            self._events.put(os.fsdecode(event.src_path))


def _clear_screen() -> None:
    print("\x1bc")


def _spawn_watch_shell(hint: _Hint) -> None:
    print("Type 'hint' to get help or 'clear' to clear the screen")

    def shell() -> None:
        try:
            for raw in sys.stdin:
                command = raw.strip()
                if command == "hint":
                    text = hint.get()
                    if text is not None:
                        print(text)
                elif command == "clear":
                    print("\x1b[2J\x1b[1;1H")
                else:
                    print(f"unknown command: {command}")
        except (OSError, ValueError) as error:
            print(f"error reading command: {error}")

    threading.Thread(target=shell, daemon=True).start()


def _next_batch(events: queue.Queue[str], delay: float) -> list[str]:
    """Wait for a change, then collect further changes until things are quiet."""
    batch = {events.get(): None}
    while True:
        try:
            batch[events.get(timeout=delay)] = None
        except queue.Empty:
            return list(batch)


def _ends_with(path: Path, tail: Path) -> bool:
    parts = tail.parts
    return bool(parts) and len(parts) <= len(path.parts) and path.parts[-len(parts):] == parts


def watch(exercises: Sequence[Exercise], verbose: bool = False) -> None:
    """Verify the exercises, then re-verify from each edited one until all pass."""
    events: queue.Queue[str] = queue.Queue()
    observer = Observer()
    observer.schedule(_ChangeHandler(events), _WATCHED_DIR, recursive=True)
    observer.start()
    try:
        _clear_screen()
        try:
            verify(exercises, verbose)
            return
        except VerificationFailed as failure:
            hint = _Hint(failure.exercise.hint)
        _spawn_watch_shell(hint)
        while True:
            for changed in _next_batch(events, _DEBOUNCE_SECONDS):
                path = Path(changed)
                if path.suffix != ".rs" or not path.exists():
                    continue
                filepath = path.resolve()
                pending = itertools.dropwhile(
                    lambda exercise: not _ends_with(filepath, exercise.path), exercises
                )
                _clear_screen()
                try:
                    verify(pending, verbose)
                    return
                except VerificationFailed as failure:
                    hint.set(failure.exercise.hint)
    finally:
        observer.stop()
        observer.join()


def rustc_exists() -> bool:
    """Whether a working rustc can be started."""
    try:
        completed = subprocess.run(
            ["rustc", "--version"], stdout=subprocess.DEVNULL, check=False
        )
    except OSError:
        return False
    return completed.returncode == 0


if __name__ == "__main__":
    raise SystemExit(main())