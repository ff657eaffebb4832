"""Exercise descriptions, compilation, execution and completion state."""

from __future__ import annotations

import contextlib
import os
import re
import subprocess
import tomllib
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

RUSTC_COLOR_ARGS = ("--color", "always")
I_AM_DONE_REGEX = re.compile(r"^\s*///?\s*I\s+AM\s+NOT\s+DONE", re.MULTILINE)
CONTEXT = 2
CLIPPY_CARGO_TOML_PATH = "./exercises/clippy/Cargo.toml"


def temp_file() -> str:
    """Name of the binary built for the current exercise, unique to this process."""
    return f"./temp_{os.getpid()}"


def clean() -> None:
    """Remove the temporary binary, ignoring any error."""
    with contextlib.suppress(OSError):
        os.remove(temp_file())


class Mode(Enum):
    """How an exercise is checked."""

    COMPILE = "compile"
    TEST = "test"
    CLIPPY = "clippy"


@dataclass(frozen=True)
class ContextLine:
    """A source line shown around the pending-completion marker."""

    line: str
    number: int
    important: bool


@dataclass(frozen=True)
class State:
    """Completion state: done when there is no pending context."""

    context: tuple[ContextLine, ...] = ()

    def done(self) -> bool:
        return not self.context


@dataclass(frozen=True)
class ExerciseOutput:
    """Captured output of a compiler or of a built binary."""

    stdout: str
    stderr: str
    succeeded: bool = True


class CompilationError(Exception):
    """Raised when an exercise fails to compile."""

    def __init__(self, exercise: Exercise, output: ExerciseOutput) -> None:
        super().__init__(f"compilation of {exercise} failed")
        self.exercise = exercise
        self.output = output


def _output(completed: subprocess.CompletedProcess) -> ExerciseOutput:
    return ExerciseOutput(
        stdout=completed.stdout.decode("utf-8", errors="replace"),
        stderr=completed.stderr.decode("utf-8", errors="replace"),
        succeeded=completed.returncode == 0,
    )


def _lines(source: str) -> list[str]:
    lines = source.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


class CompiledExercise:
    """A built exercise; closing it removes the temporary binary."""

    def __init__(self, exercise: Exercise) -> None:
        self.exercise = exercise
        self._closed = False

    def run(self) -> ExerciseOutput:
        """Run the built binary and capture its output."""
        arg = "--show-output" if self.exercise.mode is Mode.TEST else ""
        completed = subprocess.run([temp_file(), arg], capture_output=True, check=False)
        return _output(completed)

    def close(self) -> None:
        if not self._closed:
            self._closed = True
            clean()

    def __enter__(self) -> CompiledExercise:
        return self

    def __exit__(self, *args) -> None:
        self.close()


@dataclass
class Exercise:
    """One exercise as listed in info.toml."""

    name: str
    path: Path
    mode: Mode
    hint: str

    def __post_init__(self) -> None:
        self.path = Path(self.path)
        self.mode = Mode(self.mode)

    def _clippy_command(self) -> list[str]:
        cargo_toml = (
            "[package]\n"
            f'name = "{self.name}"\n'
            'version = "0.0.1"\n'
            'edition = "2018"\n'
            "[[bin]]\n"
            f'name = "{self.name}"\n'
            f'path = "{self.name}.rs"'
        )
        Path(CLIPPY_CARGO_TOML_PATH).write_text(cargo_toml, encoding="utf-8")
        # Build a binary too, so clippy exercises can be run afterwards.
        subprocess.run(
            ["rustc", str(self.path), "-o", temp_file(), *RUSTC_COLOR_ARGS],
            capture_output=True,
            check=False,
        )
        # A clean is needed for clippy to report every lint.
        subprocess.run(
            ["cargo", "clean", "--manifest-path", CLIPPY_CARGO_TOML_PATH, *RUSTC_COLOR_ARGS],
            capture_output=True,
            check=False,
        )
        return [
            "cargo",
            "clippy",
            "--manifest-path",
            CLIPPY_CARGO_TOML_PATH,
            *RUSTC_COLOR_ARGS,
            "--",
            "-D",
            "warnings",
        ]

    def compile(self) -> CompiledExercise:
        """Build the exercise; raise CompilationError with the compiler output on failure."""
        path = str(self.path)
        match self.mode:
            case Mode.COMPILE:
                command = ["rustc", path, "-o", temp_file(), *RUSTC_COLOR_ARGS]
            case Mode.TEST:
                command = ["rustc", "--test", path, "-o", temp_file(), *RUSTC_COLOR_ARGS]
            case Mode.CLIPPY:
                command = self._clippy_command()
        completed = subprocess.run(command, capture_output=True, check=False)
        if completed.returncode == 0:
            return CompiledExercise(self)
        clean()
        raise CompilationError(self, _output(completed))

    def state(self) -> State:
        """Find the pending-completion marker and the lines around it."""
        source = self.path.read_text(encoding="utf-8")
        if not I_AM_DONE_REGEX.search(source):
            return State()
        lines = _lines(source)
        matched = next(
            (index for index, line in enumerate(lines) if I_AM_DONE_REGEX.search(line)),
            None,
        )
        if matched is None:
            raise RuntimeError(f"the completion marker in {self} spans several lines")
        first = max(matched - CONTEXT, 0)
        return State(
            tuple(
                ContextLine(line=line, number=index + 1, important=index == matched)
                for index, line in enumerate(lines[first : matched + CONTEXT + 1], start=first)
            )
        )

    def __str__(self) -> str:
        return str(self.path)


def load_exercises(path: str | os.PathLike = "info.toml") -> list[Exercise]:
    """Read the list of exercises from an info.toml file."""
    with open(path, "rb") as handle:
        data = tomllib.load(handle)
    entries = data.get("exercises")
    if not isinstance(entries, list):
        raise ValueError(f"{path}: missing list of exercises")
    exercises = []
    for entry in entries:
        try:
            exercises.append(
                Exercise(
                    name=entry["name"],
                    path=Path(entry["path"]),
                    mode=Mode(entry["mode"]),
                    hint=entry["hint"],
                )
            )
        except (KeyError, TypeError, ValueError) as error:
            raise ValueError(f"{path}: invalid exercise entry {entry!r}") from error
    return exercises