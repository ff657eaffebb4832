"""Verifying exercises in order and prompting when one is still pending."""

from __future__ import annotations

from collections.abc import Iterable

from rich.console import Console
from rich.text import Text

from drillrunner import ui
from drillrunner.exercise import CompilationError, CompiledExercise, Exercise, Mode

_console = Console(highlight=False, soft_wrap=True, markup=False, emoji=False)

_SUCCESS_MESSAGES = {
    Mode.COMPILE: "The code is compiling!",
    Mode.TEST: "The code is compiling, and the tests pass!",
    Mode.CLIPPY: "The code is compiling, and 📎 Clippy 📎 is happy!",
}

_SEPARATOR = Text("====================", style="bold")


class VerificationFailed(Exception):
    """Raised with the first exercise that did not pass."""

    def __init__(self, exercise: Exercise) -> None:
        super().__init__(f"verification of {exercise} failed")
        self.exercise = exercise


def verify(exercises: Iterable[Exercise], verbose: bool = False) -> None:
    """Check each exercise in turn, raising VerificationFailed at the first failure."""
    for exercise in exercises:
        match exercise.mode:
            case Mode.TEST:
                passed = _compile_and_test(exercise, interactive=True, verbose=verbose)
            case Mode.COMPILE:
                passed = _compile_and_run_interactively(exercise)
            case Mode.CLIPPY:
                passed = _compile_only(exercise)
        if not passed:
            raise VerificationFailed(exercise)


def test(exercise: Exercise, verbose: bool = False) -> None:
    """Build and run an exercise's test harness without prompting."""
    if not _compile_and_test(exercise, interactive=False, verbose=verbose):
        raise VerificationFailed(exercise)


def _compile(exercise: Exercise, progress) -> CompiledExercise | None:
    try:
        return exercise.compile()
    except CompilationError as error:
        progress.stop()
        ui.warn(f"Compiling of {exercise} failed! Please try again. Here's the output:")
        print(error.output.stderr)
        return None


def _compile_only(exercise: Exercise) -> bool:
    with ui.spinner(f"Compiling {exercise}...") as progress:
        compiled = _compile(exercise, progress)
        if compiled is None:
            return False
        compiled.close()
    ui.success(f"Successfully compiled {exercise}!")
    return prompt_for_completion(exercise, None)


def _compile_and_run_interactively(exercise: Exercise) -> bool:
    with ui.spinner(f"Compiling {exercise}...") as progress:
        compiled = _compile(exercise, progress)
        if compiled is None:
            return False
        progress.update(f"Running {exercise}...")
        with compiled:
            output = compiled.run()
    if not output.succeeded:
        ui.warn(f"Ran {exercise} with errors")
        print(output.stdout)
        print(output.stderr)
        return False
    ui.success(f"Successfully ran {exercise}!")
    return prompt_for_completion(exercise, output.stdout)


def _compile_and_test(exercise: Exercise, interactive: bool, verbose: bool) -> bool:
    with ui.spinner(f"Testing {exercise}...") as progress:
        compiled = _compile(exercise, progress)
        if compiled is None:
            return False
        with compiled:
            output = compiled.run()
    if not output.succeeded:
        ui.warn(f"Testing of {exercise} failed! Please try again. Here's the output:")
        print(output.stdout)
        return False
    if verbose:
        print(output.stdout)
    ui.success(f"Successfully tested {exercise}")
    return prompt_for_completion(exercise, None) if interactive else True


def prompt_for_completion(exercise: Exercise, prompt_output: str | None = None) -> bool:
    """Return True if the exercise is done; otherwise show where the marker is and return False."""
    state = exercise.state()
    if state.done():
        return True

    print()
    print(f"🎉 🎉  {_SUCCESS_MESSAGES[exercise.mode]} 🎉 🎉")
    print()

    if prompt_output is not None:
        print("Output:")
        _console.print(_SEPARATOR)
        print(prompt_output)
        _console.print(_SEPARATOR)
        print()

    print("You can keep working on this exercise,")
    _console.print(
        Text.assemble(
            "or jump into the next one by removing the ",
            ("`I AM NOT DONE`", "bold"),
            " comment:",
        )
    )
    print()
    for context_line in state.context:
        _console.print(
            Text.assemble(
                (f"{context_line.number:>2}", "bold blue"),
                " ",
                ("|", "blue"),
                "  ",
                (context_line.line, "bold" if context_line.important else ""),
            )
        )
    return False