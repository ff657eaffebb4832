"""Running a single exercise."""

from __future__ import annotations

from drillrunner import ui
from drillrunner.exercise import CompilationError, Exercise, Mode
from drillrunner.verify import VerificationFailed, test


class RunFailed(Exception):
    """Raised when an exercise fails to build or run."""

    def __init__(self, exercise: Exercise) -> None:
        super().__init__(f"running {exercise} failed")
        self.exercise = exercise


def run(exercise: Exercise, verbose: bool = False) -> None:
    """Build and run one exercise, or run its tests, without prompting."""
    match exercise.mode:
        case Mode.TEST:
            try:
                test(exercise, verbose)
            except VerificationFailed as error:
                raise RunFailed(exercise) from error
        case Mode.COMPILE | Mode.CLIPPY:
            _compile_and_run(exercise)


def _compile_and_run(exercise: Exercise) -> None:
    with ui.spinner(f"Compiling {exercise}...") as progress:
        try:
            compiled = exercise.compile()
        except CompilationError as error:
            progress.stop()
            ui.warn(f"Compilation of {exercise} failed!, Compiler error message:\n")
            print(error.output.stderr)
            raise RunFailed(exercise) from error
        progress.update(f"Running {exercise}...")
        with compiled:
            output = compiled.run()

    print(output.stdout)
    if output.succeeded:
        ui.success(f"Successfully ran {exercise}")
        return
    print(output.stderr)
    ui.warn(f"Ran {exercise} with errors")
    raise RunFailed(exercise)