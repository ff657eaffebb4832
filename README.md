# drillrunner

drillrunner walks a learner through a course of small Rust exercises. It
compiles each exercise with `rustc` (or lints it with `cargo clippy`), runs
the result, reports success or failure, and keeps you on an exercise until you
remove its `I AM NOT DONE` marker.

## Requirements

- Python 3.11 or later
- A working Rust toolchain: `rustc` must be on your `PATH` (the command checks
  this by running `rustc --version` and exits with status 1 if it fails), and
  `cargo` with Clippy is needed for clippy exercises

## Installation

```
pip install .
```

## Running a course

Run the command from the directory that holds the course's `info.toml`.
Started anywhere else, it says so and exits with status 1.

```
drillrunner                 # show the welcome banner and the text of default_out.txt
drillrunner verify          # check every exercise in order (alias: v)
drillrunner watch           # re-verify whenever an exercise file changes (alias: w)
drillrunner run NAME        # compile and run / test a single exercise (alias: r)
drillrunner hint NAME       # print the hint for an exercise (alias: h)
drillrunner --nocapture run NAME   # also show the output of test exercises
drillrunner --version
```

With no subcommand, the command prints a banner and then the contents of
`default_out.txt` from the current directory.

`run` and `hint` exit with status 1 if no exercise has the given name; `run`
also exits with status 1 if the exercise fails to build, to run, or its tests
fail. A missing or malformed argument is a usage error, also with status 1.

`verify` stops at the first exercise that fails to compile, fails its tests,
or still carries the `I AM NOT DONE` marker. For a pending exercise it prints
the lines around the marker so you know where to look. The exit status is 1
when verification stops early. `run` never stops on the marker.

`watch` verifies once, then waits for edits under `./exercises`. Changes are
collected until things have been quiet for two seconds; then, for each changed
`.rs` file, it verifies again from the matching exercise onward. While it is
waiting, type `hint` for the hint of the exercise you are stuck on, or `clear`
to clear the screen. Once every exercise passes it prints a closing message and
exits.

While working, the command builds into a temporary file named
`temp_<process id>` in the current directory and removes it afterwards. Clippy
exercises write `./exercises/clippy/Cargo.toml` before linting.

## The course file

`info.toml` lists the exercises in the order they are taken:

```toml
[[exercises]]
name = "variables1"
path = "exercises/variables/variables1.rs"
mode = "compile"
hint = "Declare the variable with `let`."

[[exercises]]
name = "tests1"
path = "exercises/tests/tests1.rs"
mode = "test"
hint = "Make the assertion pass."
```

`mode` is one of:

- `compile`: build the file as a program and run it
- `test`: build the file as a test harness and run its tests
- `clippy`: lint the file with Clippy, treating warnings as errors

An exercise is finished once its source no longer contains a line of the form
`// I AM NOT DONE` (leading spaces and a third slash are allowed).

## What is not included

The package holds the runner only. It does not ship a course: no `info.toml`,
no exercise sources and no `default_out.txt`. Bring your own course directory
laid out as described above.

## Using the library

The pieces behind the command can be used from Python:

```python
from drillrunner.exercise import load_exercises
from drillrunner.verify import verify, VerificationFailed

exercises = load_exercises("info.toml")
try:
    verify(exercises, verbose=False)
except VerificationFailed as failure:
    print("stopped at", failure.exercise.name)
```

- `drillrunner.exercise.load_exercises(path)` reads `info.toml` into a list of
  `Exercise` objects and raises `ValueError` for a malformed file.
- `Exercise.state()` returns a `State`; `State.done()` tells whether the
  exercise is finished, and `State.context` holds the `ContextLine`s around the
  marker when it is not.
- `Exercise.compile()` returns a `CompiledExercise`, or raises
  `CompilationError` carrying the compiler's `ExerciseOutput`. A
  `CompiledExercise` can be used as a context manager; `run()` returns the
  captured `ExerciseOutput`, and closing it removes the temporary binary.
- `drillrunner.run.run(exercise, verbose)` raises `RunFailed` on failure.
- `drillrunner.cli.watch(exercises, verbose)` returns once every exercise passes.

## Reference solutions

The `drillrunner.lessons` package holds worked Python solutions to the course
topics: `basics`, `primitives`, `ownership`, `structs`, `enums`, `generics`,
`traits`, `conversions`, `errors`, `iterators`, `collections_basics`,
`concurrency` and `snippets`. For example,
`drillrunner.lessons.conversions.person_from`,
`drillrunner.lessons.iterators.divide` and
`drillrunner.lessons.errors.read_and_validate`. They are covered by the
package's own tests.

## Development

```
pip install -e ".[test]"
pytest
```