import subprocess
from pathlib import Path
from unittest import mock

import pytest

import drillrunner.verify as verification
from drillrunner.exercise import Exercise, Mode

PENDING = "// fake_exercise\n\n// I AM NOT DONE\n\nfn main() {\n\n}\n"
FINISHED = "// fake_exercise\n\nfn main() {\n\n}\n"


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return tmp_path


def make_runner(compile_ok=True, run_ok=True, stdout=b"", stderr=b""):
    calls = []

    def fake_run(cmd, *args, **kwargs):
        calls.append(list(cmd))
        if cmd[0] in ("rustc", "cargo"):
            ok, out = compile_ok, b""
        else:
            ok, out = run_ok, stdout
        return subprocess.CompletedProcess(
            cmd, 0 if ok else 1, stdout=out, stderr=b"" if ok else stderr
        )

    return fake_run, calls


def write_exercise(directory, name, content, mode=Mode.COMPILE):
    (directory / f"{name}.rs").write_text(content)
    return Exercise(name=name, path=Path(f"{name}.rs"), mode=mode, hint="")


def test_verify_all_success(workdir, capsys):
    exercises = [
        write_exercise(workdir, "compSuccess", FINISHED),
        write_exercise(workdir, "testSuccess", FINISHED, Mode.TEST),
    ]
    fake, calls = make_runner()
    with mock.patch("subprocess.run", side_effect=fake):
        verification.verify(exercises, False)
    out = capsys.readouterr().out
    assert "Successfully ran compSuccess.rs!" in out
    assert "Successfully tested testSuccess.rs" in out
    assert len(calls) == 4


def test_verify_stops_at_first_failure(workdir, capsys):
    exercises = [
        write_exercise(workdir, "compFailure", "fn main() {\n    let\n}\n"),
        write_exercise(workdir, "compSuccess", FINISHED),
    ]
    fake, calls = make_runner(compile_ok=False, stderr=b"error: expected pattern")
    with mock.patch("subprocess.run", side_effect=fake):
        with pytest.raises(verification.VerificationFailed) as info:
            verification.verify(exercises, False)
    assert info.value.exercise is exercises[0]
    assert all("compSuccess.rs" not in call for call in calls)
    out = capsys.readouterr().out
    assert "Compiling of compFailure.rs failed!" in out
    assert "error: expected pattern" in out


def test_verify_pending_exercise_prompts_and_fails(workdir, capsys):
    exercise = write_exercise(workdir, "pending_exercise", PENDING)
    fake, _ = make_runner(stdout=b"program says hi")
    with mock.patch("subprocess.run", side_effect=fake):
        with pytest.raises(verification.VerificationFailed) as info:
            verification.verify([exercise], False)
    assert info.value.exercise is exercise
    out = capsys.readouterr().out
    assert "The code is compiling!" in out
    assert "Output:" in out
    assert "program says hi" in out
    assert " 3 |  // I AM NOT DONE" in out


def test_verify_runtime_failure_prints_output(workdir, capsys):
    exercise = write_exercise(workdir, "a", FINISHED)
    fake, _ = make_runner(run_ok=False, stdout=b"partial", stderr=b"panicked here")
    with mock.patch("subprocess.run", side_effect=fake):
        with pytest.raises(verification.VerificationFailed):
            verification.verify([exercise], False)
    out = capsys.readouterr().out
    assert "Ran a.rs with errors" in out
    assert "panicked here" in out


def test_verify_clippy_pending(workdir, capsys):
    (workdir / "exercises" / "clippy").mkdir(parents=True)
    (workdir / "exercises" / "clippy" / "clippy1.rs").write_text(PENDING)
    exercise = Exercise(
        name="clippy1", path="exercises/clippy/clippy1.rs", mode=Mode.CLIPPY, hint=""
    )
    fake, calls = make_runner()
    with mock.patch("subprocess.run", side_effect=fake):
        with pytest.raises(verification.VerificationFailed):
            verification.verify([exercise], False)
    out = capsys.readouterr().out
    assert "Successfully compiled exercises/clippy/clippy1.rs!" in out
    assert "Clippy" in out
    assert calls[-1][:2] == ["cargo", "clippy"]


def test_test_success_with_output(workdir, capsys):
    exercise = write_exercise(workdir, "testSuccess", FINISHED, Mode.TEST)
    fake, _ = make_runner(stdout=b"THIS TEST TOO SHALL PASS")
    with mock.patch("subprocess.run", side_effect=fake):
        verification.test(exercise, True)
    assert "THIS TEST TOO SHALL PASS" in capsys.readouterr().out


def test_test_success_without_output(workdir, capsys):
    exercise = write_exercise(workdir, "testSuccess", FINISHED, Mode.TEST)
    fake, _ = make_runner(stdout=b"THIS TEST TOO SHALL PASS")
    with mock.patch("subprocess.run", side_effect=fake):
        verification.test(exercise, False)
    out = capsys.readouterr().out
    assert "THIS TEST TOO SHALL PASS" not in out
    assert "Successfully tested testSuccess.rs" in out


def test_test_does_not_prompt_on_pending(workdir, capsys):
    exercise = write_exercise(workdir, "pending_test_exercise", PENDING, Mode.TEST)
    fake, _ = make_runner()
    with mock.patch("subprocess.run", side_effect=fake):
        verification.test(exercise, False)
    assert "I AM NOT DONE" not in capsys.readouterr().out


def test_test_failure_raises(workdir, capsys):
    exercise = write_exercise(workdir, "testNotPassed", FINISHED, Mode.TEST)
    fake, _ = make_runner(run_ok=False, stdout=b"test not_passing ... FAILED")
    with mock.patch("subprocess.run", side_effect=fake):
        with pytest.raises(verification.VerificationFailed) as info:
            verification.test(exercise, False)
    assert info.value.exercise is exercise
    assert "test not_passing ... FAILED" in capsys.readouterr().out


def test_prompt_for_completion_done(workdir, capsys):
    exercise = write_exercise(workdir, "finished_exercise", FINISHED)
    assert verification.prompt_for_completion(exercise, "ignored") is True
    assert capsys.readouterr().out == ""


def test_prompt_for_completion_pending_without_output(workdir, capsys):
    exercise = write_exercise(workdir, "pending_exercise", PENDING, Mode.TEST)
    assert verification.prompt_for_completion(exercise, None) is False
    out = capsys.readouterr().out
    assert "The code is compiling, and the tests pass!" in out
    assert "Output:" not in out
    assert "`I AM NOT DONE`" in out
    assert "fn main() {" in out