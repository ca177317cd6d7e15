import subprocess
from pathlib import Path
from unittest import mock

import pytest

from rustlings.exercise import Exercise, Mode, temp_file
from rustlings.verify import ExerciseFailed, test, verify

PENDING = "// fake_exercise\n\n// I AM NOT DONE\n\nfn main() {\n\n}\n"
FINISHED = "// fake_exercise\n\nfn main() {\n\n}\n"


def completed(returncode=0, stdout=b"", stderr=b""):
    return subprocess.CompletedProcess([], returncode, stdout, stderr)


@pytest.fixture(autouse=True)
def workdir(tmp_path, monkeypatch):
    for name in ("FORCE_COLOR", "TTY_COMPATIBLE", "TTY_INTERACTIVE", "NO_EMOJI"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


def make(workdir, name, content, mode=Mode.COMPILE):
    path = Path(f"{name}.rs")
    (workdir / path).write_text(content)
    return Exercise(name=name, path=path, mode=mode, hint="")


def test_all_done_exercises_pass(workdir, capsys):
    exercises = [make(workdir, "a", FINISHED), make(workdir, "b", FINISHED)]
    results = [completed(), completed(), completed(), completed()]
    with mock.patch("subprocess.run", side_effect=results) as run:
        assert verify(exercises) is None
    out = capsys.readouterr().out
    assert "Successfully ran a.rs!" in out
    assert "Successfully ran b.rs!" in out
    assert run.call_count == 4


def test_compile_failure_stops_verification(workdir, capsys):
    exercises = [make(workdir, "a", FINISHED), make(workdir, "b", FINISHED)]
    with mock.patch(
        "subprocess.run", side_effect=[completed(1, b"", b"error[E0425]")]
    ) as run:
        with pytest.raises(ExerciseFailed) as excinfo:
            verify(exercises)
    assert excinfo.value.exercise is exercises[0]
    assert run.call_count == 1
    out = capsys.readouterr().out
    assert "Compiling of a.rs failed! Please try again." in out
    assert "error[E0425]" in out


def test_pending_exercise_prompts(workdir, capsys):
    exercise = make(workdir, "pending_exercise", PENDING)
    results = [completed(), completed(0, b"program output")]
    with mock.patch("subprocess.run", side_effect=results):
        with pytest.raises(ExerciseFailed) as excinfo:
            verify([exercise])
    assert excinfo.value.exercise is exercise
    out = capsys.readouterr().out
    assert "The code is compiling!" in out
    assert "Output:" in out
    assert "program output" in out
    assert "3 |  // I AM NOT DONE" in out


def test_pending_without_emoji(workdir, monkeypatch, capsys):
    monkeypatch.setenv("NO_EMOJI", "1")
    exercise = make(workdir, "pending_exercise", PENDING, Mode.TEST)
    with mock.patch("subprocess.run", side_effect=[completed(), completed()]):
        with pytest.raises(ExerciseFailed):
            verify([exercise])
    out = capsys.readouterr().out
    assert "~*~ The code is compiling, and the tests pass! ~*~" in out
    assert "🎉" not in out


def test_stops_at_first_pending(workdir):
    exercises = [
        make(workdir, "a", FINISHED),
        make(workdir, "b", PENDING),
        make(workdir, "c", FINISHED),
    ]
    results = [completed()] * 4
    with mock.patch("subprocess.run", side_effect=results) as run:
        with pytest.raises(ExerciseFailed) as excinfo:
            verify(exercises)
    assert excinfo.value.exercise is exercises[1]
    assert run.call_count == 4


@pytest.mark.parametrize("verbose", [True, False])
def test_verbose_controls_test_output(workdir, capsys, verbose):
    exercise = make(workdir, "testSuccess", FINISHED, Mode.TEST)
    results = [completed(), completed(0, b"THIS TEST TOO SHALL PASS")]
    with mock.patch("subprocess.run", side_effect=results):
        verify([exercise], verbose)
    out = capsys.readouterr().out
    assert ("THIS TEST TOO SHALL PASS" in out) is verbose
    assert "Successfully tested testSuccess.rs" in out


def test_failing_tests_report_output(workdir, capsys):
    exercise = make(workdir, "testNotPassed", FINISHED, Mode.TEST)
    results = [completed(), completed(101, b"assertion failed")]
    with mock.patch("subprocess.run", side_effect=results):
        with pytest.raises(ExerciseFailed):
            verify([exercise])
    out = capsys.readouterr().out
    assert "Testing of testNotPassed.rs failed! Please try again." in out
    assert "assertion failed" in out


def test_test_does_not_prompt(workdir, capsys):
    exercise = make(workdir, "pending_test_exercise", PENDING, Mode.TEST)
    with mock.patch("subprocess.run", side_effect=[completed(), completed()]):
        assert test(exercise) is None
    assert "I AM NOT DONE" not in capsys.readouterr().out


def test_test_cleans_binary(workdir):
    exercise = make(workdir, "testSuccess", FINISHED, Mode.TEST)
    Path(temp_file()).touch()
    with mock.patch("subprocess.run", side_effect=[completed(), completed()]):
        test(exercise)
    assert not Path(temp_file()).exists()


def test_clippy_exercise_only_compiles(workdir, capsys):
    (workdir / "exercises" / "clippy").mkdir(parents=True)
    exercise = make(workdir, "clippy1", FINISHED, Mode.CLIPPY)
    with mock.patch("subprocess.run", side_effect=[completed()] * 3) as run:
        verify([exercise])
    assert run.call_count == 3
    assert "Successfully compiled clippy1.rs!" in capsys.readouterr().out


def test_pending_clippy_message(workdir, capsys):
    (workdir / "exercises" / "clippy").mkdir(parents=True)
    exercise = make(workdir, "clippy2", PENDING, Mode.CLIPPY)
    with mock.patch("subprocess.run", side_effect=[completed()] * 3):
        with pytest.raises(ExerciseFailed):
            verify([exercise])
    assert "The code is compiling, and 📎 Clippy 📎 is happy!" in capsys.readouterr().out