"""Exercises: their metadata, compilation, execution and completion state."""

from __future__ import annotations

import contextlib
import os
import re
import subprocess
import threading
import tomllib
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from rustlings.ui import no_emoji

RUSTC_COLOR_ARGS = ("--color", "always")
I_AM_DONE_REGEX = re.compile(r"^\s*///?\s*I\s+AM\s+NOT\s+DONE", re.MULTILINE)
CONTEXT = 2
CLIPPY_CARGO_TOML_PATH = "./exercises/clippy/Cargo.toml"


def temp_file() -> str:
    """Return a binary file name unique to this process and thread."""
    return f"./temp_{os.getpid()}_{threading.get_ident()}"


def clean() -> None:
    """Remove the compiled binary, ignoring any error."""
    with contextlib.suppress(OSError):
        Path(temp_file()).unlink()


class Mode(Enum):
    """How an exercise is checked."""

    COMPILE = "compile"
    TEST = "test"
    CLIPPY = "clippy"


@dataclass(frozen=True)
class ContextLine:
    """One source line shown around a pending marker."""

    line: str
    number: int
    important: bool


@dataclass(frozen=True)
class State:
    """Completion state; an empty context means the exercise is done."""

    context: tuple[ContextLine, ...] = ()

    @property
    def done(self) -> bool:
        return not self.context


@dataclass(frozen=True)
class ExerciseOutput:
    """Decoded standard output and error of a finished command."""

    stdout: str
    stderr: str


class CompilationError(Exception):
    """Raised when an exercise fails to compile."""

    def __init__(self, exercise: "Exercise", output: ExerciseOutput) -> None:
        super().__init__(f"compilation of {exercise} failed")
        self.exercise = exercise
        self.output = output


class RunError(Exception):
    """Raised when a compiled exercise exits unsuccessfully."""

    def __init__(self, exercise: "Exercise", output: ExerciseOutput) -> None:
        super().__init__(f"running {exercise} failed")
        self.exercise = exercise
        self.output = output


def _decode(data: bytes | None) -> str:
    return (data or b"").decode("utf-8", errors="replace")


def _output(result: subprocess.CompletedProcess) -> ExerciseOutput:
    return ExerciseOutput(stdout=_decode(result.stdout), stderr=_decode(result.stderr))


def _execute(args: list[str]) -> subprocess.CompletedProcess:
    return subprocess.run(args, capture_output=True, check=False)


def _lines(source: str) -> list[str]:
    lines = source.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


@dataclass
class Exercise:
    """A single exercise as described in info.toml."""

    name: str
    path: Path
    mode: Mode
    hint: str = ""

    def __post_init__(self) -> None:
        self.path = Path(self.path)
        self.mode = Mode(self.mode)

    def __str__(self) -> str:
        return str(self.path)

    def compile(self) -> "CompiledExercise":
        """Compile the exercise; raise CompilationError on failure."""
        target = temp_file()
        source = str(self.path)
        if self.mode is Mode.COMPILE:
            result = _execute(["rustc", source, "-o", target, *RUSTC_COLOR_ARGS])
        elif self.mode is Mode.TEST:
            result = _execute(
                ["rustc", "--test", source, "-o", target, *RUSTC_COLOR_ARGS]
            )
        else:
            result = self._clippy(target)

        if result.returncode == 0:
            return CompiledExercise(self)
        clean()
        raise CompilationError(self, _output(result))

    def _clippy(self, target: str) -> subprocess.CompletedProcess:
        cargo_toml = (
            "[package]\n"
            f'name = "{self.name}"\n'
            'version = "0.0.1"\n'
            'edition = "2018"\n'
            "[[bin]]\n"
            f'name = "{self.name}"\n'
            f'path = "{self.name}.rs"'
        )
        try:
            Path(CLIPPY_CARGO_TOML_PATH).write_text(cargo_toml, encoding="utf-8")
        except OSError as exc:
            message = (
                "Failed to write Clippy Cargo.toml file."
                if no_emoji()
                else "Failed to write 📎 Clippy 📎 Cargo.toml file."
            )
            raise OSError(f"{message} {exc}") from exc
        # Build a binary too, so the exercise can be run afterwards; a failure
        # here is reported again by clippy below.
        _execute(["rustc", str(self.path), "-o", target, *RUSTC_COLOR_ARGS])
        # Clippy only reports every lint after a clean build.
        _execute(
            ["cargo", "clean", "--manifest-path", CLIPPY_CARGO_TOML_PATH, *RUSTC_COLOR_ARGS]
        )
        return _execute(
            [
                "cargo",
                "clippy",
                "--manifest-path",
                CLIPPY_CARGO_TOML_PATH,
                *RUSTC_COLOR_ARGS,
                "--",
                "-D",
                "warnings",
            ]
        )

    def state(self) -> State:
        """Read the source file and report whether the marker is still present."""
        source = self.path.read_bytes().decode("utf-8")
        if not I_AM_DONE_REGEX.search(source):
            return State()

        lines = _lines(source)
        matched = next(
            (i for i, line in enumerate(lines) if I_AM_DONE_REGEX.search(line)), None
        )
        if matched is None:
            raise ValueError(f"{self.path}: the pending marker spans several lines")

        low = max(0, matched - CONTEXT)
        high = matched + CONTEXT
        return State(
            tuple(
                ContextLine(line=line, number=i + 1, important=i == matched)
                for i, line in enumerate(lines[low : high + 1], start=low)
            )
        )

    def looks_done(self) -> bool:
        """Return True when the pending marker has been removed."""
        return self.state().done


class CompiledExercise:
    """A successfully compiled exercise; closing it removes the binary."""

    def __init__(self, exercise: Exercise) -> None:
        self.exercise = exercise
        self._closed = False

    def run(self) -> ExerciseOutput:
        """Run the binary; raise RunError when it exits unsuccessfully."""
        args = [temp_file()]
        if self.exercise.mode is Mode.TEST:
            args.append("--show-output")
        result = _execute(args)
        output = _output(result)
        if result.returncode != 0:
            raise RunError(self.exercise, output)
        return output

    def close(self) -> None:
        if not self._closed:
            clean()
            self._closed = True

    def __enter__(self) -> "CompiledExercise":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def load_exercises(path: str | os.PathLike = "info.toml") -> list[Exercise]:
    """Load the exercise list from an info.toml file."""
    with open(path, "rb") as handle:
        data = tomllib.load(handle)
    try:
        entries = data["exercises"]
    except KeyError as exc:
        raise ValueError(f"{path}: no exercises table") from exc

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
        except (KeyError, TypeError) as exc:
            raise ValueError(f"invalid exercise entry: {entry!r}") from exc
    return exercises