"""Verify exercises in order, stopping at the first one not yet finished."""

from __future__ import annotations

from collections.abc import Iterable

from rich.console import Console
from rich.status import Status
from rich.text import Text

from rustlings.exercise import (
    CompilationError,
    CompiledExercise,
    Exercise,
    Mode,
    RunError,
)
from rustlings.ui import no_emoji, success, warn


class ExerciseFailed(Exception):
    """Raised when an exercise fails or is not yet marked as done."""

    def __init__(self, exercise: Exercise) -> None:
        super().__init__(f"exercise {exercise} is not finished")
        self.exercise = exercise


def _console() -> Console:
    return Console(highlight=False, soft_wrap=True)


def _status(message: str) -> Status:
    return _console().status(message)


def verify(exercises: Iterable[Exercise], verbose: bool = False) -> None:
    """Check each exercise in turn; raise ExerciseFailed at the first failure."""
    for exercise in exercises:
        if exercise.mode is Mode.TEST:
            finished = _compile_and_test(exercise, interactive=True, verbose=verbose)
        elif exercise.mode is Mode.COMPILE:
            finished = _compile_and_run_interactively(exercise)
        else:
            finished = _compile_only(exercise)
        if not finished:
            raise ExerciseFailed(exercise)


def test(exercise: Exercise, verbose: bool = False) -> None:
    """Compile and run an exercise's tests without prompting."""
    _compile_and_test(exercise, interactive=False, verbose=verbose)


def _compile(exercise: Exercise, message: str) -> CompiledExercise:
    try:
        with _status(message):
            return exercise.compile()
    except CompilationError as err:
        warn(f"Compiling of {exercise} failed! Please try again. Here's the output:")
        print(err.output.stderr)
        raise ExerciseFailed(exercise) from err


def _compile_only(exercise: Exercise) -> bool:
    with _compile(exercise, f"Compiling {exercise}..."):
        pass
    success(f"Successfully compiled {exercise}!")
    return _prompt_for_completion(exercise)


def _compile_and_run_interactively(exercise: Exercise) -> bool:
    with _compile(exercise, f"Compiling {exercise}...") as compiled:
        try:
            with _status(f"Running {exercise}..."):
                output = compiled.run()
        except RunError as err:
            warn(f"Ran {exercise} with errors")
            print(err.output.stdout)
            print(err.output.stderr)
            raise ExerciseFailed(exercise) from err
        success(f"Successfully ran {exercise}!")
        return _prompt_for_completion(exercise, output.stdout)


def _compile_and_test(exercise: Exercise, interactive: bool, verbose: bool) -> bool:
    with _compile(exercise, f"Testing {exercise}...") as compiled:
        try:
            with _status(f"Testing {exercise}..."):
                output = compiled.run()
        except RunError as err:
            warn(f"Testing of {exercise} failed! Please try again. Here's the output:")
            print(err.output.stdout)
            raise ExerciseFailed(exercise) from err
        if verbose:
            print(output.stdout)
        success(f"Successfully tested {exercise}")
        return _prompt_for_completion(exercise) if interactive else True


def _prompt_for_completion(exercise: Exercise, prompt_output: str | None = None) -> bool:
    state = exercise.state()
    if state.done:
        return True

    plain = no_emoji()
    clippy_message = (
        "The code is compiling, and Clippy is happy!"
        if plain
        else "The code is compiling, and 📎 Clippy 📎 is happy!"
    )
    success_message = {
        Mode.COMPILE: "The code is compiling!",
        Mode.TEST: "The code is compiling, and the tests pass!",
        Mode.CLIPPY: clippy_message,
    }[exercise.mode]

    console = _console()
    separator = Text("====================", style="bold")

    print()
    print(f"~*~ {success_message} ~*~" if plain else f"🎉 🎉  {success_message} 🎉 🎉")
    print()

    if prompt_output is not None:
        print("Output:")
        console.print(separator)
        print(prompt_output)
        console.print(separator)
        print()

    print("You can keep working on this exercise,")
    console.print(
        Text.assemble(
            "or jump into the next one by removing the ",
            ("`I AM NOT DONE`", "bold"),
            " comment:",
        )
    )
    print()
    for context_line in state.context:
        line = Text.assemble(
            (f"{context_line.number:>2}", "bold blue"), " ", ("|", "blue"), "  "
        )
        line.append(context_line.line, style="bold" if context_line.important else None)
        console.print(line)

    return False