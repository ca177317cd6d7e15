"""Run a single exercise without prompting for completion."""

from __future__ import annotations

from rich.console import Console

from rustlings.exercise import CompilationError, Exercise, Mode, RunError
from rustlings.ui import success, warn
from rustlings.verify import ExerciseFailed, test


def run(exercise: Exercise, verbose: bool = False) -> None:
    """Compile and run (or test) one exercise; raise ExerciseFailed on failure."""
    if exercise.mode is Mode.TEST:
        test(exercise, verbose)
    else:
        _compile_and_run(exercise)


def _compile_and_run(exercise: Exercise) -> None:
    console = Console(highlight=False, soft_wrap=True)
    try:
        with console.status(f"Compiling {exercise}..."):
            compiled = exercise.compile()
    except CompilationError as err:
        warn(f"Compilation of {exercise} failed!, Compiler error message:\n")
        print(err.output.stderr)
        raise ExerciseFailed(exercise) from err

    with compiled:
        try:
            with console.status(f"Running {exercise}..."):
                output = compiled.run()
        except RunError as err:
            print(err.output.stdout)
            print(err.output.stderr)
            warn(f"Ran {exercise} with errors")
            raise ExerciseFailed(exercise) from err

    print(output.stdout)
    success(f"Successfully ran {exercise}")