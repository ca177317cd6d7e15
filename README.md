# rustlings

This package is a command-line runner for small Rust exercises. It compiles
each exercise with `rustc` and runs or tests the result. It also tracks which
exercises you have finished. The package also includes worked solutions to
many of the exercises, written as ordinary Python functions and classes.

## Installation

```
pip install .
```

The runner needs `rustc` on your `PATH`. It checks for `rustc` before it does
anything else. Exercises in `clippy` mode also need `cargo`.

## The exercise list

Run `rustlings` from a directory that contains an `info.toml`. That file lists
the exercises in their recommended order:

```toml
[[exercises]]
name = "variables1"
path = "exercises/variables/variables1.rs"
mode = "compile"   # or "test", or "clippy"
hint = "Declare the variable with `let`."
```

If `info.toml` is missing, the runner prints a message and exits with status 1.

## Usage

```
rustlings                 # print a welcome banner and the contents of default_out.txt
rustlings verify          # check every exercise in order, stopping at the first unfinished one
rustlings watch           # verify, then re-verify whenever a .rs file under ./exercises changes
rustlings run NAME        # compile and run (or test) one exercise
rustlings run next        # run the first exercise not yet done
rustlings hint NAME       # print the hint for an exercise
rustlings list            # list exercises with their status and overall progress
rustlings list --solved   # only solved exercises (--unsolved for the rest)
rustlings list -p         # only paths (-n for names only)
rustlings list -f vec,str # only names or paths containing one of the comma-separated patterns
rustlings --nocapture run NAME   # also show the output of test exercises
rustlings --version
```

The command exits with status 0 on success. It exits with status 1 when an
exercise fails, when no exercise matches the given name, or when watch mode
cannot start. For example, watch mode cannot start if `./exercises` is missing.

An exercise counts as pending while its source still has a line such as
`// I AM NOT DONE`. If an exercise compiles and passes but still has this
marker, the runner shows the lines around the marker and stops there. Remove
the marker to move on to the next exercise.

In watch mode you can type these commands:

- `hint`: print the hint for the exercise that is currently failing
- `clear`: clear the screen
- `quit`: leave watch mode
- `help`: show the list of commands

Set the environment variable `NO_EMOJI` to get plain-text status markers.

## Using the runner from Python

- `rustlings.exercise.load_exercises(path)` reads an `info.toml` and returns a
  list of `Exercise` objects.
- `Exercise.state()` reports whether the pending marker is still present.
- `Exercise.compile()` returns a `CompiledExercise`, which is a context manager
  that removes the binary when it closes. If compilation fails, it raises
  `CompilationError`.
- `CompiledExercise.run()` returns the captured output. If the binary exits
  unsuccessfully, it raises `RunError`.
- `rustlings.verify.verify(exercises, verbose)` raises `ExerciseFailed` at the
  first exercise that fails or is not yet done.
- `rustlings.run.run(exercise, verbose)` also raises `ExerciseFailed` on
  failure.

## Reference solutions

The `rustlings.exercises` package holds worked solutions, grouped by topic:

- `quizzes`
- `control_flow`
- `functions`
- `strings`
- `primitive_types`
- `move_semantics`
- `options`
- `collections`
- `structs`
- `enums`
- `generics`
- `traits`
- `iterators`
- `cons_list`
- `concurrency`
- `from_into`
- `from_str`
- `advanced_errors`
- `climate`

For example, `rustlings.exercises.quizzes.calculate_apple_price(65)` returns
`65`. `rustlings.exercises.from_str.parse_person("Mark,20")` returns a `Person`.
For bad input it raises `ParsePersonError`.

## What is not included

Some exercise topics have no worked solution:

- fallible conversion of tuples, arrays and slices into an RGB colour
- numeric casting and counting bytes versus characters
- the introductory error-handling exercises (name tags, token costs,
  positive non-zero integers built from plain strings)

The runner can still compile and check your own work on these exercises.

## Tests

```
pip install .[test]
pytest
```