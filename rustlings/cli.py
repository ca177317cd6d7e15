"""Command-line interface: list, run, hint, verify and watch exercises."""

from __future__ import annotations

import argparse
import os
import queue
import subprocess
import sys
import threading
from collections.abc import Iterable, Sequence
from enum import Enum
from itertools import chain, dropwhile
from pathlib import Path
from types import SimpleNamespace

from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer

from rustlings.exercise import Exercise, load_exercises
from rustlings.run import run
from rustlings.ui import no_emoji
from rustlings.verify import ExerciseFailed, verify

VERSION = "4.6.0"
EXERCISES_DIR = "./exercises"

_WELCOME = (
    "",
    r"       welcome to...                      ",
    r"                 _   _ _                  ",
    r"  _ __ _   _ ___| |_| (_)_ __   __ _ ___  ",
    r" | '__| | | / __| __| | | '_ \ / _` / __| ",
    r" | |  | |_| \__ \ |_| | | | | | (_| \__ \ ",
    r" |_|   \__,_|___/\__|_|_|_| |_|\__, |___/ ",
    r"                               |___/      ",
    "",
)

_FINISH_LINE = (
    "",
    "+----------------------------------------------------+",
    "|          You made it to the Fe-nish line!          |",
    "+--------------------------  ------------------------+",
    r"                          \/                         ",
    "     ▒▒          ▒▒▒▒▒▒▒▒      ▒▒▒▒▒▒▒▒          ▒▒   ",
    "   ▒▒▒▒  ▒▒    ▒▒        ▒▒  ▒▒        ▒▒    ▒▒  ▒▒▒▒ ",
    "   ▒▒▒▒  ▒▒  ▒▒            ▒▒            ▒▒  ▒▒  ▒▒▒▒ ",
    " ░░▒▒▒▒░░▒▒  ▒▒            ▒▒            ▒▒  ▒▒░░▒▒▒▒ ",
    "   ▓▓▓▓▓▓▓▓  ▓▓      ▓▓██  ▓▓  ▓▓██      ▓▓  ▓▓▓▓▓▓▓▓ ",
    "     ▒▒▒▒    ▒▒      ████  ▒▒  ████      ▒▒░░  ▒▒▒▒   ",
    "       ▒▒  ▒▒▒▒▒▒        ▒▒▒▒▒▒        ▒▒▒▒▒▒  ▒▒     ",
    "         ▒▒▒▒▒▒▒▒▒▒▓▓▓▓▓▓▒▒▒▒▒▒▒▒▓▓▒▒▓▓▒▒▒▒▒▒▒▒       ",
    "           ▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒         ",
    "             ▒▒▒▒▒▒▒▒▒▒██▒▒▒▒▒▒██▒▒▒▒▒▒▒▒▒▒           ",
    "           ▒▒  ▒▒▒▒▒▒▒▒▒▒██████▒▒▒▒▒▒▒▒▒▒  ▒▒         ",
    "         ▒▒    ▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒    ▒▒       ",
    "       ▒▒    ▒▒    ▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒    ▒▒    ▒▒     ",
    "       ▒▒  ▒▒    ▒▒                  ▒▒    ▒▒  ▒▒     ",
    "           ▒▒  ▒▒                      ▒▒  ▒▒         ",
    "",
    "We hope you enjoyed learning about the various aspects of Rust!",
    "If you noticed any issues, please don't hesitate to report them to our repo.",
    "You can also contribute your own exercises to help the greater community!",
    "",
    "Before reporting an issue or contributing, please read our guidelines",
    "in the CONTRIBUTING.md file of the repository.",
)

_WATCH_HELP = (
    "Commands available to you in watch mode:",
    "  hint  - prints the current exercise's hint",
    "  clear - clears the screen",
    "  quit  - quits watch mode",
    "  help  - displays this help message",
    "",
    "Watch mode automatically re-evaluates the current exercise",
    "when you edit a file's contents.",
)


class WatchStatus(Enum):
    """How watch mode ended."""

    FINISHED = "finished"
    UNFINISHED = "unfinished"


class _UsageError(Exception):
    """Raised by the argument parser instead of exiting."""


class _Parser(argparse.ArgumentParser):
    def error(self, message: str) -> None:  # type: ignore[override]
        raise _UsageError(f"{self.format_usage()}{self.prog}: error: {message}")


def _build_parser() -> argparse.ArgumentParser:
    parser = _Parser(
        prog="rustlings",
        description=(
            "Rustlings is a collection of small exercises to get you used to "
            "writing and reading Rust code"
        ),
    )
    parser.add_argument(
        "--nocapture", action="store_true", help="show outputs from the test exercises"
    )
    parser.add_argument(
        "-v", "--version", action="store_true", help="show the executable version"
    )
    commands = parser.add_subparsers(dest="command", metavar="<command>")
    commands.add_parser(
        "verify", help="Verifies all exercises according to the recommended order"
    )
    commands.add_parser("watch", help="Reruns `verify` when files were edited")
    run_parser = commands.add_parser("run", help="Runs/Tests a single exercise")
    run_parser.add_argument("name", help="the name of the exercise")
    hint_parser = commands.add_parser(
        "hint", help="Returns a hint for the given exercise"
    )
    hint_parser.add_argument("name", help="the name of the exercise")
    list_parser = commands.add_parser(
        "list", help="Lists the exercises available in Rustlings"
    )
    list_parser.add_argument(
        "-p", "--paths", action="store_true", help="show only the paths of the exercises"
    )
    list_parser.add_argument(
        "-n", "--names", action="store_true", help="show only the names of the exercises"
    )
    list_parser.add_argument(
        "-f",
        "--filter",
        default=None,
        help="provide a string to match exercise names; comma separated patterns are acceptable",
    )
    list_parser.add_argument(
        "-u", "--unsolved", action="store_true", help="display only exercises not yet solved"
    )
    list_parser.add_argument(
        "-s", "--solved", action="store_true", help="display only exercises that have been solved"
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line and return the process exit code."""
    try:
        args = _build_parser().parse_args(argv)
    except _UsageError as err:
        print(err, file=sys.stderr)
        return 1

    if args.version:
        print(f"v{VERSION}")
        return 0

    if args.command is None:
        print("\n".join(_WELCOME))

    if not Path("info.toml").exists():
        print(f"{sys.argv[0]} must be run from the rustlings directory")
        print("Try `cd rustlings/`!")
        return 1

    if not rustc_exists():
        print("We cannot find `rustc`.")
        print("Try running `rustc --version` to diagnose your problem.")
        print("For instructions on how to install Rust, check the README.")
        return 1

    exercises = load_exercises("info.toml")
    verbose = args.nocapture

    if args.command is None:
        print(Path("default_out.txt").read_text(encoding="utf-8"))
        return 0

    if args.command == "list":
        return _list_exercises(exercises, args)

    if args.command in ("run", "hint"):
        try:
            exercise = find_exercise(args.name, exercises)
        except LookupError as err:
            print(err)
            return 1
        if args.command == "hint":
            print(exercise.hint)
            return 0
        try:
            run(exercise, verbose)
        except ExerciseFailed:
            return 1
        return 0

    if args.command == "verify":
        try:
            verify(exercises, verbose)
        except ExerciseFailed:
            return 1
        return 0

    try:
        status = watch(exercises, verbose)
    except OSError as err:
        print(f"Error: Could not watch your progress. Error message was {err!r}.")
        print(
            "Most likely you've run out of disk space or your 'inotify limit' "
            "has been reached."
        )
        return 1
    if status is WatchStatus.FINISHED:
        emoji = "★" if no_emoji() else "🎉"
        print(f"{emoji} All exercises completed! {emoji}")
        print("\n".join(_FINISH_LINE))
    else:
        print("We hope you're enjoying learning about Rust!")
        print(
            "If you want to continue working on the exercises at a later point, "
            "you can simply run `rustlings watch` again"
        )
    return 0


def _list_exercises(exercises: list[Exercise], args: argparse.Namespace) -> int:
    if not args.paths and not args.names:
        print(f"{'Name':<17}\t{'Path':<46}\t{'Status':<7}")
    patterns = [
        pattern
        for pattern in (args.filter or "").lower().split(",")
        if pattern.strip()
    ]
    done_count = 0
    try:
        for exercise in exercises:
            fname = str(exercise.path)
            matches = any(
                pattern in exercise.name or pattern in fname for pattern in patterns
            )
            done = exercise.looks_done()
            if done:
                done_count += 1
            status = "Done" if done else "Pending"
            wanted = (
                (done and args.solved)
                or (not done and args.unsolved)
                or (not args.solved and not args.unsolved)
            )
            if wanted and (matches or args.filter is None):
                if args.paths:
                    line = f"{fname}\n"
                elif args.names:
                    line = f"{exercise.name}\n"
                else:
                    line = f"{exercise.name:<17}\t{fname:<46}\t{status:<7}\n"
                sys.stdout.write(line)
        total = len(exercises)
        percentage = done_count / total * 100.0 if total else float("nan")
        print(
            f"Progress: You completed {done_count} / {total} exercises "
            f"({percentage:.2f} %)."
        )
    except BrokenPipeError:
        return 0
    except OSError:
        return 1
    return 0


def find_exercise(name: str, exercises: Iterable[Exercise]) -> Exercise:
    """Find an exercise by name, or the first unfinished one for "next"."""
    if name == "next":
        found = next((e for e in exercises if not e.looks_done()), None)
        if found is None:
            raise LookupError(
                "🎉 Congratulations! You have done all the exercises!\n"
                "🔚 There are no more exercises to do next!"
            )
        return found
    found = next((e for e in exercises if e.name == name), None)
    if found is None:
        raise LookupError(f"No exercise found for '{name}'!")
    return found


class _ChangeHandler(FileSystemEventHandler):
    def __init__(self, changes: queue.Queue[Path]) -> None:
        super().__init__()
        self._changes = changes

    def on_created(self, event: FileSystemEvent) -> None:
        self._push(event)

    def on_modified(self, event: FileSystemEvent) -> None:
        self._push(event)

    def _push(self, event: FileSystemEvent) -> None:
        if not event.is_directory:
            self._changes.put(Path(os.fsdecode(event.src_path)))


def _clear_screen() -> None:
    print("\x1bc")


def _ends_with(path: Path, suffix: Path) -> bool:
    tail = Path(suffix).parts
    return len(tail) <= len(path.parts) and path.parts[len(path.parts) - len(tail):] == tail


def _spawn_watch_shell(shared: SimpleNamespace, should_quit: threading.Event) -> None:
    print(
        "Welcome to watch mode! You can type 'help' to get an overview of the "
        "commands you can use here."
    )

    def shell() -> None:
        while True:
            try:
                line = sys.stdin.readline()
            except (OSError, ValueError) as error:
                print(f"error reading command: {error}")
                return
            if not line:
                return
            command = line.strip()
            if command == "hint":
                if shared.hint is not None:
                    print(shared.hint)
            elif command == "clear":
                print("\x1b[2J\x1b[1;1H")
            elif command == "quit":
                should_quit.set()
                print("Bye!")
            elif command == "help":
                print("\n".join(_WATCH_HELP))
            else:
                print(f"unknown command: {command}")

    threading.Thread(target=shell, daemon=True).start()


def _drain_duplicates(changes: queue.Queue[Path], changed: Path) -> None:
    kept = []
    while True:
        try:
            other = changes.get_nowait()
        except queue.Empty:
            break
        if other != changed:
            kept.append(other)
    for other in kept:
        changes.put(other)


def watch(exercises: Iterable[Exercise], verbose: bool = False) -> WatchStatus:
    """Verify exercises, then re-verify whenever an exercise file changes."""
    exercises = list(exercises)
    if not Path(EXERCISES_DIR).is_dir():
        raise FileNotFoundError(f"no such directory: {EXERCISES_DIR}")

    changes: queue.Queue[Path] = queue.Queue()
    observer = Observer()
    observer.schedule(_ChangeHandler(changes), EXERCISES_DIR, recursive=True)
    observer.start()
    try:
        _clear_screen()
        try:
            verify(exercises, verbose)
        except ExerciseFailed as failed:
            shared = SimpleNamespace(hint=failed.exercise.hint)
        else:
            return WatchStatus.FINISHED

        should_quit = threading.Event()
        _spawn_watch_shell(shared, should_quit)
        while not should_quit.is_set():
            try:
                changed = changes.get(timeout=1)
            except queue.Empty:
                continue
            _drain_duplicates(changes, changed)
            if changed.suffix != ".rs" or not changed.exists():
                continue
            filepath = changed.resolve()
            pending = chain(
                dropwhile(lambda e: not _ends_with(filepath, e.path), exercises),
                (
                    e
                    for e in exercises
                    if not e.looks_done() and not _ends_with(filepath, e.path)
                ),
            )
            _clear_screen()
            try:
                verify(pending, verbose)
            except ExerciseFailed as failed:
                shared.hint = failed.exercise.hint
            else:
                return WatchStatus.FINISHED
        return WatchStatus.UNFINISHED
    finally:
        observer.stop()
        observer.join()


def rustc_exists() -> bool:
    """Return True when `rustc --version` runs successfully."""
    try:
        result = subprocess.run(
            ["rustc", "--version"], stdout=subprocess.DEVNULL, check=False
        )
    except OSError:
        return False
    return result.returncode == 0