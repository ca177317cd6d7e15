"""Quiz exercises: variables, functions, strings, tests and macros."""

from __future__ import annotations


def calculate_apple_price(apples: int) -> int:
    """Two per apple, or one per apple for orders of more than 40."""
    return 2 * apples if apples <= 40 else apples


def string_slice(arg: str) -> None:
    """Print a borrowed string."""
    print(arg)


def string(arg: str) -> None:
    """Print an owned string."""
    print(arg)


def times_two(num: int) -> int:
    """Double a number."""
    return num * 2


def my_macro(*args: object) -> str | None:
    """Print "Hello" with no argument; return "Hello <x>" for one argument."""
    if not args:
        print("Hello")
        return None
    if len(args) == 1:
        return f"Hello {args[0]}"
    raise TypeError(f"my_macro takes at most one argument, got {len(args)}")