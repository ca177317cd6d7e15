"""Conditional expressions."""

from __future__ import annotations


def bigger(a: int, b: int) -> int:
    """Return the larger of two numbers."""
    if a < b:
        return b
    return a


def fizz_if_foo(fizzish: str) -> str:
    """Map "fizz" to "foo", "fuzz" to "bar" and anything else to "baz"."""
    if fizzish == "fizz":
        return "foo"
    if fizzish == "fuzz":
        return "bar"
    return "baz"