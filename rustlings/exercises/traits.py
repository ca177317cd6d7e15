"""Appending "Bar" to strings and to lists of strings."""

from __future__ import annotations

from functools import singledispatch


@singledispatch
def append_bar(value):
    """Append "Bar" to a string, or add a "Bar" item to a list of strings."""
    raise TypeError(f"cannot append Bar to {type(value).__name__}")


@append_bar.register
def _(value: str) -> str:
    return value + "Bar"


@append_bar.register
def _(value: list) -> list:
    return [*value, "Bar"]