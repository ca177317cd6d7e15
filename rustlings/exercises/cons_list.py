"""A recursive cons list."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Nil:
    """The end of a cons list."""


@dataclass(frozen=True)
class Cons:
    """A list cell holding a value and the rest of the list."""

    value: int
    next: "List"


List = Union[Cons, Nil]


def create_empty_list() -> List:
    """Return the empty list."""
    return Nil()


def create_non_empty_list() -> List:
    """Return a one-element list holding 13."""
    return Cons(13, create_empty_list())