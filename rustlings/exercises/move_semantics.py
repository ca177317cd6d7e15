"""Filling vectors that are handed over to, or created by, a function."""

from __future__ import annotations

from collections.abc import Iterable

_FILL = (22, 44, 66)


def fill_vec(values: Iterable[int]) -> list[int]:
    """Return a new list holding the given values followed by 22, 44 and 66."""
    return [*values, *_FILL]


def new_filled_vec() -> list[int]:
    """Create and fill a fresh list."""
    return fill_vec(())