"""Returning owned strings and comparing them."""

from __future__ import annotations

_COLOR_WORDS = frozenset({"green", "blue", "red"})


def current_favorite_color() -> str:
    """Return the current favourite colour."""
    return "Blue"


def is_a_color_word(attempt: str) -> bool:
    """Return True for one of the known colour words."""
    return attempt in _COLOR_WORDS