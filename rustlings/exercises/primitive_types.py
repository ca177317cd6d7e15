"""Characters, arrays, slices and tuples."""

from __future__ import annotations

from collections.abc import Sequence


def classify_char(ch: str) -> str:
    """Say whether a single character is alphabetic, numeric or neither."""
    if len(ch) != 1:
        raise ValueError(f"expected a single character, got {ch!r}")
    if ch.isalpha():
        return "Alphabetical!"
    if ch.isnumeric():
        return "Numerical!"
    return "Neither alphabetic nor numeric!"


def describe_array(values: Sequence[object]) -> str:
    """Describe an array: its first hundred elements if big, a shrug otherwise."""
    if len(values) < 100:
        return "Meh, I eat arrays like that for breakfast."
    lines = [f"Wow, that's a big array! {len(values)}"]
    lines.extend(f"{value} in pos {i}" for i, value in enumerate(values[:100]))
    return "\n".join(lines)


def nice_slice(values: Sequence[object]) -> Sequence[object]:
    """Return the elements at positions 1 to 3."""
    if len(values) < 4:
        raise IndexError(f"range end index 4 out of range for length {len(values)}")
    return values[1:4]


def second(values: Sequence[object]) -> object:
    """Return the second element."""
    return values[1]