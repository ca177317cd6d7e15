"""Working with optional values."""

from __future__ import annotations

from collections.abc import Iterator


def describe_number(maybe_number: int | None) -> str:
    """Describe a number, or its absence."""
    if maybe_number is None:
        return "No number supplied"
    return f"printing: {maybe_number}"


def optional_numbers() -> list[int | None]:
    """Return five computed numbers with the third left empty."""
    return [None if i == 2 else (i * 1235 + 2) // (4 * 16) for i in range(5)]


def drain_present(values: list[int | None]) -> Iterator[int]:
    """Pop values from the end of the list, yielding only those present."""
    while values:
        item = values.pop()
        if item is not None:
            yield item