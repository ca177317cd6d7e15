"""Iterating over collections, capitalising words, dividing and counting."""

from __future__ import annotations

import operator
from collections.abc import Iterable, Iterator, Mapping
from enum import Enum

FAVORITE_FRUITS = ("banana", "custard apple", "avocado", "peach", "raspberry")

_CAPITALS = {"h": "H", "w": "W"}
_U64_MAX = 2**64 - 1


def favorite_fruits() -> Iterator[str]:
    """Return an iterator over the favourite fruits, in order."""
    return iter(FAVORITE_FRUITS)


def capitalize_first(text: str) -> str:
    """Upper-case a leading "h" or "w"; any other first character becomes a space."""
    if not text:
        return ""
    return _CAPITALS.get(text[0], " ") + text[1:]


def capitalize_words_vector(words: Iterable[str]) -> list[str]:
    """Apply capitalize_first to every word."""
    return [capitalize_first(word) for word in words]


def capitalize_words_string(words: Iterable[str]) -> str:
    """Apply capitalize_first to every word and join the results."""
    return "".join(capitalize_first(word) for word in words)


class DivisionError(ArithmeticError):
    """Base class for division failures."""

    def _key(self) -> tuple:
        return ()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DivisionError):
            return NotImplemented
        return type(self) is type(other) and self._key() == other._key()

    def __hash__(self) -> int:
        return hash((type(self), self._key()))


class NotDivisibleError(DivisionError):
    """Raised when the dividend is not evenly divisible by the divisor."""

    def __init__(self, dividend: int, divisor: int) -> None:
        super().__init__(f"{dividend} is not evenly divisible by {divisor}")
        self.dividend = dividend
        self.divisor = divisor

    def _key(self) -> tuple:
        return (self.dividend, self.divisor)


class DivideByZeroError(DivisionError):
    """Raised when dividing by zero."""

    def __init__(self) -> None:
        super().__init__("division by zero")


def divide(a: int, b: int) -> int:
    """Divide a by b when it divides evenly; raise a DivisionError otherwise."""
    if b == 0:
        raise DivideByZeroError()
    if a == 0:
        return 0
    if b > a or a % b != 0:
        raise NotDivisibleError(a, b)
    return a // b


_NUMBERS = (27, 297, 38502, 81)
_DIVISOR = 27


def result_with_list() -> list[int]:
    """Divide each sample number by 27; the first failure is raised."""
    return [divide(n, _DIVISOR) for n in _NUMBERS]


def _try_divide(a: int, b: int) -> int | DivisionError:
    try:
        return divide(a, b)
    except DivisionError as err:
        return err


def list_of_results() -> list[int | DivisionError]:
    """Divide each sample number by 27, keeping each quotient or error."""
    return [_try_divide(n, _DIVISOR) for n in _NUMBERS]


def factorial(num: int) -> int:
    """Return num!, except that 0 maps to 0; limited to unsigned 64 bits."""
    if num < 0:
        raise ValueError(f"factorial of a negative number: {num}")
    if num <= 2:
        return num
    result = num
    for factor in range(2, num):
        result *= factor
        if result > _U64_MAX:
            raise OverflowError(f"factorial of {num} overflows 64 bits")
    return result


class Progress(Enum):
    """How far an exercise has progressed."""

    NONE = "none"
    SOME = "some"
    COMPLETE = "complete"


def count_for(progress_map: Mapping[str, Progress], value: Progress) -> int:
    """Count entries with the given progress using an explicit loop."""
    count = 0
    for progress in progress_map.values():
        if progress == value:
            count += 1
    return count


def count_iterator(progress_map: Mapping[str, Progress], value: Progress) -> int:
    """Count entries with the given progress."""
    return operator.countOf(progress_map.values(), value)


def count_collection_for(
    collection: Iterable[Mapping[str, Progress]], value: Progress
) -> int:
    """Count entries with the given progress across maps using explicit loops."""
    count = 0
    for progress_map in collection:
        for progress in progress_map.values():
            if progress == value:
                count += 1
    return count


def count_collection_iterator(
    collection: Iterable[Mapping[str, Progress]], value: Progress
) -> int:
    """Count entries with the given progress across several maps."""
    return sum(count_iterator(progress_map, value) for progress_map in collection)