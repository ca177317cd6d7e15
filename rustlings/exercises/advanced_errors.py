"""Parsing positive non-zero integers with a wrapping error type."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

_SIGNED = re.compile(r"[+-]?[0-9]+")
_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1


class CreationError(ValueError):
    """Raised when a value is not a positive non-zero integer."""

    class Kind(Enum):
        NEGATIVE = "number is negative"
        ZERO = "number is zero"

    def __init__(self, kind: "CreationError.Kind") -> None:
        super().__init__(kind.value)
        self.kind = kind


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    """An integer greater than zero."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise CreationError(CreationError.Kind.NEGATIVE)
        if self.value == 0:
            raise CreationError(CreationError.Kind.ZERO)


class ParsePosNonzeroError(ValueError):
    """Raised when a string does not hold a positive non-zero integer.

    ``source`` is either the CreationError or the integer parsing error.
    """

    def __init__(self, source: ValueError) -> None:
        super().__init__(str(source))
        self.source = source


def _parse_i64(text: str) -> int:
    if not text:
        raise ValueError("cannot parse integer from empty string")
    if not _SIGNED.fullmatch(text):
        raise ValueError("invalid digit found in string")
    value = int(text)
    if value > _I64_MAX:
        raise ValueError("number too large to fit in target type")
    if value < _I64_MIN:
        raise ValueError("number too small to fit in target type")
    return value


def parse_positive_nonzero(s: str) -> PositiveNonzeroInteger:
    """Parse a string into a PositiveNonzeroInteger or raise ParsePosNonzeroError."""
    try:
        value = _parse_i64(s)
    except ValueError as err:
        raise ParsePosNonzeroError(err) from err
    try:
        return PositiveNonzeroInteger(value)
    except CreationError as err:
        raise ParsePosNonzeroError(err) from err