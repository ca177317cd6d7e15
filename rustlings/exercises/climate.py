"""Parsing "city,year,temperature" records with a descriptive error type."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

_UNSIGNED = re.compile(r"\+?[0-9]+")
_FLOAT = re.compile(
    r"[+-]?(?:inf|infinity|nan|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)",
    re.IGNORECASE,
)
_U32_MAX = 2**32 - 1


@dataclass(frozen=True)
class Climate:
    """A city's temperature in a given year."""

    city: str
    year: int
    temp: float


class ParseClimateError(ValueError):
    """Raised when a climate record cannot be parsed.

    ``source`` holds the underlying number parsing error, if any.
    """

    class Kind(Enum):
        EMPTY = "empty"
        BAD_LEN = "bad_len"
        NO_CITY = "no_city"
        PARSE_INT = "parse_int"
        PARSE_FLOAT = "parse_float"

    def __init__(
        self, kind: "ParseClimateError.Kind", source: ValueError | None = None
    ) -> None:
        self.kind = kind
        self.source = source
        super().__init__(self._describe())

    def _describe(self) -> str:
        kind = ParseClimateError.Kind
        if self.kind is kind.EMPTY:
            return "empty input"
        if self.kind is kind.BAD_LEN:
            return "incorrect number of fields"
        if self.kind is kind.NO_CITY:
            return "no city name"
        if self.kind is kind.PARSE_INT:
            return f"error parsing year: {self.source}"
        return f"error parsing temperature: {self.source}"

    def __str__(self) -> str:
        return self._describe()


def _parse_u32(text: str) -> int:
    if not text:
        raise ValueError("cannot parse integer from empty string")
    if not _UNSIGNED.fullmatch(text):
        raise ValueError("invalid digit found in string")
    value = int(text)
    if value > _U32_MAX:
        raise ValueError("number too large to fit in target type")
    return value


def _parse_float(text: str) -> float:
    if not text:
        raise ValueError("cannot parse float from empty string")
    if not _FLOAT.fullmatch(text):
        raise ValueError("invalid float literal")
    return float(text)


def parse_climate(s: str) -> Climate:
    """Parse "city,year,temp"; raise ParseClimateError on any problem."""
    if not s:
        raise ParseClimateError(ParseClimateError.Kind.EMPTY)
    fields = s.split(",")
    if len(fields) != 3:
        raise ParseClimateError(ParseClimateError.Kind.BAD_LEN)
    city, year_text, temp_text = fields
    if not city:
        raise ParseClimateError(ParseClimateError.Kind.NO_CITY)
    try:
        year = _parse_u32(year_text)
    except ValueError as err:
        raise ParseClimateError(ParseClimateError.Kind.PARSE_INT, err) from err
    try:
        temp = _parse_float(temp_text)
    except ValueError as err:
        raise ParseClimateError(ParseClimateError.Kind.PARSE_FLOAT, err) from err
    return Climate(city=city, year=year, temp=temp)