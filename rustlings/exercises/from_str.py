"""Fallible parsing of a "name,age" string into a Person."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

_DIGITS = re.compile(r"\+?[0-9]+")
_USIZE_MAX = 2**64 - 1


@dataclass(frozen=True)
class Person:
    """A named person of a given age."""

    name: str
    age: int


class ParsePersonError(ValueError):
    """Raised when a string cannot be parsed into a Person."""

    class Kind(Enum):
        EMPTY = "empty input"
        BAD_LEN = "incorrect number of fields"
        NO_NAME = "no name"
        PARSE_INT = "error parsing age"

    def __init__(self, kind: "ParsePersonError.Kind", detail: str | None = None) -> None:
        super().__init__(detail if detail is not None else kind.value)
        self.kind = kind


def _parse_usize(text: str) -> int:
    if not text:
        raise ValueError("cannot parse integer from empty string")
    if not _DIGITS.fullmatch(text):
        raise ValueError("invalid digit found in string")
    value = int(text)
    if value > _USIZE_MAX:
        raise ValueError("number too large to fit in target type")
    return value


def parse_person(s: str) -> Person:
    """Parse "name,age"; raise ParsePersonError describing what went wrong."""
    if not s:
        raise ParsePersonError(ParsePersonError.Kind.EMPTY)
    fields = s.split(",")
    if len(fields) != 2:
        raise ParsePersonError(ParsePersonError.Kind.BAD_LEN)
    name, age_text = fields
    if not name:
        raise ParsePersonError(ParsePersonError.Kind.NO_NAME)
    try:
        age = _parse_usize(age_text)
    except ValueError as err:
        raise ParsePersonError(ParsePersonError.Kind.PARSE_INT, str(err)) from err
    return Person(name=name, age=age)