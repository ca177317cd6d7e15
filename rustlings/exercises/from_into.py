"""Infallible conversion of a "name,age" string into a Person."""

from __future__ import annotations

import re
from dataclasses import dataclass

_AGE = re.compile(r"\+?[0-9]+")
_USIZE_MAX = 2**64 - 1


@dataclass(frozen=True)
class Person:
    """A named person of a given age."""

    name: str
    age: int


def default_person() -> Person:
    """Return the fallback person: John, aged 30."""
    return Person(name="John", age=30)


def _parse_age(text: str) -> int | None:
    if not _AGE.fullmatch(text):
        return None
    value = int(text)
    return value if value <= _USIZE_MAX else None


def person_from(s: str) -> Person:
    """Build a Person from "name,age", falling back to the default on any problem."""
    if not s:
        return default_person()
    fields = s.split(",")
    if len(fields) != 2:
        return default_person()
    name, age_text = fields
    if not name:
        return default_person()
    age = _parse_age(age_text)
    if age is None:
        return default_person()
    return Person(name=name, age=age)