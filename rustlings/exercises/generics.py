"""Generic containers and report cards with numeric or alphabetic grades."""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import Decimal
from typing import Generic, TypeVar

T = TypeVar("T")


def shopping_list() -> list[str]:
    """Return a shopping list holding milk."""
    items: list[str] = []
    items.append("milk")
    return items


@dataclass
class Wrapper(Generic[T]):
    """Holds a single value of any type."""

    value: T


def _format_float(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    return format(Decimal(repr(value)).normalize(), "f")


def print_grade(grade: str | float) -> str:
    """Render a textual or numeric grade."""
    if isinstance(grade, str):
        return grade
    if isinstance(grade, bool):
        raise TypeError(f"cannot print a grade of type {type(grade).__name__}")
    if isinstance(grade, float):
        return _format_float(grade)
    if isinstance(grade, int):
        return str(grade)
    raise TypeError(f"cannot print a grade of type {type(grade).__name__}")


@dataclass
class ReportCard(Generic[T]):
    """A student's report card with a grade of any printable kind."""

    grade: T
    student_name: str
    student_age: int

    def __post_init__(self) -> None:
        print_grade(self.grade)
        if not 0 <= self.student_age <= 255:
            raise ValueError(f"student age out of range: {self.student_age}")

    def print(self) -> str:
        """Return the report card as one line of text."""
        return (
            f"{self.student_name} ({self.student_age}) - "
            f"achieved a grade of {print_grade(self.grade)}"
        )