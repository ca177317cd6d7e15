"""Hash maps of fruit and simple vector operations."""

from __future__ import annotations

from collections.abc import Iterable, MutableMapping
from enum import Enum


class Fruit(Enum):
    """Kinds of fruit that can go in a basket."""

    APPLE = "apple"
    BANANA = "banana"
    MANGO = "mango"
    LYCHEE = "lychee"
    PINEAPPLE = "pineapple"


def fruit_basket() -> dict[str, int]:
    """Return a basket of at least three kinds and five pieces of fruit."""
    return {"banana": 2, "apple": 6, "mango": 3}


def fill_fruit_basket(basket: MutableMapping[Fruit, int]) -> None:
    """Add bananas and pineapples to the basket in place."""
    for fruit in Fruit:
        if fruit is Fruit.BANANA:
            basket[fruit] = 12
        elif fruit is Fruit.PINEAPPLE:
            basket[fruit] = 6


def array_and_vec() -> tuple[tuple[int, ...], list[int]]:
    """Return a fixed array and a list holding the same elements."""
    array = (10, 20, 30, 40)
    return array, list(array)


def vec_loop(values: Iterable[int]) -> list[int]:
    """Return each value multiplied by two."""
    return [value * 2 for value in values]