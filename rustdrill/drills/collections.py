"""Answers for the collections drills: fruit baskets, arrays and doubled lists."""

from __future__ import annotations

import enum
from collections.abc import Iterable


class Fruit(enum.Enum):
    """Kinds of fruit that may go in a basket."""

    APPLE = "apple"
    BANANA = "banana"
    MANGO = "mango"
    LYCHEE = "lychee"
    PINEAPPLE = "pineapple"


def fruit_basket() -> dict[str, int]:
    """A basket holding at least three kinds and five pieces of fruit."""
    return {"banana": 2, "apple": 2, "mango": 10}


def fill_basket(basket: dict[Fruit, int]) -> None:
    """Add one of every kind of fruit not already in the basket, leaving the rest untouched."""
    for fruit in Fruit:
        basket.setdefault(fruit, 1)


def array_and_vec() -> tuple[tuple[int, ...], list[int]]:
    """A fixed tuple and a list holding the same elements."""
    a = (10, 20, 30, 40)
    v = [10, 20, 30, 40]
    return a, v


def vec_loop(values: Iterable[int]) -> list[int]:
    """Return every value multiplied by two."""
    return [value * 2 for value in values]