"""Answers for the move semantics and option drills."""

from __future__ import annotations

from collections.abc import Iterable

_FILL = (22, 44, 66)


def fill_vec(values: Iterable[int]) -> list[int]:
    """Return a new list holding values followed by 22, 44 and 66.

    The argument is left untouched, so the caller may keep using it.
    """
    return [*values, *_FILL]


def print_number(maybe_number: int | None) -> str:
    """Print and return the number, raising ValueError when there is none."""
    if maybe_number is None:
        raise ValueError("called print_number without a number")
    line = f"printing: {maybe_number}"
    print(line)
    return line


def number_table() -> list[int]:
    """Five numbers computed from their positions."""
    return [((i * 1235) + 2) // (4 * 16) for i in range(5)]


def pop_all(values: list[int | None]) -> list[int]:
    """Pop every value off the end of the list, printing each; return them in pop order.

    Raises ValueError if a popped slot holds no value.
    """
    popped = []
    while values:
        integer = values.pop()
        if integer is None:
            raise ValueError("popped an empty slot")
        print(f"current value: {integer}")
        popped.append(integer)
    return popped