"""Answers for the primitive types, variables and clippy drills."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")

NUMBER = 3


def _display(value: object) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def greeting(is_morning: bool, is_evening: bool) -> list[str]:
    """The greetings printed for the given time of day."""
    lines = []
    if is_morning:
        lines.append("Good morning!")
    if not is_evening:
        lines.append("Good evening!")
    return lines


def classify_character(character: str) -> str:
    """Describe a single character as alphabetical, numerical or neither."""
    if len(character) != 1:
        raise ValueError(f"expected a single character, got {character!r}")
    if character.isalpha():
        return "Alphabetical!"
    if character.isnumeric():
        return "Numerical!"
    return "Neither alphabetic nor numeric!"


def describe_array(values: Sequence[object]) -> str:
    """Comment on the size of a sequence."""
    if len(values) >= 100:
        return "Wow, that's a big array!"
    return "Meh, I eat arrays like that for breakfast."


def nice_slice(values: Sequence[T]) -> list[T]:
    """The elements at positions 1 to 3, raising IndexError if there are too few."""
    if len(values) < 4:
        raise IndexError(f"slice 1..4 out of range for length {len(values)}")
    return list(values[1:4])


def describe_cat(cat: tuple[str, float]) -> str:
    """Describe a (name, age) pair."""
    name, age = cat
    return f"{name} is {_display(age)} years old."


def second(numbers: Sequence[T]) -> T:
    """The second element of a sequence."""
    return numbers[1]


def describe_ten(x: int) -> str:
    """Say whether x is ten."""
    return "Ten!" if x == 10 else "Not ten!"


def values_differ(x: float, y: float) -> bool:
    """Whether two floating point values differ at all."""
    return abs(y - x) > 0.0


def add_optional(total: int, option: int | None) -> int:
    """Add the optional value to total when there is one."""
    if option is not None:
        total += option
    return total