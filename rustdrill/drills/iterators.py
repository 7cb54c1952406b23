"""Answers for the iterator drills: capitalising, dividing, factorials and progress counts."""

from __future__ import annotations

import enum
import math
from collections.abc import Iterable, Iterator, Mapping

_U64_MAX = 2**64 - 1


def favorite_fruits() -> Iterator[str]:
    """An iterator over the favourite fruits, in order."""
    return iter(["banana", "custard apple", "avocado", "peach", "raspberry"])


def capitalize_first(text: str) -> str:
    """Return text with its first character in upper case."""
    if not text:
        return ""
    return text[0].upper() + text[1:]


def capitalize_words_vector(words: Iterable[str]) -> list[str]:
    """Capitalise every non-blank word."""
    return [capitalize_first(word) for word in words if word.strip()]


def capitalize_words_string(words: Iterable[str]) -> str:
    """Capitalise every non-blank word and join them with single spaces."""
    return " ".join(capitalize_words_vector(words))


class DivisionError(ArithmeticError):
    """A division could not produce a whole number."""


class NotDivisibleError(DivisionError):
    """The dividend is not evenly divisible by the divisor."""

    def __init__(self, dividend: int, divisor: int) -> None:
        super().__init__(f"{dividend} is not divisible by {divisor}")
        self.dividend = dividend
        self.divisor = divisor


class DivideByZeroError(DivisionError, ZeroDivisionError):
    """The divisor was zero."""

    def __init__(self) -> None:
        super().__init__("division by zero")


def divide(a: int, b: int) -> int:
    """Divide a by b when b divides it evenly; raise a DivisionError otherwise."""
    if b == 0:
        raise DivideByZeroError()
    if a % b != 0:
        raise NotDivisibleError(dividend=a, divisor=b)
    return a // b


_NUMBERS = (27, 297, 38502, 81)
_DIVISOR = 27


def result_with_list() -> list[int]:
    """Divide each number by 27, raising at the first one that does not divide."""
    return [divide(n, _DIVISOR) for n in _NUMBERS]


def _attempt(a: int, b: int) -> int | DivisionError:
    try:
        return divide(a, b)
    except DivisionError as error:
        return error


def list_of_results() -> list[int | DivisionError]:
    """Divide each number by 27, keeping any error in place of its result."""
    return [_attempt(n, _DIVISOR) for n in _NUMBERS]


def factorial(num: int) -> int:
    """The factorial of num, which must fit in an unsigned 64-bit integer."""
    if num < 0:
        raise ValueError("factorial is not defined for negative numbers")
    result = math.prod(range(1, num + 1))
    if result > _U64_MAX:
        raise OverflowError(f"factorial of {num} does not fit in 64 bits")
    return result


class Progress(enum.Enum):
    """How far an exercise has got."""

    NONE = "none"
    SOME = "some"
    COMPLETE = "complete"


def count_for(progress_map: Mapping[str, Progress], value: Progress) -> int:
    """Count the exercises with the given progress using an explicit loop."""
    count = 0
    for progress in progress_map.values():
        if progress == value:
            count += 1
    return count


def count_iterator(progress_map: Mapping[str, Progress], value: Progress) -> int:
    """Count the exercises with the given progress."""
    return sum(1 for progress in progress_map.values() if progress == value)


def count_collection_for(collection: Iterable[Mapping[str, Progress]], value: Progress) -> int:
    """Count across several maps using explicit loops."""
    count = 0
    for progress_map in collection:
        for progress in progress_map.values():
            if progress == value:
                count += 1
    return count


def count_collection_iterator(
    collection: Iterable[Mapping[str, Progress]], value: Progress
) -> int:
    """Count the exercises with the given progress across several maps."""
    return sum(count_iterator(progress_map, value) for progress_map in collection)