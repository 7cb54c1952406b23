"""Answers for the error handling drills: nametags, token costs and validated integers."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TextIO

_SIGNED = re.compile(r"[+-]?[0-9]+")
_PROCESSING_FEE = 1
_COST_PER_ITEM = 5


class CreationError(ValueError):
    """A value could not be turned into a positive, nonzero integer."""


class NegativeError(CreationError):
    """The value was negative."""

    def __init__(self, message: str = "Number is negative") -> None:
        super().__init__(message)


class ZeroError(CreationError):
    """The value was zero."""

    def __init__(self, message: str = "Number is zero") -> None:
        super().__init__(message)


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    """An integer that is strictly greater than zero."""

    value: int

    def __post_init__(self) -> None:
        if self.value == 0:
            raise ZeroError()
        if self.value < 0:
            raise NegativeError()


def _parse_int(text: str, bits: int) -> int:
    """Parse a signed integer of the given width, with the usual error messages."""
    if not text:
        raise ValueError("cannot parse integer from empty string")
    if not _SIGNED.fullmatch(text):
        raise ValueError("invalid digit found in string")
    value = int(text)
    limit = 2 ** (bits - 1)
    if value >= limit:
        raise ValueError("number too large to fit in target type")
    if value < -limit:
        raise ValueError("number too small to fit in target type")
    return value


def generate_nametag_text(name: str) -> str:
    """Return the nametag text for name, raising ValueError if it is empty."""
    if not name:
        raise ValueError("`name` was empty; it must be nonempty.")
    return f"Hi! My name is {name}"


def total_cost(item_quantity: str) -> int:
    """Tokens needed to buy the typed quantity of items, including the processing fee."""
    quantity = _parse_int(item_quantity, 32)
    cost = quantity * _COST_PER_ITEM + _PROCESSING_FEE
    if not -(2**31) <= cost < 2**31:
        raise OverflowError("total cost does not fit in a 32-bit integer")
    return cost


def remaining_tokens(tokens: int, item_quantity: str) -> int:
    """Tokens left after buying; unreadable quantities cost nothing.

    Raises ValueError when the purchase costs more than the tokens available.
    """
    try:
        cost = total_cost(item_quantity)
    except (ValueError, OverflowError):
        cost = 0
    if cost > tokens:
        raise ValueError("You can't afford that many!")
    return tokens - cost


def read_and_validate(stream: TextIO) -> PositiveNonzeroInteger:
    """Read one line from stream and turn it into a positive, nonzero integer.

    Reading errors propagate as OSError, unparsable input as ValueError and
    invalid numbers as CreationError.
    """
    line = stream.readline()
    return PositiveNonzeroInteger(_parse_int(line.strip(), 64))