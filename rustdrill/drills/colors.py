"""Answer for the fallible conversion drill: building RGB colours."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

MIN = 0
MAX = 255


class ColorError(ValueError):
    """Values could not be turned into a colour."""


def _channel(value: int) -> int:
    if not MIN <= value <= MAX:
        raise ColorError(
            f"Color value is out of range! Expected {MIN}..={MAX}, but got {value}"
        )
    return value


@dataclass(frozen=True)
class Color:
    """A colour with red, green and blue channels in 0..=255."""

    red: int
    green: int
    blue: int

    @classmethod
    def from_rgb(cls, red: int, green: int, blue: int) -> Color:
        """Build a colour from three channel values, raising ColorError if any is out of range."""
        return cls(red=_channel(red), green=_channel(green), blue=_channel(blue))

    @classmethod
    def from_values(cls, values: Iterable[int]) -> Color:
        """Build a colour from exactly three values, raising ColorError otherwise."""
        items = tuple(values)
        if len(items) != 3:
            raise ColorError(f"expected exactly 3 values, got {len(items)}")
        return cls.from_rgb(*items)