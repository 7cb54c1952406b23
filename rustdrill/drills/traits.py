"""Answers for the traits drills: appending "Bar" to strings and lists."""

from __future__ import annotations

from functools import singledispatch

_BAR = "Bar"


@singledispatch
def append_bar(value):
    """Append "Bar" to a string, or add it as a new item to a list of strings."""
    raise TypeError(f"cannot append {_BAR!r} to {type(value).__name__}")


@append_bar.register
def _(value: str) -> str:
    return value + _BAR


@append_bar.register
def _(value: list) -> list:
    return [*value, _BAR]