"""Answers for the macros and modules drills."""

from __future__ import annotations

FRUIT = "Pear"
VEGGIE = "Cucumber"


def my_macro(*args: object) -> str:
    """Print and return a message; with one argument the message includes it."""
    if not args:
        line = "Check out my macro!"
    elif len(args) == 1:
        line = f"Look at this other macro: {args[0]}"
    else:
        raise TypeError(f"my_macro takes at most one argument, got {len(args)}")
    print(line)
    return line


def make_sausage() -> str:
    """Print and return the sausage line."""
    line = "sausage!"
    print(line)
    return line


def favorite_snacks() -> str:
    """Print and return the favourite fruit and vegetable."""
    line = f"favorite snacks: {FRUIT} and {VEGGIE}"
    print(line)
    return line