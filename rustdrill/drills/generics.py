"""Answers for the generics drills: lists, wrappers and report cards."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


def shopping_list() -> list[str]:
    """A shopping list with milk on it."""
    items: list[str] = []
    items.append("milk")
    return items


@dataclass(frozen=True)
class Wrapper(Generic[T]):
    """Holds a single value of any type."""

    value: T


@dataclass(frozen=True)
class ReportCard(Generic[T]):
    """A student's report card with a numeric or alphabetic grade."""

    grade: T
    student_name: str
    student_age: int

    def print(self) -> str:
        """The report card as one line of text."""
        return (
            f"{self.student_name} ({self.student_age}) - achieved a grade of {self.grade}"
        )