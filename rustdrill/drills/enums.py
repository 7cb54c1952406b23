"""Answers for the enums drills: messages and the state they change."""

from __future__ import annotations

from dataclasses import dataclass, field


class Message:
    """Base of every message a State can process."""


@dataclass(frozen=True)
class Point:
    """A position on the board."""

    x: int
    y: int


@dataclass(frozen=True)
class ChangeColor(Message):
    """Set the colour to an RGB triple."""

    color: tuple[int, int, int]


@dataclass(frozen=True)
class Echo(Message):
    """Carry a piece of text."""

    text: str


@dataclass(frozen=True)
class Move(Message):
    """Move to a new position."""

    point: Point


@dataclass(frozen=True)
class Quit(Message):
    """Ask to stop."""


@dataclass
class State:
    """Colour, position and quit flag changed by messages."""

    color: tuple[int, int, int] = (0, 0, 0)
    position: Point = field(default_factory=lambda: Point(0, 0))
    has_quit: bool = False

    def change_color(self, color: tuple[int, int, int]) -> None:
        """Set the current colour."""
        self.color = color

    def quit(self) -> None:
        """Mark the state as quit."""
        self.has_quit = True

    def echo(self, text: str) -> None:
        """Print the text."""
        print(text)

    def move_position(self, point: Point) -> None:
        """Move to the given point."""
        self.position = point

    def process(self, message: Message) -> None:
        """Apply a message to the state; Echo messages leave it unchanged."""
        match message:
            case ChangeColor(color=color):
                self.change_color(color)
            case Move(point=point):
                self.move_position(point)
            case Quit():
                self.quit()
            case Echo():
                pass
            case _:
                raise TypeError(f"not a message: {message!r}")