"""Messages as tagged variants and a state machine that processes them."""

from __future__ import annotations

from dataclasses import dataclass, field


def _byte(name: str, value: int) -> None:
    if not 0 <= value <= 255:
        raise ValueError(f"{name} must be in 0..=255, got {value}")


@dataclass(frozen=True)
class Point:
    """A position with byte-sized coordinates."""

    x: int
    y: int

    def __post_init__(self) -> None:
        _byte("x", self.x)
        _byte("y", self.y)


@dataclass(frozen=True)
class Move:
    point: Point


@dataclass(frozen=True)
class Echo:
    text: str


@dataclass(frozen=True)
class ChangeColor:
    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        _byte("red", self.red)
        _byte("green", self.green)
        _byte("blue", self.blue)


@dataclass(frozen=True)
class Quit:
    pass


Message = Move | Echo | ChangeColor | Quit


@dataclass
class State:
    """Colour, position and whether a quit was requested."""

    color: tuple[int, int, int] = (0, 0, 0)
    position: Point = field(default_factory=lambda: Point(0, 0))
    quit_requested: bool = False

    def change_color(self, color: tuple[int, int, int]) -> None:
        self.color = color

    def quit(self) -> None:
        self.quit_requested = True

    def echo(self, text: str) -> None:
        print(text)

    def move_position(self, point: Point) -> None:
        self.position = point

    def process(self, message: Message) -> None:
        """Apply one message to the state."""
        match message:
            case Move(point=point):
                self.move_position(point)
            case Echo(text=text):
                self.echo(text)
            case ChangeColor(red=red, green=green, blue=blue):
                self.change_color((red, green, blue))
            case Quit():
                self.quit()
            case _:
                raise TypeError(f"unknown message {message!r}")