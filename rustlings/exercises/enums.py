"""Messages as tagged variants and a state machine that processes them."""

from __future__ import annotations

from dataclasses import dataclass, field


def _check_u8(value: int, what: str) -> int:
    if not 0 <= value <= 255:
        raise ValueError(f"{what} out of the 0..=255 range: {value}")
    return value


@dataclass(frozen=True)
class Point:
    """A position with byte-sized coordinates."""

    x: int
    y: int

    def __post_init__(self) -> None:
        _check_u8(self.x, "x")
        _check_u8(self.y, "y")


@dataclass(frozen=True)
class Quit:
    """Ask the state to quit."""


@dataclass(frozen=True)
class Echo:
    """Print a message."""

    text: str


@dataclass(frozen=True)
class Move:
    """Move to a new position."""

    point: Point


@dataclass(frozen=True)
class ChangeColor:
    """Change the current colour to an RGB triple."""

    color: tuple[int, int, int]

    def __post_init__(self) -> None:
        if len(self.color) != 3:
            raise ValueError(f"a colour needs three channels, got {len(self.color)}")
        for channel in self.color:
            _check_u8(channel, "colour channel")


Message = Quit | Echo | Move | ChangeColor


@dataclass
class State:
    """Colour, position and quit flag updated by processing messages."""

    color: tuple[int, int, int] = (0, 0, 0)
    position: Point = field(default_factory=lambda: Point(0, 0))
    quit: bool = False

    def process(self, message: Message) -> None:
        """Apply one message to the state."""
        match message:
            case Quit():
                self.quit = True
            case Move(point=point):
                self.position = point
            case Echo(text=text):
                print(f"The message is {text}")
            case ChangeColor(color=color):
                self.color = tuple(color)
            case _:
                raise TypeError(f"unknown message: {message!r}")