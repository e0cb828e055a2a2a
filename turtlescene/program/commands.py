"""
Turtle program commands.

The closed set of command variants produced by the parser and consumed by
the interpreter. Commands are immutable once parsed; a Program is simply
an ordered list of them.
"""

from dataclasses import dataclass

from turtlescene.config import DEFAULT_TURN_DEG

from .registry import ArgKind, register_keyword


@dataclass(frozen=True)
class Command:
    """Base class for all turtle commands."""

    @property
    def name(self) -> str:
        return type(self).__name__


@register_keyword("reset")
@dataclass(frozen=True)
class Reset(Command):
    pass


@register_keyword("penup", "pu")
@dataclass(frozen=True)
class PenUp(Command):
    pass


@register_keyword("pendown", "pd")
@dataclass(frozen=True)
class PenDown(Command):
    pass


@register_keyword("turn", args=ArgKind.NUMBER)
@dataclass(frozen=True)
class Turn(Command):
    """Relative rotation; positive is counter-clockwise."""

    degrees: float


@register_keyword("direction", "dir", args=ArgKind.NUMBER)
@dataclass(frozen=True)
class Direction(Command):
    """Absolute heading in degrees."""

    degrees: float


@register_keyword("move", "forward", "fw", args=ArgKind.NUMBER)
@dataclass(frozen=True)
class Move(Command):
    distance: float


@register_keyword("pushloc")
@dataclass(frozen=True)
class PushLoc(Command):
    pass


@register_keyword("poploc")
@dataclass(frozen=True)
class PopLoc(Command):
    pass


@register_keyword("pushrot")
@dataclass(frozen=True)
class PushRot(Command):
    pass


@register_keyword("poprot")
@dataclass(frozen=True)
class PopRot(Command):
    pass


@register_keyword("go", args=ArgKind.POINT)
@dataclass(frozen=True)
class Go(Command):
    x: float
    y: float


@register_keyword("gox", args=ArgKind.NUMBER)
@dataclass(frozen=True)
class GoX(Command):
    x: float


@register_keyword("goy", args=ArgKind.NUMBER)
@dataclass(frozen=True)
class GoY(Command):
    y: float


@register_keyword("penwidth", "pw", args=ArgKind.NUMBER)
@dataclass(frozen=True)
class PenWidth(Command):
    width: float


@register_keyword("pencolor", "pc", args=ArgKind.COLOR)
@dataclass(frozen=True)
class PenColor(Command):
    """RGB pen color, each channel 0..255."""

    r: int
    g: int
    b: int

    @property
    def rgb(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)


# ----- Keyword aliases that build an existing command -----


@register_keyword("turnleft", "tl", args=ArgKind.OPTIONAL_NUMBER)
def turn_left(degrees: float | None = None) -> Turn:
    return Turn(DEFAULT_TURN_DEG if degrees is None else degrees)


@register_keyword("turnright", "tr", args=ArgKind.OPTIONAL_NUMBER)
def turn_right(degrees: float | None = None) -> Turn:
    return Turn(-(DEFAULT_TURN_DEG if degrees is None else degrees))


@register_keyword("backward", "bw", args=ArgKind.NUMBER)
def backward(distance: float) -> Move:
    return Move(-distance)


Program = list[Command]

__all__ = [
    "Command",
    "Program",
    "Reset",
    "PenUp",
    "PenDown",
    "Turn",
    "Direction",
    "Move",
    "PushLoc",
    "PopLoc",
    "PushRot",
    "PopRot",
    "Go",
    "GoX",
    "GoY",
    "PenWidth",
    "PenColor",
    "turn_left",
    "turn_right",
    "backward",
]
