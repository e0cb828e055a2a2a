"""
Turtle State Management

Tracks the cursor state evolved by the interpreter:
- Position and heading
- Pen state (up/down, width, color)
- Location and rotation stacks for pushloc/poploc and pushrot/poprot
"""

from dataclasses import dataclass, field

from turtlescene.config import DEFAULT_PEN_COLOR, DEFAULT_PEN_WIDTH


def normalize_heading(degrees: float) -> float:
    """
    Wrap an angle into the half-open range [0, 360)

    Args:
        degrees: Any finite angle, negative values included

    Returns:
        Equivalent heading in [0, 360)
    """
    heading = ((degrees % 360.0) + 360.0) % 360.0
    # Float rounding can land exactly on 360 for tiny negative inputs
    if heading >= 360.0:
        heading = 0.0
    return heading


@dataclass
class TurtleState:
    """Mutable turtle state owned by a single interpreter run"""

    x: float = 0.0
    y: float = 0.0
    heading: float = 0.0  # degrees, 0 = +x axis, counter-clockwise
    pen_down: bool = False
    pen_width: float = DEFAULT_PEN_WIDTH
    pen_color: tuple[int, int, int] = DEFAULT_PEN_COLOR
    locations: list[tuple[float, float]] = field(default_factory=list)
    rotations: list[float] = field(default_factory=list)

    @property
    def position(self) -> tuple[float, float]:
        return (self.x, self.y)

    @position.setter
    def position(self, value: tuple[float, float]) -> None:
        self.x, self.y = value

    def turn(self, delta: float) -> None:
        self.heading = normalize_heading(self.heading + delta)

    def set_direction(self, degrees: float) -> None:
        self.heading = normalize_heading(degrees)

    def push_location(self) -> None:
        self.locations.append(self.position)

    def pop_location(self) -> bool:
        """Restore the last pushed position; returns False on an empty stack"""
        if not self.locations:
            return False
        self.position = self.locations.pop()
        return True

    def push_rotation(self) -> None:
        self.rotations.append(self.heading)

    def pop_rotation(self) -> bool:
        """Restore the last pushed heading; returns False on an empty stack"""
        if not self.rotations:
            return False
        self.heading = self.rotations.pop()
        return True
