"""
Directional frame primitives for command block layouts.

Axis, Direction, Orientation and Coordinate are small immutable value
types. Directions use Minecraft facing names (EAST is +X, UP is +Y,
SOUTH is +Z).

Usage:
    from cmdlayout.coordinate import Coordinate, Direction, Orientation
    orientation = Orientation.parse("+x+z+y")
    corner = Coordinate(0, 0, 0) + Direction.UP.delta
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Sequence, Union

import numpy as np


class Axis(Enum):
    X = "x"
    Y = "y"
    Z = "z"


class Direction(Enum):
    """One of the six signed axis directions."""

    EAST = (Axis.X, True)
    WEST = (Axis.X, False)
    UP = (Axis.Y, True)
    DOWN = (Axis.Y, False)
    SOUTH = (Axis.Z, True)
    NORTH = (Axis.Z, False)

    @property
    def axis(self) -> Axis:
        return self.value[0]

    @property
    def is_positive(self) -> bool:
        return self.value[1]

    @property
    def sign(self) -> int:
        return 1 if self.is_positive else -1

    @property
    def delta(self) -> "Coordinate":
        """Unit coordinate pointing in this direction."""
        return Coordinate().plus(self.sign, self.axis)

    @property
    def opposite(self) -> "Direction":
        return Direction.of(self.axis, not self.is_positive)

    @staticmethod
    def of(axis: Axis, positive: bool) -> "Direction":
        for direction in Direction:
            if direction.axis is axis and direction.is_positive == positive:
                return direction
        raise ValueError(f"No direction for axis {axis}")

    @staticmethod
    def from_delta(delta: "Coordinate") -> "Direction":
        """Return the direction of a unit step such as Coordinate(0, -1, 0)."""
        for direction in Direction:
            if direction.delta == delta:
                return direction
        raise ValueError(f"Not a unit step along one axis: {delta}")

    @staticmethod
    def parse(text: str) -> "Direction":
        """
        Parse a direction from a signed axis ('+x', '-z', 'y') or a facing
        name ('east', 'NORTH').
        """
        token = text.strip()
        by_name = token.upper()
        if by_name in Direction.__members__:
            return Direction[by_name]
        sign = True
        if token[:1] in ("+", "-"):
            sign = token[0] == "+"
            token = token[1:]
        try:
            axis = Axis(token.lower())
        except ValueError:
            raise ValueError(f"Invalid direction: {text!r}") from None
        return Direction.of(axis, sign)

    def __str__(self) -> str:
        return ("+" if self.is_positive else "-") + self.axis.value


@dataclass(frozen=True)
class Coordinate:
    """Immutable integer 3-vector."""

    x: int = 0
    y: int = 0
    z: int = 0

    @staticmethod
    def of(value: Union["Coordinate", Sequence[int], np.ndarray]) -> "Coordinate":
        """Build a Coordinate from a Coordinate or any sequence of three integers."""
        if isinstance(value, Coordinate):
            return value
        values = [int(v) for v in value]
        if len(values) != 3:
            raise ValueError(f"Expected three components, got {len(values)}")
        return Coordinate(*values)

    @staticmethod
    def parse(text: str) -> "Coordinate":
        """Parse 'x,y,z' or 'x y z'."""
        parts = text.replace(",", " ").split()
        try:
            return Coordinate.of(int(part) for part in parts)
        except ValueError:
            raise ValueError(f"Invalid coordinate: {text!r}") from None

    @staticmethod
    def minimum(a: "Coordinate", b: "Coordinate") -> "Coordinate":
        return Coordinate(min(a.x, b.x), min(a.y, b.y), min(a.z, b.z))

    @staticmethod
    def maximum(a: "Coordinate", b: "Coordinate") -> "Coordinate":
        return Coordinate(max(a.x, b.x), max(a.y, b.y), max(a.z, b.z))

    @staticmethod
    def uniform(value: int) -> "Coordinate":
        return Coordinate(value, value, value)

    def get(self, axis: Axis) -> int:
        return getattr(self, axis.value)

    def plus(self, value: int, axis: Axis) -> "Coordinate":
        """Return a copy with ``value`` added to the ``axis`` component."""
        components = {"x": self.x, "y": self.y, "z": self.z}
        components[axis.value] += value
        return Coordinate(**components)

    def manhattan(self, other: "Coordinate") -> int:
        return abs(self.x - other.x) + abs(self.y - other.y) + abs(self.z - other.z)

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=int)

    def to_list(self) -> list:
        return [self.x, self.y, self.z]

    def __add__(self, other: "Coordinate") -> "Coordinate":
        if not isinstance(other, Coordinate):
            return NotImplemented
        return Coordinate(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Coordinate") -> "Coordinate":
        if not isinstance(other, Coordinate):
            return NotImplemented
        return Coordinate(self.x - other.x, self.y - other.y, self.z - other.z)

    def __iter__(self):
        return iter((self.x, self.y, self.z))

    def __str__(self) -> str:
        return f"({self.x}, {self.y}, {self.z})"


@dataclass(frozen=True)
class Orientation:
    """
    Directional frame for a curve: the primary direction is traversed
    innermost, the tertiary direction outermost.
    """

    primary: Direction = Direction.EAST
    secondary: Direction = Direction.SOUTH
    tertiary: Direction = Direction.UP

    def __post_init__(self):
        for name in ("primary", "secondary", "tertiary"):
            if not isinstance(getattr(self, name), Direction):
                raise ValueError(f"{name} must be a Direction")
        axes = {self.primary.axis, self.secondary.axis, self.tertiary.axis}
        if len(axes) != 3:
            raise ValueError(
                f"Orientation directions must use three distinct axes: "
                f"{self.primary}, {self.secondary}, {self.tertiary}"
            )

    @staticmethod
    def parse(text: str) -> "Orientation":
        """
        Parse an orientation such as '+x+z+y', 'x,-y,z' or 'east south up'.

        Args:
            text: Three directions, in primary, secondary, tertiary order.

        Returns:
            The parsed Orientation.

        Raises:
            ValueError: If the text does not name three directions on distinct axes.
        """
        tokens = text.replace(",", " ").split()
        if len(tokens) == 1:
            tokens = _split_signed_axes(tokens[0])
        if len(tokens) != 3:
            raise ValueError(f"Invalid orientation: {text!r}")
        return Orientation(*(Direction.parse(token) for token in tokens))

    @property
    def directions(self) -> tuple:
        return (self.primary, self.secondary, self.tertiary)

    def __str__(self) -> str:
        return "".join(str(direction) for direction in self.directions)


def _split_signed_axes(text: str) -> Iterable[str]:
    """Split a compact '+x-z+y' string into per-axis tokens."""
    tokens = []
    current = ""
    for char in text:
        current += char
        if char.lower() in ("x", "y", "z"):
            tokens.append(current)
            current = ""
    if current:
        tokens.append(current)
    return tokens
