from dataclasses import dataclass
from typing import List, Optional
from .vector import Vector


RING = 8


class InvalidDirection(ValueError):
    pass


# Ring value -> grid displacement, counter-clockwise from east.
_VECTORS = (
    Vector(1, 0),
    Vector(1, 1),
    Vector(0, 1),
    Vector(-1, 1),
    Vector(-1, 0),
    Vector(-1, -1),
    Vector(0, -1),
    Vector(1, -1),
)

_ARROWS = ("→", "↗", "↑", "↖", "←", "↙", "↓", "↘")


@dataclass(frozen=True)
class Direction:
    """
    One of the 8 compass headings, stored as a ring value 0..7.

    0 = east and values increase counter-clockwise (1 = north-east,
    2 = north, ... 7 = south-east). Adding and subtracting two directions
    rotates on the ring; it is not vector math.
    """
    value: int

    def __post_init__(self):
        if not isinstance(self.value, int) or not 0 <= self.value < RING:
            raise InvalidDirection(f"invalid direction: {self.value!r}")

    def vector(self) -> Vector:
        return _VECTORS[self.value]

    def __int__(self) -> int:
        return self.value

    def __add__(self, other: "Direction") -> "Direction":
        return Direction((self.value + other.value) % RING)

    def __sub__(self, other: "Direction") -> "Direction":
        return Direction((self.value + RING - other.value) % RING)

    def reverse(self) -> "Direction":
        return self + Direction(4)

    def interpolate(self, other: "Direction") -> Optional[List["Direction"]]:
        """
        Single-step headings from self to other along the shorter rotation.

        Both endpoints are included. Returns None for opposite directions,
        where both rotations are four steps long and a reversal cannot be
        split into single turns.
        """
        n = (other - self).value
        if n == 4:
            return None
        if n < 4:
            return [self + Direction(step) for step in range(n + 1)]
        return [self - Direction(step) for step in range(RING - n + 1)]

    def __str__(self) -> str:
        return _ARROWS[self.value]


def add(a: Direction, b: Direction) -> Direction:
    return a + b


def sub(a: Direction, b: Direction) -> Direction:
    return a - b


RIGHT = Direction(0)
UPRIGHT = Direction(1)
UP = Direction(2)
UPLEFT = Direction(3)
LEFT = Direction(4)
DOWNLEFT = Direction(5)
DOWN = Direction(6)
DOWNRIGHT = Direction(7)

ALL = (RIGHT, UPRIGHT, UP, UPLEFT, LEFT, DOWNLEFT, DOWN, DOWNRIGHT)
