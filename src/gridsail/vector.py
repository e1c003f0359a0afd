from dataclasses import dataclass


I8_MIN, I8_MAX = -128, 127


class VectorOverflow(OverflowError):
    pass


@dataclass(frozen=True)
class Vector:
    """Integer grid displacement (x right, y up). Components are signed 8-bit."""
    x: int = 0
    y: int = 0

    def __post_init__(self):
        if not Vector.fits(self.x, self.y):
            raise VectorOverflow(f"vector component out of range: ({self.x}, {self.y})")

    @staticmethod
    def fits(x: int, y: int) -> bool:
        return I8_MIN <= x <= I8_MAX and I8_MIN <= y <= I8_MAX

    @staticmethod
    def zero() -> "Vector":
        return Vector(0, 0)

    def __add__(self, other: "Vector") -> "Vector":
        return Vector(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector") -> "Vector":
        return Vector(self.x - other.x, self.y - other.y)
