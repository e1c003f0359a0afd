from dataclasses import dataclass
from enum import Enum
from functools import total_ordering
from typing import List, Optional
from .direction import Direction


@dataclass(frozen=True)
class Heading:
    """Current facing of a vessel."""
    direction: Direction

    def interpolate(self, other: "Heading") -> Optional[List["Heading"]]:
        steps = self.direction.interpolate(other.direction)
        if steps is None:
            return None
        return [Heading(d) for d in steps]


@dataclass(frozen=True)
class Wind:
    """Direction the wind blows toward. Running means sailing with it."""
    direction: Direction


@total_ordering
class PointOfSail(Enum):
    """
    How favorably a heading sits relative to the wind.

    Ordered by sailing difficulty through the explicit ``rank``, so that
    comparisons never depend on member declaration order. ``cost`` is the
    maneuver-point price of turning into this point of sail.
    """
    RUNNING = (0, 0, "running")
    BROAD_REACH = (1, 1, "broad reach")
    BEAM_REACH = (2, 2, "beam reach")
    CLOSE_HAULED = (3, 4, "close hauled")
    IN_IRONS = (4, 8, "in irons")

    def __init__(self, rank: int, cost: int, label: str):
        self.rank = rank
        self.cost = cost
        self.label = label

    def __lt__(self, other):
        if not isinstance(other, PointOfSail):
            return NotImplemented
        return self.rank < other.rank

    def __str__(self) -> str:
        return self.label

    @staticmethod
    def classify(heading: Heading, wind: Wind) -> "PointOfSail":
        offset = (wind.direction - heading.direction).value
        return _BY_OFFSET[offset]


# Wind-relative ring offset -> point of sail, symmetric about 0 and 4.
_BY_OFFSET = (
    PointOfSail.RUNNING,
    PointOfSail.BROAD_REACH,
    PointOfSail.BEAM_REACH,
    PointOfSail.CLOSE_HAULED,
    PointOfSail.IN_IRONS,
    PointOfSail.CLOSE_HAULED,
    PointOfSail.BEAM_REACH,
    PointOfSail.BROAD_REACH,
)
