from dataclasses import dataclass
from .point_of_sail import Heading, PointOfSail, Wind


IMPOSSIBLE = 255  # a single turn cannot reverse heading
MANEUVER_MAX = 10


class ManeuverUnaffordable(ValueError):
    pass


def step_cost(prev: PointOfSail, next_: PointOfSail) -> int:
    """
    Cost of one single-step turn between two points of sail.

    Easing off the wind costs a flat 1 however much easier it gets.
    Turning up into the wind costs the full price of the harder point of
    sail, not the difference.
    """
    if prev == next_:
        return 0
    if prev > next_:
        return 1
    return next_.cost


def total_cost(wind: Wind, h1: Heading, h2: Heading) -> int:
    """Maneuver points needed to turn from h1 to h2, or IMPOSSIBLE."""
    headings = h1.interpolate(h2)
    if headings is None:
        return IMPOSSIBLE
    points = [PointOfSail.classify(h, wind) for h in headings]
    cost = sum(step_cost(prev, nxt) for prev, nxt in zip(points, points[1:]))
    return min(cost, IMPOSSIBLE)


@dataclass(frozen=True)
class Maneuver:
    """Remaining maneuver points, bounded by ``maximum``."""
    points: int = MANEUVER_MAX
    maximum: int = MANEUVER_MAX

    def __post_init__(self):
        if not 0 <= self.points <= self.maximum:
            raise ValueError(f"maneuver points out of range: {self.points} / {self.maximum}")

    def can_afford(self, cost: int) -> bool:
        return cost != IMPOSSIBLE and cost <= self.points

    def spend(self, cost: int) -> "Maneuver":
        if not self.can_afford(cost):
            raise ManeuverUnaffordable(f"cannot spend {cost} of {self.points} maneuver points")
        points = self.points - cost
        if cost == 0:
            # holding course recovers a point
            points = min(points + 1, self.maximum)
        return Maneuver(points, self.maximum)

    def __str__(self) -> str:
        return f"{self.points} / {self.maximum}"
