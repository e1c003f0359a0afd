import logging
from dataclasses import dataclass
from typing import Optional
from .direction import Direction
from .game_params import GameParams
from .maneuver import Maneuver, total_cost
from .point_of_sail import Heading, PointOfSail, Wind
from .vector import Vector


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Action:
    """A discrete player action: turn to a heading, or hold the current one."""
    direction: Optional[Direction] = None

    @staticmethod
    def move(direction: Direction) -> "Action":
        return Action(direction)

    @staticmethod
    def wait() -> "Action":
        return Action(None)

    def target(self, heading: Heading) -> Heading:
        if self.direction is None:
            return heading
        return Heading(self.direction)


class Ship:
    """
    Grid vessel state: position, heading and maneuver budget.

    The three fields only ever change together, through ``apply``.
    """

    def __init__(self, position: Vector, heading: Heading, maneuver: Maneuver):
        self.position = position
        self.heading = heading
        self.maneuver = maneuver

    @classmethod
    def spawn(cls, params: GameParams) -> "Ship":
        return cls(
            params.start_position,
            Heading(params.start_heading),
            Maneuver(params.maneuver_max, params.maneuver_max),
        )

    def point_of_sail(self, wind: Wind) -> PointOfSail:
        return PointOfSail.classify(self.heading, wind)

    def apply(self, action: Action, wind: Wind) -> bool:
        """
        Apply one action against the wind.

        Returns False and leaves the ship untouched when the turn is
        impossible, costs more than the remaining maneuver points, or would
        carry the ship off the edge of the grid.
        """
        pos = self.point_of_sail(wind)
        target = action.target(self.heading)
        cost = total_cost(wind, self.heading, target)
        if not self.maneuver.can_afford(cost):
            logger.debug("rejected turn %s -> %s: cost %d, budget %s",
                         self.heading.direction, target.direction, cost, self.maneuver)
            return False

        position = self.position
        # point of sail before the turn decides whether the ship makes way
        if pos != PointOfSail.IN_IRONS:
            step = target.direction.vector()
            x, y = position.x + step.x, position.y + step.y
            if not Vector.fits(x, y):
                logger.debug("rejected turn %s -> %s: (%d, %d) is off the grid",
                             self.heading.direction, target.direction, x, y)
                return False
            position = Vector(x, y)

        maneuver = self.maneuver.spend(cost)

        self.position, self.heading, self.maneuver = position, target, maneuver
        logger.debug("heading %s cost %d, maneuver %s, position (%d, %d)",
                     target.direction, cost, maneuver, position.x, position.y)
        return True

    def status(self, wind: Wind) -> str:
        return (f"Wind: {wind.direction}  Heading: {self.heading.direction}\n"
                f"Point of sail: {self.point_of_sail(wind)}\n"
                f"Maneuver: {self.maneuver}")
