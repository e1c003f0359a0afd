"""
Gridsail - tile-based sailing game with a maneuver-point cost model.

This package provides:
- Vector, Direction: integer grid displacement and the 8-point compass ring
- PointOfSail, Heading, Wind: sailing efficiency of a heading relative to the wind
- Maneuver, total_cost: the maneuver-point budget and turn cost algorithm
- Ship, Action: per-vessel state and the atomic apply-one-action transition
- GameParams: game configuration with predefined setups
- Interactive pygame front end (main.py entry point)

Predefined setups:
- DEFAULT: wind blowing east, ship running before it
- IN_IRONS_START: wind blowing west, ship heading east into it
"""

from .vector import Vector, VectorOverflow
from .direction import Direction, InvalidDirection
from .point_of_sail import Heading, Wind, PointOfSail
from .maneuver import Maneuver, ManeuverUnaffordable, total_cost, step_cost, IMPOSSIBLE, MANEUVER_MAX
from .game_params import GameParams, DEFAULT, IN_IRONS_START
from .ship import Ship, Action

__all__ = [
    "Vector", "VectorOverflow", "Direction", "InvalidDirection",
    "Heading", "Wind", "PointOfSail",
    "Maneuver", "ManeuverUnaffordable", "total_cost", "step_cost", "IMPOSSIBLE", "MANEUVER_MAX",
    "GameParams", "DEFAULT", "IN_IRONS_START", "Ship", "Action",
]

__version__ = "0.1.0"
