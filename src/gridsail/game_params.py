from dataclasses import dataclass, field
from typing import Tuple
from .direction import Direction, LEFT, RIGHT
from .maneuver import MANEUVER_MAX
from .vector import Vector


@dataclass
class GameParams:
    # Grid & vessel
    tile_size: float = 30.0        # px per grid tile
    maneuver_max: int = MANEUVER_MAX
    start_heading: Direction = RIGHT
    start_position: Vector = field(default_factory=Vector.zero)

    # Environment
    wind: Direction = RIGHT        # direction the wind blows toward

    # Window
    width: int = 1000
    height: int = 700
    fps: int = 60
    font_name: str = "consolas"
    font_size: int = 24

    # Colors
    bg: Tuple[int, int, int] = (12, 18, 28)
    grid_color: Tuple[int, int, int] = (28, 40, 58)
    ship_color: Tuple[int, int, int] = (120, 200, 255)
    wind_color: Tuple[int, int, int] = (90, 200, 220)
    text_color: Tuple[int, int, int] = (128, 128, 255)


# Predefined game setups

# Wind blowing east, ship running before it (default)
DEFAULT = GameParams()

# Wind blowing west, ship starting eastbound in irons
IN_IRONS_START = GameParams(
    start_heading=RIGHT,
    wind=LEFT,
)
