"""
Reference tables and analysis tools.

This module tabulates the maneuver cost model for inspection and testing,
but is not used by the runtime game.
"""

from .cost_tables import cost_table, point_of_sail_table, cheapest_turns

__all__ = ["cost_table", "point_of_sail_table", "cheapest_turns"]
