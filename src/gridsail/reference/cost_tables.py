import pandas as pd
from ..direction import ALL, Direction
from ..maneuver import IMPOSSIBLE, MANEUVER_MAX, total_cost
from ..point_of_sail import Heading, PointOfSail, Wind


def cost_table(wind: Wind) -> pd.DataFrame:
    """
    Turn cost for every (current heading, target heading) pair.

    Rows are the current heading, columns the target heading, both labelled
    with their arrow glyphs. Reversals hold IMPOSSIBLE.
    """
    labels = [str(d) for d in ALL]
    rows = [[total_cost(wind, Heading(h), Heading(t)) for t in ALL] for h in ALL]
    return pd.DataFrame(rows, index=pd.Index(labels, name="heading"),
                        columns=pd.Index(labels, name="target"))


def point_of_sail_table() -> pd.DataFrame:
    """Point of sail, rank and cost for each wind-relative ring offset."""
    rows = []
    for offset in range(len(ALL)):
        # heading chosen so that wind - heading == offset with wind at 0
        pos = PointOfSail.classify(Heading(Direction(0) - Direction(offset)), Wind(Direction(0)))
        rows.append({"offset": offset, "point_of_sail": pos.label, "rank": pos.rank, "cost": pos.cost})
    return pd.DataFrame(rows).set_index("offset")


def cheapest_turns(wind: Wind, heading: Heading, budget: int = MANEUVER_MAX) -> pd.DataFrame:
    """Targets reachable from heading within budget, cheapest first."""
    rows = []
    for target in ALL:
        cost = total_cost(wind, heading, Heading(target))
        if cost == IMPOSSIBLE or cost > budget:
            continue
        pos = PointOfSail.classify(Heading(target), wind)
        rows.append({"target": str(target), "cost": cost, "point_of_sail": pos.label})
    df = pd.DataFrame(rows, columns=["target", "cost", "point_of_sail"])
    return df.sort_values("cost", kind="stable").reset_index(drop=True)


if __name__ == "__main__":
    wind = Wind(Direction(0))
    print(f"Wind blowing toward {wind.direction}")
    print(cost_table(wind))
    print(point_of_sail_table())
    print(cheapest_turns(wind, Heading(Direction(2))))
