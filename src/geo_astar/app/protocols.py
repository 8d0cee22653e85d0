from collections.abc import Callable
from typing import Protocol, runtime_checkable

from geo_astar.domain.entities.geography import Location
from geo_astar.domain.graph import LocationGraph

Estimate = Callable[[Location], float]


# ------------- Search --------------------
@runtime_checkable
class Heuristic(Protocol):
    """
    Responsibilities:
      • Estimate the remaining cost from a location to a fixed goal.
      • Never overestimate the true remaining cost (admissible), or A* loses optimality.
    Units: same as edge weights (km for the haversine heuristic).
    """

    def bind(self, graph: LocationGraph, goal: Location) -> Estimate:
        """Return an estimator for one search; called once per search."""
        ...
