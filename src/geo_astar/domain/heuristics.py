from geo_astar.app.protocols import Estimate, Heuristic
from geo_astar.domain.entities.geography import Location
from geo_astar.domain.geo import EARTH_RADIUS_KM, haversine_km_many
from geo_astar.domain.graph import LocationGraph


class HaversineHeuristic(Heuristic):
    """Great-circle distance to the goal, precomputed for every location in one numpy pass."""

    def __init__(self, radius_km: float = EARTH_RADIUS_KM):
        self.radius_km = radius_km

    def bind(self, graph: LocationGraph, goal: Location) -> Estimate:
        locs = list(graph.locations())
        dist = haversine_km_many(
            [p.lat for p in locs], [p.lng for p in locs], goal.lat, goal.lng, self.radius_km
        )
        table = {p.name: float(d) for p, d in zip(locs, dist)}
        return lambda loc: table[loc.name]


class ZeroHeuristic(Heuristic):
    """h = 0 everywhere; A* degenerates to Dijkstra."""

    def bind(self, graph, goal):
        return lambda loc: 0.0
