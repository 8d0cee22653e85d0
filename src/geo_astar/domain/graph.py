# domain/graph.py
from __future__ import annotations

import math
from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING

from geo_astar.domain.entities.geography import Edge, Location

if TYPE_CHECKING:
    from geo_astar.config.models import GraphModel


class UnknownLocationError(KeyError):
    """Raised when a location name is not registered in the graph."""

    def __init__(self, name: str):
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"unknown location {self.name!r}"


class LocationGraph:
    """
    Named locations plus directed weighted edges between them.

    Read-only once a search starts; searches keep all of their state locally.
    """

    def __init__(self):
        self._locations: dict[str, Location] = {}
        self._edges: dict[str, list[Edge]] = {}

    @classmethod
    def from_model(cls, model: GraphModel) -> LocationGraph:
        g = cls()
        for loc in model.locations:
            g.add_location(loc.name, loc.lat, loc.lng)
        for e in model.edges:
            g.add_edge(e.source, e.target, e.weight)
        return g

    # ------------- construction -----------------

    def add_location(self, name: str, lat: float, lng: float) -> Location:
        if not -90.0 <= lat <= 90.0:
            raise ValueError(f"latitude out of range for {name!r}: {lat}")
        if not -180.0 <= lng <= 180.0:
            raise ValueError(f"longitude out of range for {name!r}: {lng}")
        loc = Location(name, float(lat), float(lng))
        self._locations[name] = loc
        self._edges[name] = []
        return loc

    def add_edge(self, source: str, target: str, weight: float) -> Edge:
        if source not in self._locations:
            raise UnknownLocationError(source)
        if target not in self._locations:
            raise UnknownLocationError(target)
        if not math.isfinite(weight) or weight < 0:
            raise ValueError(f"edge {source!r}->{target!r} weight must be finite and >= 0, got {weight}")
        edge = Edge(self._locations[target], float(weight))
        self._edges[source].append(edge)
        return edge

    # ------------- lookups -----------------

    def location(self, name: str) -> Location:
        try:
            return self._locations[name]
        except KeyError:
            raise UnknownLocationError(name) from None

    def edges_from(self, name: str) -> list[Edge]:
        try:
            return self._edges[name]
        except KeyError:
            raise UnknownLocationError(name) from None

    def locations(self) -> Iterator[Location]:
        return iter(self._locations.values())

    @property
    def edge_count(self) -> int:
        return sum(len(es) for es in self._edges.values())

    def __contains__(self, name: object) -> bool:
        return name in self._locations

    def __len__(self) -> int:
        return len(self._locations)

    # ------------- walks -----------------

    def cheapest_edge(self, source: str, target: str) -> Edge | None:
        best = None
        for e in self.edges_from(source):
            if e.target.name == target and (best is None or e.weight < best.weight):
                best = e
        return best

    def walk_cost(self, nodes: Iterable[str]) -> float:
        """Sum of the cheapest edge weights along ``nodes``; ``inf`` for an empty walk."""
        nodes = list(nodes)
        if not nodes:
            return math.inf
        self.location(nodes[0])
        total = 0.0
        for u, v in zip(nodes, nodes[1:]):
            e = self.cheapest_edge(u, v)
            if e is None:
                raise ValueError(f"no edge {u!r}->{v!r}")
            total += e.weight
        return total
