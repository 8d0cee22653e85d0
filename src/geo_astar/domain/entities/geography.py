import math
from dataclasses import dataclass, field


# Core graph types used by the search engine
@dataclass(frozen=True)
class Location:
    name: str
    lat: float  # degrees
    lng: float  # degrees


@dataclass(frozen=True)
class Edge:
    target: Location  # reference, owned by the graph
    weight: float


@dataclass(frozen=True)
class Leg:
    source: str
    target: str
    weight: float


@dataclass
class Route:
    nodes: list[str] = field(default_factory=list)
    cost: float = math.inf
    legs: list[Leg] = field(default_factory=list)
    expanded: int = 0  # frontier pops that led to an expansion or the goal

    @property
    def found(self) -> bool:
        return bool(self.nodes)

    def as_tuple(self) -> tuple[list[str], float]:
        return list(self.nodes), self.cost
