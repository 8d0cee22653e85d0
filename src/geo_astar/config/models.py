from math import isfinite
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from geo_astar.domain.geo import EARTH_RADIUS_KM


class LogModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    debug: bool = False
    sample_every: int = Field(default=1, ge=1)


# ----------------- GRAPH ---------------------


class LocationModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: str = Field(min_length=1)
    lat: float = Field(ge=-90.0, le=90.0)
    lng: float = Field(ge=-180.0, le=180.0)


class EdgeModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    source: str
    target: str
    weight: float = Field(ge=0.0)

    @field_validator("weight")
    @classmethod
    def _finite(cls, v: float) -> float:
        if not isfinite(v):
            raise ValueError("weight must be finite")
        return v


class GraphModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    locations: list[LocationModel] = Field(default_factory=list)
    edges: list[EdgeModel] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_references(self):
        names = [loc.name for loc in self.locations]
        dupes = sorted({n for n in names if names.count(n) > 1})
        if dupes:
            raise ValueError(f"duplicate location names: {dupes}")
        known = set(names)
        for e in self.edges:
            for end in (e.source, e.target):
                if end not in known:
                    raise ValueError(f"edge {e.source!r}->{e.target!r} references unknown location {end!r}")
        return self


# ----------------- HEURISTICS ---------------------


class HaversineHeuristicModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["haversine"] = "haversine"
    radius_km: float = Field(default=EARTH_RADIUS_KM, gt=0.0)


class ZeroHeuristicModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["zero"] = "zero"


HeuristicUnion = Annotated[
    HaversineHeuristicModel | ZeroHeuristicModel,
    Field(discriminator="kind"),
]


class SearchModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    heuristic: HeuristicUnion = Field(default_factory=HaversineHeuristicModel)
    tie_break: Literal["fifo", "name"] = "fifo"


# ------------------------------------------------------------------


class QueryModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    start: str
    goal: str


class ScenarioModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: str
    run_id: str = "local"
    graph: GraphModel
    search: SearchModel = SearchModel()
    log: LogModel = LogModel()
    queries: list[QueryModel] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_queries(self):
        known = {loc.name for loc in self.graph.locations}
        for q in self.queries:
            for end in (q.start, q.goal):
                if end not in known:
                    raise ValueError(f"query {q.start!r}->{q.goal!r} references unknown location {end!r}")
        return self
