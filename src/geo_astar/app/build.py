# geo_astar/app/build.py
from collections.abc import Mapping
from dataclasses import dataclass

from geo_astar.config.models import ScenarioModel
from geo_astar.domain.graph import LocationGraph
from geo_astar.io.recorder import Recorder
from geo_astar.io.search_logging import SearchLogging  # JSON logs
from geo_astar.runtime.registries import make_heuristic
from geo_astar.search.astar import AStarSearch
from geo_astar.search.hooks import NoopHooks


@dataclass
class App:
    model: ScenarioModel
    graph: LocationGraph
    engine: AStarSearch


@dataclass(frozen=True)
class QueryResult:
    start: str
    goal: str
    path: list[str]
    cost: float


def build(
    cfg: ScenarioModel | Mapping, *, use_logging: bool = True, recorder: Recorder | None = None
) -> App:
    # 0) Validate config
    model = cfg if isinstance(cfg, ScenarioModel) else ScenarioModel.model_validate(cfg)

    # 1) Graph, read-only from here on
    graph = LocationGraph.from_model(model.graph)

    # 2) Engine (with hooks)
    hooks = (
        SearchLogging(
            run_id=model.run_id,
            recorder=recorder,
            level=model.log.level,
            debug=model.log.debug,
            sample_every=model.log.sample_every,
        )
        if use_logging
        else NoopHooks()
    )
    engine = AStarSearch(
        graph,
        make_heuristic(model.search.heuristic),
        tie_break=model.search.tie_break,
        hooks=hooks,
    )
    return App(model, graph, engine)


def run_queries(app: App) -> list[QueryResult]:
    out = []
    for q in app.model.queries:
        path, cost = app.engine.search(q.start, q.goal)
        out.append(QueryResult(q.start, q.goal, path, cost))
    return out
