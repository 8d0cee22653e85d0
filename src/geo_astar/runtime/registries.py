# runtime/registries.py
from collections.abc import Callable

from geo_astar.app.protocols import Heuristic
from geo_astar.config.models import HaversineHeuristicModel, HeuristicUnion, ZeroHeuristicModel
from geo_astar.domain.heuristics import HaversineHeuristic, ZeroHeuristic

HeuristicFactory = Callable[[HeuristicUnion], Heuristic]

_heuristic_registry: dict[str, HeuristicFactory] = {}


# ------------------- Heuristic registries ---------------------------


def register_heuristic(kind: str):
    def deco(fn: HeuristicFactory):
        _heuristic_registry[kind] = fn
        return fn

    return deco


def make_heuristic(cfg: HeuristicUnion) -> Heuristic:
    try:
        factory = _heuristic_registry[cfg.kind]
    except KeyError:
        raise ValueError(f"Unknown heuristic kind {cfg.kind!r}") from None
    return factory(cfg)


@register_heuristic("haversine")
def _haversine(cfg: HaversineHeuristicModel) -> Heuristic:
    return HaversineHeuristic(radius_km=cfg.radius_km)


@register_heuristic("zero")
def _zero(cfg: ZeroHeuristicModel) -> Heuristic:
    return ZeroHeuristic()
