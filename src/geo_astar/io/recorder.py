# io/recorder.py
import json
import logging
import math
import sys
from dataclasses import asdict, dataclass
from typing import Protocol

log = logging.getLogger("geo_astar.recorder")


@dataclass(frozen=True)
class RouteRecord:
    run_id: str
    start: str
    goal: str
    path: list[str]
    cost: float | None  # None when unreachable (JSON has no infinity)
    expanded: int
    ms: float


class Sink(Protocol):
    def write(self, rec) -> None: ...


class JsonlSink:
    def __init__(self, fp=sys.stdout):
        self.fp = fp

    def write(self, rec) -> None:
        self.fp.write(json.dumps(asdict(rec)) + "\n")


class MemorySink:
    def __init__(self):
        self.records: list = []

    def write(self, rec) -> None:
        self.records.append(rec)


class Recorder:
    def __init__(self, *sinks: Sink):
        self.sinks = sinks or (JsonlSink(),)

    def emit(self, rec):
        for s in self.sinks:
            try:
                s.write(rec)
            except Exception:
                # a broken sink must not fail the search that produced the record
                log.exception("sink %s failed", type(s).__name__)


def route_record(route, *, run_id: str, start: str, goal: str, ms: float) -> RouteRecord:
    return RouteRecord(
        run_id=run_id,
        start=start,
        goal=goal,
        path=list(route.nodes),
        cost=route.cost if math.isfinite(route.cost) else None,
        expanded=route.expanded,
        ms=ms,
    )
