# io/search_logging.py
import json
import logging
import math
import sys

from geo_astar.io.recorder import Recorder, route_record
from geo_astar.search.hooks import NoopHooks


class _JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "level": record.levelname,
            "msg": record.getMessage(),
            "logger": record.name,
        }
        extra = getattr(record, "extra", None)
        if isinstance(extra, dict):
            payload.update(extra)
        return json.dumps(payload)


def _default_json_logger(name="geo_astar", level="INFO"):
    logger = logging.getLogger(name)
    if not logger.handlers:
        h = logging.StreamHandler(sys.stdout)
        h.setFormatter(_JsonFormatter())
        logger.addHandler(h)
        logger.setLevel(level)
    return logger


class SearchLogging(NoopHooks):
    """
    Structured JSON logs for searches. Per-node events only in debug mode, sampled.
    """

    def __init__(
        self,
        run_id: str = "local",
        level: str = "INFO",
        debug: bool = False,
        sample_every: int = 1,
        logger: logging.Logger | None = None,
        recorder: Recorder | None = None,
    ):
        self.run_id, self.debug, self.sample_every = run_id, debug, max(1, sample_every)
        self.recorder = recorder
        self.log = logger or _default_json_logger(level=level)
        self._events = 0

    # --------------- Helpers -----------------------------

    def _emit(self, level: str, msg: str, **extra):
        self.log.log(getattr(logging, level), msg, extra={"extra": {"run_id": self.run_id, **extra}})

    def _sampled(self) -> bool:
        self._events += 1
        return self.debug and (self._events % self.sample_every) == 0

    @staticmethod
    def _shape(entry) -> dict:
        return {
            "location": entry.location.name,
            "cost": entry.cost,
            "heuristic": entry.heuristic,
        }

    # --------------------------------------------------------

    def search_start(self, *, start: str, goal: str, h0: float):
        self._events = 0  # sampling restarts with every search
        self._emit("INFO", "search_start", start=start, goal=goal, h0=h0)

    def expand(self, entry, *, best: float, qsize: int):
        if self._sampled():
            self._emit("DEBUG", "expand", **self._shape(entry), best=best, qsize=qsize)

    def push(self, entry, *, via: str, qsize: int):
        if self._sampled():
            self._emit("DEBUG", "push", **self._shape(entry), via=via, qsize=qsize)

    def stale(self, entry, *, best: float):
        if self._sampled():
            self._emit("DEBUG", "stale", **self._shape(entry), best=best)

    def search_end(self, route, *, start: str, goal: str, ms: float):
        self._emit(
            "INFO" if route.found else "WARNING",
            "search_end" if route.found else "no_path",
            start=start,
            goal=goal,
            path=route.nodes,
            cost=route.cost if math.isfinite(route.cost) else None,
            expanded=route.expanded,
            ms=ms,
        )
        if self.recorder:
            self.recorder.emit(route_record(route, run_id=self.run_id, start=start, goal=goal, ms=ms))
