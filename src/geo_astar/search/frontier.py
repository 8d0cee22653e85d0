# search/frontier.py

import heapq
from dataclasses import dataclass
from typing import Literal

from geo_astar.domain.entities.geography import Location

TieBreak = Literal["fifo", "name"]


@dataclass(frozen=True)
class FrontierEntry:
    location: Location
    cost: float  # accumulated from start
    heuristic: float  # estimate to goal

    @property
    def priority(self) -> float:
        return self.cost + self.heuristic


class Frontier:
    """
    Binary min-heap of frontier entries keyed by ``cost + heuristic``.

    No decrease-key: a cheaper path is pushed as a new entry and the caller
    skips the stale one when it surfaces. Equal priorities pop in insertion
    order (``fifo``) or by location name, then insertion order (``name``).
    """

    def __init__(self, tie_break: TieBreak = "fifo"):
        if tie_break not in ("fifo", "name"):
            raise ValueError(f"Unknown tie_break {tie_break!r}")
        self._by_name = tie_break == "name"
        self._q: list[tuple[float, str, int, FrontierEntry]] = []
        self._seq = 0

    def push(self, entry: FrontierEntry) -> None:
        self._seq += 1
        name = entry.location.name if self._by_name else ""
        heapq.heappush(self._q, (entry.priority, name, self._seq, entry))

    def pop(self) -> FrontierEntry:
        if not self._q:
            raise IndexError("pop from empty frontier")
        return heapq.heappop(self._q)[-1]

    def peek_priority(self) -> float | None:
        return self._q[0][0] if self._q else None

    def __len__(self) -> int:
        return len(self._q)

    def __bool__(self) -> bool:
        return bool(self._q)
