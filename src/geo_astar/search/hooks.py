# search/hooks.py
from typing import Protocol

from geo_astar.domain.entities.geography import Route
from geo_astar.search.frontier import FrontierEntry


class SearchHooks(Protocol):
    def search_start(self, *, start: str, goal: str, h0: float): ...
    def expand(self, entry: FrontierEntry, *, best: float, qsize: int): ...
    def push(self, entry: FrontierEntry, *, via: str, qsize: int): ...
    def stale(self, entry: FrontierEntry, *, best: float): ...
    def search_end(self, route: Route, *, start: str, goal: str, ms: float): ...


class NoopHooks:
    def search_start(self, **_):
        pass

    def expand(self, *_, **__):
        pass

    def push(self, *_, **__):
        pass

    def stale(self, *_, **__):
        pass

    def search_end(self, *_, **__):
        pass
