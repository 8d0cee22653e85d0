# search/astar.py

import time

from geo_astar.app.protocols import Heuristic
from geo_astar.domain.entities.geography import Leg, Route
from geo_astar.domain.graph import LocationGraph
from geo_astar.domain.heuristics import HaversineHeuristic
from geo_astar.search.frontier import Frontier, FrontierEntry, TieBreak
from geo_astar.search.hooks import NoopHooks, SearchHooks


class AStarSearch:
    def __init__(
        self,
        graph: LocationGraph,
        heuristic: Heuristic | None = None,
        *,
        tie_break: TieBreak = "fifo",
        hooks: SearchHooks | None = None,
    ):
        self.graph = graph
        self.heuristic = heuristic or HaversineHeuristic()
        self.tie_break = tie_break
        self._hooks = hooks or NoopHooks()

    def search(self, start: str, goal: str) -> tuple[list[str], float]:
        """Shortest path as ``(names, cost)``; ``([], inf)`` when the goal is unreachable."""
        return self.plan(start, goal).as_tuple()

    def plan(self, start: str, goal: str) -> Route:
        t0 = time.perf_counter()
        start_loc = self.graph.location(start)
        goal_loc = self.graph.location(goal)
        h = self.heuristic.bind(self.graph, goal_loc)

        best: dict[str, float] = {start: 0.0}
        came_from: dict[str, str] = {}
        frontier = Frontier(self.tie_break)
        first = FrontierEntry(start_loc, 0.0, h(start_loc))
        frontier.push(first)
        self._hooks.search_start(start=start, goal=goal, h0=first.heuristic)

        route = Route()
        while frontier:
            entry = frontier.pop()
            name = entry.location.name
            if entry.cost > best[name]:
                self._hooks.stale(entry, best=best[name])
                continue
            route.expanded += 1

            if name == goal:
                route = self._reconstruct(came_from, start, goal, best[goal], route.expanded)
                break

            self._hooks.expand(entry, best=best[name], qsize=len(frontier))
            for edge in self.graph.edges_from(name):
                nxt = edge.target.name
                cand = best[name] + edge.weight
                if nxt not in best or cand < best[nxt]:
                    best[nxt] = cand
                    came_from[nxt] = name
                    out = FrontierEntry(edge.target, cand, h(edge.target))
                    frontier.push(out)
                    self._hooks.push(out, via=name, qsize=len(frontier))

        self._hooks.search_end(
            route, start=start, goal=goal, ms=(time.perf_counter() - t0) * 1000
        )
        return route

    def _reconstruct(
        self, came_from: dict[str, str], start: str, goal: str, cost: float, expanded: int
    ) -> Route:
        nodes = [goal]
        while nodes[-1] != start:
            nodes.append(came_from[nodes[-1]])
        nodes.reverse()

        # best cost along a step always comes from the cheapest parallel edge
        legs = [Leg(u, v, self.graph.cheapest_edge(u, v).weight) for u, v in zip(nodes, nodes[1:])]
        return Route(nodes=nodes, cost=cost, legs=legs, expanded=expanded)
