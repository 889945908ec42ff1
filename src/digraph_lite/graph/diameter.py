"""Brute-force "longest shortest path" search (graph diameter).

For every vertex s, compute the set of vertices s can reach, then run a
BFS shortest-path query from s to each of them.  The longest of all
those shortest paths (by vertex count) is the answer.

That is O(V) BFS runs per source and O(V) sources, each BFS costing
O(V + E): O(V^2 * (V + E)) shortest-path work overall on a strongly
connected graph.  It is a diagnostic, not something to call in a hot
loop.  There is no early exit and no approximation.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Generic, Hashable, TypeVar

from digraph_lite.graph.base import DirectedGraph
from digraph_lite.graph.traversal import connected_component, shortest_path

T = TypeVar("T", bound=Hashable)

log = logging.getLogger(__name__)


@dataclass(slots=True)
class LongestPath(Generic[T]):
    """Result of the longest-shortest-path search."""
    start: T
    end: T
    path: list[T]   # a shortest path from start to end

    @property
    def length(self) -> int:
        """Number of edges on the path."""
        return len(self.path) - 1


def longest_shortest_path(graph: DirectedGraph[T]) -> LongestPath[T]:
    """Find the reachable pair (s, t) whose shortest path is longest.

    Ties keep the first pair found.  A graph with no edges still has
    an answer: some vertex paired with itself, path length 0.

    Raises ValueError on an empty graph, where no pair exists; there
    is no empty LongestPath with unset start and end.
    """
    best: LongestPath[T] | None = None
    sources = list(graph)
    for n_done, src in enumerate(sources, start=1):
        component = connected_component(graph, src)
        for dst in component:
            path = shortest_path(graph, src, dst)
            if path is None:
                # connected_component and shortest_path disagree -> the
                # graph changed underneath us
                raise RuntimeError(f"{dst!r} reachable from {src!r} but no path found")
            if best is None or len(path) > len(best.path):
                best = LongestPath(start=src, end=dst, path=path)
                log.debug(
                    "new longest shortest path: %d edges, %r -> %r",
                    best.length, src, dst,
                )
        log.debug(
            "source %d/%d done (%r, %d reachable)",
            n_done, len(sources), src, len(component),
        )

    if best is None:
        raise ValueError("Cannot compute longest shortest path of an empty graph")
    return best
