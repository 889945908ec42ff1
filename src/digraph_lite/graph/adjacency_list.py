"""Directed graph using adjacency lists.

Each vertex owns two ordered lists of neighbor keys: successors and
predecessors.  Internally that is two dicts, dict[T, list[T]], keyed by
vertex.  The predecessor map is a maintained inverse of the successor
map (src in _pred[dst] iff dst in _succ[src]), so in-degree and
predecessor iteration are as cheap as their outgoing counterparts.

Neighbors are stored by key rather than by vertex object, so there are
no reference cycles between vertices.

Costs:
    add_edge / remove_edge / has_edge   O(degree)  (list membership test)
    in_degree / out_degree              O(1)
    neighbor iteration                  O(1) per step
    space                               O(V + E)

Good for sparse graphs.
"""
from __future__ import annotations

from typing import Hashable, Iterable, Iterator, TypeVar

from digraph_lite.graph.base import DirectedGraph
from digraph_lite.graph.iterators import ListNeighborIterator

T = TypeVar("T", bound=Hashable)


class AdjacencyListGraph(DirectedGraph[T]):
    """Directed graph backed by successor and predecessor lists."""

    __slots__ = ("_succ", "_pred")

    def _init_vertices(self, keys: Iterable[T]) -> None:
        self._succ: dict[T, list[T]] = {}
        self._pred: dict[T, list[T]] = {}
        for key in keys:
            if key not in self._succ:
                self._succ[key] = []
                self._pred[key] = []
        self._size = len(self._succ)

    # ---- mutation --------------------------------------------------------

    def add_edge(self, src: T, dst: T) -> bool:
        self._require(src, dst)
        successors = self._succ[src]
        if dst in successors:
            return False
        successors.append(dst)
        self._pred[dst].append(src)
        self._touch(+1)
        return True

    def remove_edge(self, src: T, dst: T) -> bool:
        self._require(src, dst)
        successors = self._succ[src]
        if dst not in successors:
            return False
        successors.remove(dst)
        self._pred[dst].remove(src)
        self._touch(-1)
        return True

    # ---- queries ---------------------------------------------------------

    def has_vertex(self, key: T) -> bool:
        return key in self._succ

    def has_edge(self, src: T, dst: T) -> bool:
        self._require(src, dst)
        return dst in self._succ[src]

    def out_degree(self, key: T) -> int:
        self._require(key)
        return len(self._succ[key])

    def in_degree(self, key: T) -> int:
        self._require(key)
        return len(self._pred[key])

    def key_set(self) -> set[T]:
        return set(self._succ)

    def successor_set(self, key: T) -> set[T]:
        self._require(key)
        return set(self._succ[key])

    def predecessor_set(self, key: T) -> set[T]:
        self._require(key)
        return set(self._pred[key])

    def successor_iterator(self, key: T) -> Iterator[T]:
        self._require(key)
        return ListNeighborIterator(self, self._succ[key])

    def predecessor_iterator(self, key: T) -> Iterator[T]:
        self._require(key)
        return ListNeighborIterator(self, self._pred[key])

    def _iter_keys(self) -> Iterator[T]:
        return iter(self._succ)
