"""Fail-fast neighbor iterators.

Every iterator handed out by a graph remembers the graph's modification
stamp at the moment it was created.  Each call to __next__ compares
that remembered stamp with the live one; if an edge was added or
removed in between, the iterator raises ConcurrentModificationError
instead of producing results from a half-changed structure.

Subclasses only implement _advance(), which returns the next key or
raises StopIteration.
"""
from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Generic, Hashable, Iterator, TypeVar

from digraph_lite.graph.errors import ConcurrentModificationError

if TYPE_CHECKING:
    from digraph_lite.graph.base import DirectedGraph

T = TypeVar("T", bound=Hashable)


class StampedIterator(Iterator[T], Generic[T]):
    """Single-pass iterator that refuses to continue after a mutation."""

    __slots__ = ("_graph", "_stamp")

    def __init__(self, graph: DirectedGraph[T]) -> None:
        self._graph = graph
        self._stamp = graph.stamp

    def __iter__(self) -> StampedIterator[T]:
        return self

    def __next__(self) -> T:
        current = self._graph.stamp
        if current != self._stamp:
            raise ConcurrentModificationError(self._stamp, current)
        return self._advance()

    @abstractmethod
    def _advance(self) -> T:
        """Return the next neighbor key or raise StopIteration."""
        ...


class ListNeighborIterator(StampedIterator[T]):
    """Walks one of the adjacency-list backend's neighbor lists in place."""

    __slots__ = ("_neighbors", "_pos")

    def __init__(self, graph: DirectedGraph[T], neighbors: list[T]) -> None:
        super().__init__(graph)
        self._neighbors = neighbors
        self._pos = 0

    def _advance(self) -> T:
        if self._pos >= len(self._neighbors):
            raise StopIteration
        key = self._neighbors[self._pos]
        self._pos += 1
        return key
