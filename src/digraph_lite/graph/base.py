"""Abstract directed graph contract.

Both AdjacencyListGraph and AdjacencyMatrixGraph implement this
interface.  The point: the traversal algorithms (shortest path,
reachability, strongly connected components, the all-pairs diameter
search) are written once against the primitives below and run
unchanged on either backend.  Only the complexity differs.

The vertex set is fixed when the graph is constructed.  Only edges
change afterwards, and every successful edge change bumps a
modification stamp that live iterators check (see iterators.py).
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Generic, Hashable, Iterable, Iterator, TypeVar

from digraph_lite.graph.errors import ConcurrentModificationError, NoSuchKeyError

if TYPE_CHECKING:
    from digraph_lite.graph.diameter import LongestPath

T = TypeVar("T", bound=Hashable)


class DirectedGraph(ABC, Generic[T]):
    """Interface that both adjacency-list and adjacency-matrix graphs implement.

    Every method that takes a key raises NoSuchKeyError if the key was
    not part of the construction set.  The check happens before any
    state changes, so a failing call never partially applies.
    """

    __slots__ = ("_size", "_num_edges", "_stamp")

    def __init__(self, keys: Iterable[T]) -> None:
        self._size = 0
        self._num_edges = 0
        self._stamp = 0
        self._init_vertices(keys)

    @abstractmethod
    def _init_vertices(self, keys: Iterable[T]) -> None:
        """Build the backend structure and set self._size."""
        ...

    # ---- counters --------------------------------------------------------

    def size(self) -> int:
        """Number of vertices (fixed at construction)."""
        return self._size

    def num_edges(self) -> int:
        """Number of directed edges currently present."""
        return self._num_edges

    @property
    def stamp(self) -> int:
        """Modification stamp, bumped on every successful edge change."""
        return self._stamp

    def _touch(self, delta: int) -> None:
        self._num_edges += delta
        self._stamp += 1

    def _require(self, *keys: T) -> None:
        for key in keys:
            if not self.has_vertex(key):
                raise NoSuchKeyError(key)

    # ---- primitives ------------------------------------------------------

    @abstractmethod
    def has_vertex(self, key: T) -> bool:
        """True if *key* is one of the graph's vertices.  Never raises."""
        ...

    @abstractmethod
    def add_edge(self, src: T, dst: T) -> bool:
        """Add the directed edge src -> dst.

        Returns False if the edge is already present (no-op).
        """
        ...

    @abstractmethod
    def remove_edge(self, src: T, dst: T) -> bool:
        """Remove the directed edge src -> dst.

        Returns False if the edge is not present (no-op).
        """
        ...

    @abstractmethod
    def has_edge(self, src: T, dst: T) -> bool:
        ...

    @abstractmethod
    def out_degree(self, key: T) -> int:
        ...

    @abstractmethod
    def in_degree(self, key: T) -> int:
        ...

    @abstractmethod
    def key_set(self) -> set[T]:
        """A fresh set of all vertex keys."""
        ...

    @abstractmethod
    def successor_set(self, key: T) -> set[T]:
        ...

    @abstractmethod
    def predecessor_set(self, key: T) -> set[T]:
        ...

    @abstractmethod
    def successor_iterator(self, key: T) -> Iterator[T]:
        """Lazy iterator over the successors of *key*.

        Raises NoSuchKeyError immediately if *key* is absent.  Adding or
        removing an edge while the iterator is live makes its next
        __next__ raise ConcurrentModificationError.
        """
        ...

    @abstractmethod
    def predecessor_iterator(self, key: T) -> Iterator[T]:
        """Lazy iterator over the predecessors of *key*.

        Same invalidation rule as successor_iterator.
        """
        ...

    @abstractmethod
    def _iter_keys(self) -> Iterator[T]:
        """Keys in the backend's storage order."""
        ...

    # ---- derived ---------------------------------------------------------

    def edges(self) -> Iterator[tuple[T, T]]:
        """Yield every edge as a (src, dst) pair."""
        stamp = self._stamp
        for src in self._iter_keys():
            for dst in self.successor_iterator(src):
                yield src, dst
                if self._stamp != stamp:
                    raise ConcurrentModificationError(stamp, self._stamp)

    # ---- algorithms ------------------------------------------------------
    # Thin wrappers so callers can write graph.shortest_path(a, b).  The
    # implementations live in traversal.py and diameter.py and only use
    # the primitives above.

    def shortest_path(self, start: T, end: T) -> list[T] | None:
        from digraph_lite.graph.traversal import shortest_path
        return shortest_path(self, start, end)

    def connected_component(self, key: T) -> set[T]:
        from digraph_lite.graph.traversal import connected_component
        return connected_component(self, key)

    def strongly_connected_component(self, key: T) -> set[T]:
        from digraph_lite.graph.traversal import strongly_connected_component
        return strongly_connected_component(self, key)

    def longest_shortest_path(self) -> LongestPath[T]:
        from digraph_lite.graph.diameter import longest_shortest_path
        return longest_shortest_path(self)

    # ---- dunder ----------------------------------------------------------

    def __contains__(self, key: object) -> bool:
        return self.has_vertex(key)  # type: ignore[arg-type]

    def __iter__(self) -> Iterator[T]:
        return self._iter_keys()

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(vertices={self._size}, "
            f"edges={self._num_edges})"
        )
