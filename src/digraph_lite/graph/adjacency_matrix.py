"""Directed graph using a dense 0/1 adjacency matrix.

Every key gets a stable integer index at construction time (the
iteration order of the input keys).  Two maps translate between them:

    _index:  dict[T, int]    key -> index
    _keys:   list[T]         index -> key

The matrix itself is one contiguous array('B') of V*V bytes in
row-major order: cell (row, col) lives at row * V + col, and is 1 iff
the edge keys[row] -> keys[col] exists.  A row is a vertex's
successors; a column is its predecessors.

Costs:
    add_edge / remove_edge / has_edge   O(1)
    in_degree / out_degree              O(V)  (full column / row scan)
    neighbor iteration                  O(V) total, regardless of degree
    space                               O(V^2), even with zero edges

Good for dense graphs, or when edge tests dominate.
"""
from __future__ import annotations

import array
from typing import Hashable, Iterable, Iterator, TypeVar

from digraph_lite.graph.base import DirectedGraph
from digraph_lite.graph.iterators import StampedIterator

T = TypeVar("T", bound=Hashable)


class MatrixNeighborIterator(StampedIterator[T]):
    """Lazily walks the set cells of one matrix row or column.

    On creation it positions at the first index with a set cell; each
    __next__ returns that key and moves on to the following set cell.
    Running off the end of the index range ends the iteration.
    """

    __slots__ = ("_matrix", "_keys", "_start", "_step", "_n", "_pos")

    def __init__(
        self,
        graph: AdjacencyMatrixGraph[T],
        start: int,
        step: int,
    ) -> None:
        super().__init__(graph)
        self._matrix = graph._matrix
        self._keys = graph._keys
        self._start = start   # flat offset of cell 0 in the row/column
        self._step = step     # 1 walks a row, V walks a column
        self._n = len(graph._keys)
        self._pos = 0
        self._skip_zeros()

    def _skip_zeros(self) -> None:
        matrix, start, step = self._matrix, self._start, self._step
        while self._pos < self._n and not matrix[start + self._pos * step]:
            self._pos += 1

    def _advance(self) -> T:
        if self._pos >= self._n:
            raise StopIteration
        key = self._keys[self._pos]
        self._pos += 1
        self._skip_zeros()
        return key


class AdjacencyMatrixGraph(DirectedGraph[T]):
    """Directed graph backed by a V x V byte matrix."""

    __slots__ = ("_index", "_keys", "_matrix")

    def _init_vertices(self, keys: Iterable[T]) -> None:
        self._index: dict[T, int] = {}
        self._keys: list[T] = []
        for key in keys:
            if key not in self._index:
                self._index[key] = len(self._keys)
                self._keys.append(key)
        n = len(self._keys)
        self._size = n
        self._matrix = array.array("B", bytes(n * n))

    def _cell(self, src: T, dst: T) -> int:
        return self._index[src] * self._size + self._index[dst]

    def _row(self, key: T) -> range:
        start = self._index[key] * self._size
        return range(start, start + self._size)

    def _column(self, key: T) -> range:
        return range(self._index[key], self._size * self._size, self._size)

    # ---- mutation --------------------------------------------------------

    def add_edge(self, src: T, dst: T) -> bool:
        self._require(src, dst)
        cell = self._cell(src, dst)
        if self._matrix[cell]:
            return False
        self._matrix[cell] = 1
        self._touch(+1)
        return True

    def remove_edge(self, src: T, dst: T) -> bool:
        self._require(src, dst)
        cell = self._cell(src, dst)
        if not self._matrix[cell]:
            return False
        self._matrix[cell] = 0
        self._touch(-1)
        return True

    # ---- queries ---------------------------------------------------------

    def has_vertex(self, key: T) -> bool:
        return key in self._index

    def has_edge(self, src: T, dst: T) -> bool:
        self._require(src, dst)
        return self._matrix[self._cell(src, dst)] == 1

    def out_degree(self, key: T) -> int:
        self._require(key)
        matrix = self._matrix
        return sum(matrix[i] for i in self._row(key))

    def in_degree(self, key: T) -> int:
        self._require(key)
        matrix = self._matrix
        return sum(matrix[i] for i in self._column(key))

    def key_set(self) -> set[T]:
        return set(self._keys)

    def successor_set(self, key: T) -> set[T]:
        self._require(key)
        matrix, keys = self._matrix, self._keys
        return {keys[j] for j, i in enumerate(self._row(key)) if matrix[i]}

    def predecessor_set(self, key: T) -> set[T]:
        self._require(key)
        matrix, keys = self._matrix, self._keys
        return {keys[j] for j, i in enumerate(self._column(key)) if matrix[i]}

    def successor_iterator(self, key: T) -> Iterator[T]:
        self._require(key)
        return MatrixNeighborIterator(self, self._index[key] * self._size, 1)

    def predecessor_iterator(self, key: T) -> Iterator[T]:
        self._require(key)
        return MatrixNeighborIterator(self, self._index[key], self._size)

    def _iter_keys(self) -> Iterator[T]:
        return iter(self._keys)

    def index_of(self, key: T) -> int:
        """Stable matrix index assigned to *key* at construction."""
        self._require(key)
        return self._index[key]
