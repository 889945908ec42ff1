"""Traversal algorithms written against the DirectedGraph contract.

None of these touch backend internals; they only call has_vertex,
successor_iterator and predecessor_iterator.  So the same code runs on
the adjacency-list backend (O(V + E) per traversal) and on the matrix
backend (O(V^2) per traversal, since every neighbor walk scans a full
row or column).

All three searches pair their frontier (queue or stack) with a
"pending" set holding exactly the frontier's members.  Asking "is this
neighbor already waiting?" against the set is O(1); asking the deque
or list would be O(frontier length) on every edge.

Shortest path (BFS):
  1.  Seed a FIFO queue with start.
  2.  Pop a vertex, mark it visited, walk its successors.
  3.  Each successor that is neither visited nor pending gets its
      parent recorded and is enqueued.
  4.  The moment end is enqueued, rebuild the path from the parent map.
      BFS expands vertices in non-decreasing distance order, so the
      first time end is discovered it is along a shortest path.

Strongly connected component (two-pass reachability intersection):
  A vertex v is in the SCC of k iff k reaches v AND v reaches k.
  Forward DFS over successors finds everything k reaches; the same DFS
  over predecessors finds everything that reaches k.  Intersect.
"""
from __future__ import annotations

from collections import deque
from typing import Callable, Hashable, Iterator, TypeVar

from digraph_lite.graph.base import DirectedGraph
from digraph_lite.graph.errors import NoSuchKeyError

T = TypeVar("T", bound=Hashable)


def shortest_path(graph: DirectedGraph[T], start: T, end: T) -> list[T] | None:
    """Fewest-edges path from *start* to *end*, inclusive of both.

    Returns [start] when start == end, and None if *end* is not
    reachable.  Raises NoSuchKeyError if either key is absent.
    """
    for key in (start, end):
        if not graph.has_vertex(key):
            raise NoSuchKeyError(key)

    if start == end:
        return [start]

    visited: set[T] = set()
    pending: set[T] = {start}
    parent: dict[T, T] = {}
    q: deque[T] = deque([start])

    while q:
        node = q.popleft()
        pending.discard(node)
        visited.add(node)
        for succ in graph.successor_iterator(node):
            if succ in visited or succ in pending:
                continue
            parent[succ] = node
            q.append(succ)
            pending.add(succ)
            if succ == end:
                return _rebuild_path(parent, start, end)

    return None


def _rebuild_path(parent: dict[T, T], start: T, end: T) -> list[T]:
    path = [end]
    cur = end
    while cur != start:
        cur = parent[cur]
        path.append(cur)
    path.reverse()
    return path


def _reach(key: T, neighbors: Callable[[T], Iterator[T]]) -> set[T]:
    """Every vertex reachable from *key* by repeatedly following *neighbors*."""
    visited: set[T] = set()
    pending: set[T] = {key}
    stack: list[T] = [key]

    while stack:
        node = stack.pop()
        pending.discard(node)
        visited.add(node)
        for nbr in neighbors(node):
            if nbr not in visited and nbr not in pending:
                pending.add(nbr)
                stack.append(nbr)

    return visited


def connected_component(graph: DirectedGraph[T], key: T) -> set[T]:
    """All vertices reachable from *key* along successor edges.

    This is forward reachability, not an equivalence class: B being in
    A's component says nothing about A being in B's.  Always contains
    *key*.  Raises NoSuchKeyError if *key* is absent.
    """
    if not graph.has_vertex(key):
        raise NoSuchKeyError(key)
    return _reach(key, graph.successor_iterator)


def strongly_connected_component(graph: DirectedGraph[T], key: T) -> set[T]:
    """The maximal set of vertices mutually reachable with *key*.

    Always contains *key*.  Raises NoSuchKeyError if *key* is absent.
    """
    if not graph.has_vertex(key):
        raise NoSuchKeyError(key)
    forward = _reach(key, graph.successor_iterator)
    backward = _reach(key, graph.predecessor_iterator)
    return forward & backward
