"""Benchmark tests for the two graph backends.

These check the cost model rather than absolute speed: a matrix edge
test is one array lookup while a list edge test scans the source's
successor list, and a matrix neighbor walk scans a full row while a
list neighbor walk only touches real neighbors.  Bounds are generous so
they hold on slow CI machines; the measured ratios are printed.
"""
from __future__ import annotations

import random
import time

from digraph_lite.graph.adjacency_list import AdjacencyListGraph
from digraph_lite.graph.adjacency_matrix import AdjacencyMatrixGraph
from digraph_lite.graph.base import DirectedGraph
from digraph_lite.graph.traversal import connected_component

SEED = 42


def _make_hub(graph_cls: type[DirectedGraph], degree: int) -> DirectedGraph[int]:
    """Vertex 0 points at vertices 1..degree; vertex degree+1 is left out."""
    g = graph_cls(range(degree + 2))
    for dst in range(1, degree + 1):
        g.add_edge(0, dst)
    return g


def _make_sparse(graph_cls: type[DirectedGraph], n: int, seed: int = SEED) -> DirectedGraph[int]:
    """Chain 0 -> 1 -> ... -> n-1 plus about n random extra edges."""
    rng = random.Random(seed)
    g = graph_cls(range(n))
    for i in range(n - 1):
        g.add_edge(i, i + 1)
    for _ in range(n):
        g.add_edge(rng.randrange(n), rng.randrange(n))
    return g


class TestEdgeLookupPerformance:
    def test_has_edge_high_degree(self) -> None:
        degree = 2000
        missing = degree + 1   # worst case for the list: full scan
        list_g = _make_hub(AdjacencyListGraph, degree)
        matrix_g = _make_hub(AdjacencyMatrixGraph, degree)

        n_iters = 2000
        t0 = time.perf_counter()
        for _ in range(n_iters):
            list_g.has_edge(0, missing)
        list_ms = (time.perf_counter() - t0) / n_iters * 1000

        t0 = time.perf_counter()
        for _ in range(n_iters):
            matrix_g.has_edge(0, missing)
        matrix_ms = (time.perf_counter() - t0) / n_iters * 1000

        ratio = list_ms / matrix_ms if matrix_ms > 0 else float("inf")
        print(f"\nhas_edge, out-degree {degree}:")
        print(f"  list:   {list_ms:.5f} ms/call")
        print(f"  matrix: {matrix_ms:.5f} ms/call")
        print(f"  ratio:  {ratio:.1f}x")
        assert not list_g.has_edge(0, missing)
        assert not matrix_g.has_edge(0, missing)
        assert ratio > 2.0


class TestTraversalPerformance:
    def test_reachable_set_sparse_2000(self) -> None:
        n = 2000
        list_g = _make_sparse(AdjacencyListGraph, n)
        matrix_g = _make_sparse(AdjacencyMatrixGraph, n)

        t0 = time.perf_counter()
        list_result = connected_component(list_g, 0)
        list_ms = (time.perf_counter() - t0) * 1000

        t0 = time.perf_counter()
        matrix_result = connected_component(matrix_g, 0)
        matrix_ms = (time.perf_counter() - t0) * 1000

        speedup = matrix_ms / list_ms if list_ms > 0 else float("inf")
        print(f"\nReachable set, {n} vertices, {list_g.num_edges()} edges:")
        print(f"  list:    {list_ms:.2f} ms")
        print(f"  matrix:  {matrix_ms:.2f} ms")
        print(f"  speedup: {speedup:.1f}x")
        assert list_result == matrix_result == set(range(n))
        # O(V + E) vs O(V^2): ~4k neighbor steps against ~4M cell checks
        assert speedup > 10.0
