"""Shared fixtures for the graph contract tests."""
from __future__ import annotations

import pytest

from digraph_lite.graph.adjacency_list import AdjacencyListGraph
from digraph_lite.graph.adjacency_matrix import AdjacencyMatrixGraph
from digraph_lite.graph.base import DirectedGraph

BACKENDS = [AdjacencyListGraph, AdjacencyMatrixGraph]


@pytest.fixture(params=BACKENDS, ids=["list", "matrix"])
def graph_cls(request: pytest.FixtureRequest) -> type[DirectedGraph]:
    return request.param


@pytest.fixture
def empty_graph(graph_cls: type[DirectedGraph]) -> DirectedGraph[str]:
    return graph_cls([])


@pytest.fixture
def abcd_graph(graph_cls: type[DirectedGraph]) -> DirectedGraph[str]:
    """Four vertices, no edges."""
    return graph_cls(["A", "B", "C", "D"])


@pytest.fixture
def cycle_graph(graph_cls: type[DirectedGraph]) -> DirectedGraph[str]:
    """
    A -> B -> C -> A
              C -> D
    """
    g = graph_cls(["A", "B", "C", "D"])
    for src, dst in [("A", "B"), ("B", "C"), ("C", "A"), ("C", "D")]:
        g.add_edge(src, dst)
    return g
