"""Shared fixtures for the traversal algorithm tests."""
from __future__ import annotations

import random
from typing import Callable

import pytest

from digraph_lite.graph.adjacency_list import AdjacencyListGraph
from digraph_lite.graph.adjacency_matrix import AdjacencyMatrixGraph
from digraph_lite.graph.base import DirectedGraph

SEED = 42

GraphFactory = Callable[[list, list], DirectedGraph]


@pytest.fixture(params=[AdjacencyListGraph, AdjacencyMatrixGraph], ids=["list", "matrix"])
def graph_cls(request: pytest.FixtureRequest) -> type[DirectedGraph]:
    return request.param


@pytest.fixture
def build(graph_cls: type[DirectedGraph]) -> GraphFactory:
    """Factory: build(keys, edges) -> graph of the parametrized backend."""

    def _build(keys: list, edges: list) -> DirectedGraph:
        g = graph_cls(keys)
        for src, dst in edges:
            g.add_edge(src, dst)
        return g

    return _build


@pytest.fixture
def scenario_graph(build: GraphFactory) -> DirectedGraph[str]:
    """
    A -> B -> C -> A
              C -> D
    """
    return build(["A", "B", "C", "D"], [("A", "B"), ("B", "C"), ("C", "A"), ("C", "D")])


@pytest.fixture
def linear_graph(build: GraphFactory) -> DirectedGraph[str]:
    """A -> B -> C -> D -> E"""
    return build(list("ABCDE"), [("A", "B"), ("B", "C"), ("C", "D"), ("D", "E")])


@pytest.fixture
def diamond_graph(build: GraphFactory) -> DirectedGraph[str]:
    """
    A -> B -> D
    A -> C -> D
    """
    return build(list("ABCD"), [("A", "B"), ("A", "C"), ("B", "D"), ("C", "D")])


def random_edges(n: int, p: float, seed: int) -> list[tuple[int, int]]:
    rng = random.Random(seed)
    return [(i, j) for i in range(n) for j in range(n) if rng.random() < p]


@pytest.fixture
def random_edge_sets() -> list[tuple[int, list[tuple[int, int]]]]:
    """30 random (n, edges) pairs with a mix of sparse and dense graphs."""
    rng = random.Random(SEED)
    cases = []
    for i in range(30):
        n = rng.randint(1, 25)
        p = rng.choice([0.02, 0.08, 0.15, 0.4])
        cases.append((n, random_edges(n, p, SEED + i)))
    return cases
