"""Directed graph ADT with list and matrix backends, plus traversals."""

from digraph_lite.graph.adjacency_list import AdjacencyListGraph
from digraph_lite.graph.adjacency_matrix import AdjacencyMatrixGraph
from digraph_lite.graph.base import DirectedGraph
from digraph_lite.graph.diameter import LongestPath, longest_shortest_path
from digraph_lite.graph.errors import ConcurrentModificationError, NoSuchKeyError
from digraph_lite.graph.traversal import (
    connected_component,
    shortest_path,
    strongly_connected_component,
)

__all__ = [
    "AdjacencyListGraph",
    "AdjacencyMatrixGraph",
    "ConcurrentModificationError",
    "DirectedGraph",
    "LongestPath",
    "NoSuchKeyError",
    "connected_component",
    "longest_shortest_path",
    "shortest_path",
    "strongly_connected_component",
]
