"""Profiling harness: run one workload through each graph backend.

For every backend the harness:
  1.  builds the graph from the workload's keys
  2.  replays the edge additions, then the removals
  3.  asks every vertex for its degrees and walks its neighbor sets
  4.  answers each query pair with shortest_path, connected_component
      and strongly_connected_component
  5.  optionally runs the all-pairs longest_shortest_path search

Each phase is timed separately.  The answers from step 4 (and the final
edge set) are kept so that compare_results() can check the backends
agree on every query: they are supposed to differ only in speed.
"""
from __future__ import annotations

import cProfile
import io
import logging
import pstats
import time
from dataclasses import dataclass, field
from typing import Any

from digraph_lite.graph.adjacency_list import AdjacencyListGraph
from digraph_lite.graph.adjacency_matrix import AdjacencyMatrixGraph
from digraph_lite.graph.base import DirectedGraph
from digraph_lite.graph.diameter import longest_shortest_path
from digraph_lite.graph.traversal import (
    connected_component,
    shortest_path,
    strongly_connected_component,
)
from digraph_lite.profiling.workload import Workload, WorkloadGenerator

log = logging.getLogger(__name__)

BACKENDS: dict[str, type[DirectedGraph[Any]]] = {
    "list": AdjacencyListGraph,
    "matrix": AdjacencyMatrixGraph,
}


class BackendMismatchError(RuntimeError):
    """Raised when two backends answer the same query differently."""

    def __init__(self, what: str, left: str, right: str) -> None:
        self.what = what
        self.left = left
        self.right = right
        super().__init__(f"Backends {left!r} and {right!r} disagree on {what}")


@dataclass(slots=True)
class BackendResult:
    """Timing results from a single backend run."""
    backend: str
    num_vertices: int
    num_edges: int
    build_time_ms: float
    mutate_time_ms: float
    degree_time_ms: float
    path_time_ms: float
    component_time_ms: float
    scc_time_ms: float
    total_time_ms: float
    diameter_time_ms: float | None = None
    diameter_length: int | None = None
    cprofile_stats: str | None = None
    answers: list[Any] = field(default_factory=list, repr=False)
    edge_set: set[tuple[Any, Any]] = field(default_factory=set, repr=False)


def _ms_since(t0: float) -> float:
    return (time.perf_counter() - t0) * 1000


def run_backend(
    backend: str,
    workload: Workload,
    diameter: bool = False,
    profile: bool = False,
) -> BackendResult:
    """Replay *workload* against the backend registered as *backend*.

    If profile=True, wraps the run in cProfile and includes the stats
    in the result.
    """
    try:
        graph_cls = BACKENDS[backend]
    except KeyError:
        raise ValueError(
            f"Unknown backend: {backend!r}. Use one of {sorted(BACKENDS)}."
        ) from None

    timings: dict[str, float] = {}
    answers: list[Any] = []
    holder: dict[str, DirectedGraph[Any]] = {}
    diameter_length: int | None = None

    def _run() -> None:
        nonlocal diameter_length

        t0 = time.perf_counter()
        graph = graph_cls(workload.keys)
        holder["graph"] = graph
        timings["build"] = _ms_since(t0)

        t0 = time.perf_counter()
        for src, dst in workload.additions:
            graph.add_edge(src, dst)
        for src, dst in workload.removals:
            graph.remove_edge(src, dst)
        timings["mutate"] = _ms_since(t0)
        log.debug("%s: %r after mutation", backend, graph)

        t0 = time.perf_counter()
        for key in workload.keys:
            graph.out_degree(key)
            graph.in_degree(key)
            graph.successor_set(key)
            graph.predecessor_set(key)
        timings["degree"] = _ms_since(t0)

        t0 = time.perf_counter()
        for src, dst in workload.queries:
            # record the length only: neighbor order differs between
            # backends, so ties between equally short paths can break
            # differently
            path = shortest_path(graph, src, dst)
            answers.append(None if path is None else len(path))
        timings["path"] = _ms_since(t0)

        t0 = time.perf_counter()
        for src, _ in workload.queries:
            answers.append(connected_component(graph, src))
        timings["component"] = _ms_since(t0)

        t0 = time.perf_counter()
        for src, _ in workload.queries:
            answers.append(strongly_connected_component(graph, src))
        timings["scc"] = _ms_since(t0)

        if diameter:
            t0 = time.perf_counter()
            result = longest_shortest_path(graph)
            timings["diameter"] = _ms_since(t0)
            diameter_length = result.length

    cprofile_text = None
    t_total_start = time.perf_counter()
    if profile:
        pr = cProfile.Profile()
        pr.enable()
        _run()
        pr.disable()
        s = io.StringIO()
        ps = pstats.Stats(pr, stream=s).sort_stats("cumulative")
        ps.print_stats(30)
        cprofile_text = s.getvalue()
    else:
        _run()
    total_ms = _ms_since(t_total_start)

    graph = holder["graph"]
    log.debug("%s: finished in %.1f ms", backend, total_ms)

    return BackendResult(
        backend=backend,
        num_vertices=graph.size(),
        num_edges=graph.num_edges(),
        build_time_ms=timings["build"],
        mutate_time_ms=timings["mutate"],
        degree_time_ms=timings["degree"],
        path_time_ms=timings["path"],
        component_time_ms=timings["component"],
        scc_time_ms=timings["scc"],
        total_time_ms=total_ms,
        diameter_time_ms=timings.get("diameter"),
        diameter_length=diameter_length,
        cprofile_stats=cprofile_text,
        answers=answers,
        edge_set=set(graph.edges()),
    )


def compare_results(results: list[BackendResult]) -> None:
    """Check every backend produced the same edges and query answers.

    Raises BackendMismatchError on the first disagreement.
    """
    if not results:
        return
    first = results[0]
    for other in results[1:]:
        if other.edge_set != first.edge_set:
            raise BackendMismatchError("edge set", first.backend, other.backend)
        if other.answers != first.answers:
            raise BackendMismatchError("query answers", first.backend, other.backend)
        if other.diameter_length != first.diameter_length:
            raise BackendMismatchError("diameter", first.backend, other.backend)


def run_profile(
    backends: list[str] | None = None,
    num_vertices: int = 200,
    density: float = 0.05,
    num_queries: int = 500,
    seed: int = 42,
    diameter: bool = False,
    profile: bool = False,
) -> list[BackendResult]:
    """Generate one workload, run it on each backend, cross-check the answers."""
    gen = WorkloadGenerator(
        num_vertices=num_vertices,
        density=density,
        num_queries=num_queries,
        seed=seed,
    )
    workload = gen.generate()
    log.debug(
        "workload: %d vertices, %d additions, %d removals, %d queries",
        len(workload.keys), len(workload.additions),
        len(workload.removals), len(workload.queries),
    )

    results = [
        run_backend(name, workload, diameter=diameter, profile=profile)
        for name in (backends or list(BACKENDS))
    ]
    compare_results(results)
    return results
