"""Report generation for profiling results.

Formats BackendResult data into human-readable tables for terminal
output.
"""
from __future__ import annotations

from digraph_lite.profiling.harness import BackendResult


def format_report(result: BackendResult, label: str | None = None) -> str:
    """Format a BackendResult as a readable report string."""
    total = result.total_time_ms or 1.0

    def _line(name: str, ms: float) -> str:
        return f"  {name:<16} {ms:.1f} ms ({ms / total * 100:.1f}%)"

    lines = [
        f"=== {label or result.backend} ===",
        f"Vertices:          {result.num_vertices:,}",
        f"Edges:             {result.num_edges:,}",
        f"Total time:        {result.total_time_ms:.1f} ms",
        "",
        "Breakdown:",
        _line("Build:", result.build_time_ms),
        _line("Mutation:", result.mutate_time_ms),
        _line("Degree/sets:", result.degree_time_ms),
        _line("Shortest path:", result.path_time_ms),
        _line("Reachable set:", result.component_time_ms),
        _line("Strong comp.:", result.scc_time_ms),
    ]
    if result.diameter_time_ms is not None:
        lines.append(_line("Diameter:", result.diameter_time_ms))
        lines.append(f"  Diameter length: {result.diameter_length} edges")
    return "\n".join(lines)


def format_comparison(left: BackendResult, right: BackendResult) -> str:
    """Format a side-by-side timing table for two backends."""

    def _ratio(a: float, b: float) -> str:
        if b <= 0:
            return "inf"
        return f"{a / b:.1f}x"

    rows = [
        ("Build (ms)", left.build_time_ms, right.build_time_ms),
        ("Mutation (ms)", left.mutate_time_ms, right.mutate_time_ms),
        ("Degree/sets (ms)", left.degree_time_ms, right.degree_time_ms),
        ("Shortest path (ms)", left.path_time_ms, right.path_time_ms),
        ("Reachable set (ms)", left.component_time_ms, right.component_time_ms),
        ("Strong comp. (ms)", left.scc_time_ms, right.scc_time_ms),
    ]
    if left.diameter_time_ms is not None and right.diameter_time_ms is not None:
        rows.append(("Diameter (ms)", left.diameter_time_ms, right.diameter_time_ms))
    rows.append(("Total (ms)", left.total_time_ms, right.total_time_ms))

    lines = [
        f"{'Metric':<24} {left.backend:>12} {right.backend:>12} {'Ratio':>10}",
        "-" * 60,
    ]
    for name, a, b in rows:
        lines.append(f"{name:<24} {a:>12.1f} {b:>12.1f} {_ratio(a, b):>10}")
    return "\n".join(lines)
