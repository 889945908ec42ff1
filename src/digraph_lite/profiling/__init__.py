"""Profiling harness and workload generation for the graph backends."""

from digraph_lite.profiling.harness import (
    BACKENDS,
    BackendMismatchError,
    BackendResult,
    compare_results,
    run_backend,
    run_profile,
)
from digraph_lite.profiling.report import format_comparison, format_report
from digraph_lite.profiling.workload import Workload, WorkloadGenerator

__all__ = [
    "BACKENDS",
    "BackendMismatchError",
    "BackendResult",
    "Workload",
    "WorkloadGenerator",
    "compare_results",
    "format_comparison",
    "format_report",
    "run_backend",
    "run_profile",
]
