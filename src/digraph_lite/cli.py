"""digraph-lite CLI entry point.

Usage: digraph-lite [-v] [command]
"""
import argparse
import logging
import sys

log = logging.getLogger(__name__)

DEMO_EDGES = [("A", "B"), ("B", "C"), ("C", "A"), ("C", "D")]


def _add_profile_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser(
        "profile",
        help="Time both graph backends on the same random workload.",
    )
    p.add_argument(
        "--vertices", type=int, default=200,
        help="Number of vertices (default: 200)",
    )
    p.add_argument(
        "--density", type=float, default=0.05,
        help="Probability that any ordered pair is an edge (default: 0.05)",
    )
    p.add_argument(
        "--queries", type=int, default=500,
        help="Number of path/component query pairs (default: 500)",
    )
    p.add_argument(
        "--seed", type=int, default=42,
        help="RNG seed for reproducible runs (default: 42)",
    )
    p.add_argument(
        "--backend", choices=["list", "matrix", "both"], default="both",
        help="Which backend(s) to run (default: both)",
    )
    p.add_argument(
        "--diameter", action="store_true",
        help="Also time the all-pairs longest shortest path search (slow).",
    )
    p.add_argument(
        "--cprofile", action="store_true",
        help="Enable cProfile and print top functions by cumulative time.",
    )


def _add_demo_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser(
        "demo",
        help="Build a four-vertex example graph and print its components and paths.",
    )
    p.add_argument(
        "--backend", choices=["list", "matrix"], default="list",
        help="Which backend to build (default: list)",
    )


def _run_profile(args: argparse.Namespace) -> None:
    from digraph_lite.profiling.harness import run_profile
    from digraph_lite.profiling.report import format_comparison, format_report

    backends = ["list", "matrix"] if args.backend == "both" else [args.backend]
    results = run_profile(
        backends=backends,
        num_vertices=args.vertices,
        density=args.density,
        num_queries=args.queries,
        seed=args.seed,
        diameter=args.diameter,
        profile=args.cprofile,
    )
    for result in results:
        print(format_report(result))
        print()
        if result.cprofile_stats:
            print("--- cProfile top functions ---")
            print(result.cprofile_stats)
    if len(results) == 2:
        print(format_comparison(results[0], results[1]))
        log.info("backends agree on all %d queries", args.queries)


def _run_demo(args: argparse.Namespace) -> None:
    from digraph_lite.profiling.harness import BACKENDS

    keys = sorted({k for edge in DEMO_EDGES for k in edge})
    graph = BACKENDS[args.backend](keys)
    for src, dst in DEMO_EDGES:
        graph.add_edge(src, dst)

    print(repr(graph))
    print("Edges:", ", ".join(f"{s}->{d}" for s, d in graph.edges()))
    for key in keys:
        print(
            f"{key}: reachable={sorted(graph.connected_component(key))} "
            f"strong={sorted(graph.strongly_connected_component(key))}"
        )
    for src, dst in [("A", "D"), ("D", "A")]:
        path = graph.shortest_path(src, dst)
        shown = " -> ".join(path) if path is not None else "no path"
        print(f"shortest {src} to {dst}: {shown}")
    longest = graph.longest_shortest_path()
    print(
        f"longest shortest path: {' -> '.join(longest.path)} "
        f"({longest.length} edges)"
    )


def main() -> None:
    parser = argparse.ArgumentParser(
        prog="digraph-lite",
        description="Directed graph ADT with list and matrix backends.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Enable debug logging.",
    )
    subparsers = parser.add_subparsers(dest="command")

    _add_profile_parser(subparsers)
    _add_demo_parser(subparsers)

    args = parser.parse_args()
    level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    # basicConfig is a no-op when the root logger already has handlers
    logging.getLogger("digraph_lite").setLevel(level)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    try:
        if args.command == "profile":
            _run_profile(args)
        elif args.command == "demo":
            _run_demo(args)
    except ValueError as exc:
        parser.error(str(exc))
