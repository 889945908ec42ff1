"""Seeded random workloads for profiling the graph backends.

A workload is everything needed to drive both backends identically:

  - num_vertices integer keys 0..n-1
  - an edge insertion sequence: every ordered pair (self-loops
    included) is kept with probability density, then shuffled, and a
    handful of duplicates are mixed back in so add_edge's "already
    present" path gets exercised
  - a removal sequence: a random ~10% of the inserted edges plus a few
    pairs that were never inserted
  - num_queries (src, dst) pairs for path and component queries

Everything is drawn from one random.Random(seed), so two runs with the
same arguments produce byte-identical workloads.
"""
from __future__ import annotations

import random
from dataclasses import dataclass


@dataclass(slots=True)
class Workload:
    """A reproducible sequence of graph operations."""
    keys: list[int]
    additions: list[tuple[int, int]]
    removals: list[tuple[int, int]]
    queries: list[tuple[int, int]]
    seed: int


class WorkloadGenerator:
    """Builds Workload objects for a given size and edge density.

    Parameters:
        num_vertices: Number of vertices (must be positive).
        density: Probability that any ordered pair becomes an edge, in [0, 1].
        num_queries: Number of (src, dst) query pairs.
        seed: RNG seed.
    """

    def __init__(
        self,
        num_vertices: int = 200,
        density: float = 0.05,
        num_queries: int = 500,
        seed: int = 42,
    ) -> None:
        if num_vertices <= 0:
            raise ValueError(f"num_vertices must be positive, got {num_vertices}")
        if not (0.0 <= density <= 1.0):
            raise ValueError(f"density must be in [0, 1], got {density}")
        if num_queries < 0:
            raise ValueError(f"num_queries must be non-negative, got {num_queries}")
        self.num_vertices = num_vertices
        self.density = density
        self.num_queries = num_queries
        self.seed = seed

    def generate(self) -> Workload:
        rng = random.Random(self.seed)
        n = self.num_vertices
        keys = list(range(n))

        edges = [
            (src, dst)
            for src in keys
            for dst in keys
            if rng.random() < self.density
        ]
        rng.shuffle(edges)

        additions = list(edges)
        if edges:
            dupes = rng.choices(edges, k=max(1, len(edges) // 20))
            for pair in dupes:
                additions.insert(rng.randrange(len(additions) + 1), pair)

        removals = rng.sample(edges, len(edges) // 10)
        present = set(edges)
        for _ in range(max(1, n // 10)):
            pair = (rng.randrange(n), rng.randrange(n))
            if pair not in present:
                removals.append(pair)

        queries = [
            (rng.randrange(n), rng.randrange(n))
            for _ in range(self.num_queries)
        ]

        return Workload(
            keys=keys,
            additions=additions,
            removals=removals,
            queries=queries,
            seed=self.seed,
        )
