"""Exceptions raised by the graph contract.

Two failure kinds, kept distinct so callers can tell them apart:

  NoSuchKeyError               -- an operation named a vertex key that
                                  was not in the construction set
  ConcurrentModificationError  -- the graph was mutated while an
                                  iterator obtained from it was live

Absence that is an expected outcome (adding an edge that already
exists, asking for a path that does not exist) is reported through
return values, not exceptions.
"""
from __future__ import annotations

from typing import Hashable


class NoSuchKeyError(LookupError):
    """Raised when a vertex key is not present in the graph."""

    def __init__(self, key: Hashable) -> None:
        self.key = key
        super().__init__(f"Vertex {key!r} not found in graph")


class ConcurrentModificationError(RuntimeError):
    """Raised by an iterator whose graph changed after it was created."""

    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Graph modified during iteration (stamp {expected} -> {actual})"
        )
