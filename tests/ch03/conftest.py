"""Shared fixtures for the profiling harness and CLI tests."""
from __future__ import annotations

import logging

import pytest

from digraph_lite.profiling.workload import Workload, WorkloadGenerator

SEED = 42


@pytest.fixture
def small_workload() -> Workload:
    return WorkloadGenerator(
        num_vertices=30, density=0.1, num_queries=40, seed=SEED
    ).generate()


@pytest.fixture(autouse=True)
def restore_package_log_level():
    """The CLI sets the digraph_lite logger level; undo it after each test."""
    logger = logging.getLogger("digraph_lite")
    saved = logger.level
    yield
    logger.setLevel(saved)
