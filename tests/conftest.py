"""
Pytest configuration and fixtures for cauldron tests.
"""

import matplotlib

matplotlib.use("Agg")

import numpy as np
import pytest

from cauldron.config import Config
from cauldron.solver import SolutionTable, Solver, shortest_distances


@pytest.fixture
def default_config() -> Config:
    """Default configuration for tests."""
    return Config(show_progress=False)


@pytest.fixture(scope="session")
def solver() -> Solver:
    """Solver after a full search (the search is the expensive part)."""
    solver = Solver(Config(show_progress=False))
    solver.run()
    return solver


@pytest.fixture(scope="session")
def table(solver: Solver) -> SolutionTable:
    """Solved table for all states."""
    return solver.table


@pytest.fixture(scope="session")
def distances() -> np.ndarray:
    """Independent BFS distances from plain water."""
    return shortest_distances(0)
