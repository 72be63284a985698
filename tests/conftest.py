"""Shared test fixtures for recombine tests.

This module provides common fixtures used across test modules:
- rng: Seeded random number generator
- Mate strategy stubs that label or record their calls
"""

import numpy as np
import pytest


@pytest.fixture
def rng() -> np.random.Generator:
    """Provide a seeded random number generator for deterministic tests."""
    return np.random.default_rng(42)


@pytest.fixture
def labelling_mate():
    """Mate that names its two offspring after the parents, e.g. "CA_1", "CA_2"."""

    def mate(p1: str, p2: str, crossover_points: int, rng: np.random.Generator) -> list[str]:
        return [f"{p1}{p2}_1", f"{p1}{p2}_2"]

    return mate


@pytest.fixture
def tracking_mate():
    """Mate that records all calls for verification.

    Returns a tuple of (mate_fn, call_log) where call_log holds
    (parent1, parent2, crossover_points) tuples. Offspring are the parents.
    """
    call_log: list[tuple[object, object, int]] = []

    def mate(p1, p2, crossover_points: int, rng: np.random.Generator) -> list:
        call_log.append((p1, p2, crossover_points))
        return [p1, p2]

    return mate, call_log
