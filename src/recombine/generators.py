"""Crossover-point count generators.

This module provides sources for the number of crossover points used in each
mating:

- constant_points: Always the same count (fixed mode)
- uniform_points: Discrete uniform count over an inclusive range
- poisson_points: Poisson-distributed count
- as_generator: Normalise an int or a callable into a NumberGenerator

All generators are implemented as factory functions that return zero-argument
callables compatible with CrossoverOperator's crossover_points parameter.
Random generators own their random state; they are not thread-safe.
"""

from collections.abc import Callable

import numpy as np

from recombine.protocols import NumberGenerator

Seed = int | np.random.Generator | None
"""Seed for a random generator.

An int or None is passed to ``np.random.default_rng``. An existing
``np.random.Generator`` is used as is, so several generators can share one
random stream.
"""


def constant_points(value: int) -> NumberGenerator:
    """Create a generator that always returns the same crossover-point count.

    Args:
        value: Number of crossover points. Must be non-negative.

    Returns:
        A zero-argument callable returning ``value``.

    Raises:
        TypeError: If value is a bool or not an integer.
        ValueError: If value is negative.

    Example:
        >>> points = constant_points(2)
        >>> points(), points()
        (2, 2)
    """
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise TypeError(f"crossover points must be an integer, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"crossover points must be non-negative, got {value}")
    value = int(value)

    def generator() -> int:
        return value

    return generator


def uniform_points(low: int, high: int, seed: Seed = None) -> NumberGenerator:
    """Create a generator of discrete uniformly distributed point counts.

    Args:
        low: Smallest count (inclusive). Must be non-negative.
        high: Largest count (inclusive). Must be at least ``low``.
        seed: Random seed or generator for reproducibility. If None, uses a
            random seed.

    Returns:
        A zero-argument callable returning an int in ``[low, high]``.

    Raises:
        ValueError: If low is negative or greater than high.

    Example:
        >>> points = uniform_points(1, 3, seed=42)
        >>> 1 <= points() <= 3
        True
    """
    if low < 0:
        raise ValueError(f"low must be non-negative, got {low}")
    if low > high:
        raise ValueError(f"low must not exceed high, got low={low}, high={high}")
    rng = np.random.default_rng(seed)

    def generator() -> int:
        return int(rng.integers(low, high, endpoint=True))

    return generator


def poisson_points(mean: float, seed: Seed = None) -> NumberGenerator:
    """Create a generator of Poisson-distributed point counts.

    Useful when most matings should use few crossover points but occasional
    heavier recombination is wanted.

    Args:
        mean: Expected number of crossover points. Must be positive.
        seed: Random seed or generator for reproducibility. If None, uses a
            random seed.

    Returns:
        A zero-argument callable returning a non-negative int.

    Raises:
        ValueError: If mean is not positive.
    """
    if mean <= 0:
        raise ValueError(f"mean must be positive, got {mean}")
    rng = np.random.default_rng(seed)

    def generator() -> int:
        return int(rng.poisson(mean))

    return generator


def as_generator(points: int | Callable[[], int]) -> NumberGenerator:
    """Normalise a crossover-point specification into a generator.

    Args:
        points: Either a fixed non-negative int, or a zero-argument callable
            returning an int.

    Returns:
        ``constant_points(points)`` for an int, the callable itself otherwise.

    Raises:
        TypeError: If points is a bool, or neither an int nor callable.
        ValueError: If points is a negative int.
    """
    if isinstance(points, bool):
        raise TypeError("crossover points must be an int or a callable, got bool")
    if isinstance(points, (int, np.integer)):
        return constant_points(int(points))
    if callable(points):
        return points
    raise TypeError(f"crossover points must be an int or a callable, got {type(points).__name__}")
