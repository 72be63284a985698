"""Standard mate strategies for crossover.

This module provides recombination strategies compatible with the Mate
protocol:

- sequence_mate: Multi-point crossover for Python sequences (list, tuple, str)
- array_mate: Multi-point crossover for NumPy arrays along the first axis
- pairwise: Adapt a ``(p1, p2, rng) -> child`` function into a mate strategy

The multi-point strategies draw one cut index per crossover point and swap
everything before the cut between the two offspring. Cuts may repeat, in
which case they cancel out.
"""

from collections.abc import Callable, Sequence
from typing import TypeVar

import numpy as np

from recombine.protocols import Mate
from recombine.registry import MateRegistry

T = TypeVar("T")


def _rebuild(parent: Sequence, genes: list) -> Sequence:
    """Build an offspring of the same sequence type as its parent."""
    if isinstance(parent, str):
        return type(parent)("".join(genes))
    if isinstance(parent, tuple) and hasattr(parent, "_make"):
        # namedtuple fields are positional arguments
        return type(parent)._make(genes)
    return type(parent)(genes)


def sequence_mate(
    parent1: Sequence,
    parent2: Sequence,
    crossover_points: int,
    rng: np.random.Generator,
) -> list[Sequence]:
    """Multi-point crossover for sequences of equal length.

    Offspring have the same type as their parents, so lists produce lists,
    tuples produce tuples and strings produce strings. Subclasses such as
    namedtuples and str subclasses are kept.

    Args:
        parent1: First parent sequence.
        parent2: Second parent sequence, same length as parent1.
        crossover_points: Number of cut points. Zero yields copies of the parents.
        rng: Random number generator used to draw cut indices.

    Returns:
        List of two offspring.

    Raises:
        ValueError: If the parents have different lengths.

    Example:
        >>> rng = np.random.default_rng(42)
        >>> c1, c2 = sequence_mate("aaaa", "bbbb", 1, rng)
        >>> sorted(c1 + c2) == sorted("aaaabbbb")
        True
    """
    if len(parent1) != len(parent2):
        raise ValueError(
            f"cannot perform crossover with different length parents, got {len(parent1)} and {len(parent2)}"
        )

    offspring1 = list(parent1)
    offspring2 = list(parent2)
    n = len(offspring1)

    # A cut needs at least one gene on each side
    if n > 1:
        for _ in range(crossover_points):
            cut = int(rng.integers(1, n))
            offspring1[:cut], offspring2[:cut] = offspring2[:cut], offspring1[:cut]

    return [_rebuild(parent1, offspring1), _rebuild(parent2, offspring2)]


def array_mate(
    parent1: np.ndarray,
    parent2: np.ndarray,
    crossover_points: int,
    rng: np.random.Generator,
) -> list[np.ndarray]:
    """Multi-point crossover for NumPy arrays along axis 0.

    Parents are never modified; offspring are new arrays with the dtype of
    the parent they start from.

    Args:
        parent1: First parent array.
        parent2: Second parent array, same shape as parent1.
        crossover_points: Number of cut points. Zero yields copies of the parents.
        rng: Random number generator used to draw cut indices.

    Returns:
        List of two offspring arrays.

    Raises:
        ValueError: If the parents have different shapes.

    Example:
        >>> rng = np.random.default_rng(42)
        >>> c1, c2 = array_mate(np.zeros(5), np.ones(5), 2, rng)
        >>> (c1 + c2).tolist()
        [1.0, 1.0, 1.0, 1.0, 1.0]
    """
    offspring1 = np.asarray(parent1).copy()
    offspring2 = np.asarray(parent2).copy()
    if offspring1.shape != offspring2.shape:
        raise ValueError(
            f"cannot perform crossover with different shape parents, got {offspring1.shape} and {offspring2.shape}"
        )

    n = offspring1.shape[0] if offspring1.ndim > 0 else 0
    if n > 1:
        for _ in range(crossover_points):
            cut = int(rng.integers(1, n))
            head = offspring1[:cut].copy()
            offspring1[:cut] = offspring2[:cut]
            offspring2[:cut] = head

    return [offspring1, offspring2]


def pairwise(crossover: Callable[[T, T, np.random.Generator], T]) -> Mate[T]:
    """Lift a single-child crossover function to a mate strategy.

    The returned strategy produces two offspring by calling the function with
    the parents in both orders. The mate's ``rng`` is passed on, so a
    stochastic crossover stays reproducible under the caller's seed. The
    crossover-point count is not used.

    Args:
        crossover: Function that creates one child from two parents.
            Signature: (p1, p2, rng) -> child

    Returns:
        A Mate returning ``[crossover(p1, p2, rng), crossover(p2, p1, rng)]``.

    Example:
        >>> mate = pairwise(lambda p1, p2, rng: (p1 + p2) / 2)
        >>> mate(np.array([0.0]), np.array([1.0]), 1, np.random.default_rng())
        [array([0.5]), array([0.5])]
    """

    def mate(parent1: T, parent2: T, crossover_points: int, rng: np.random.Generator) -> list[T]:
        return [crossover(parent1, parent2, rng), crossover(parent2, parent1, rng)]

    return mate


# Register built-in mate strategies
MateRegistry.register("sequence", lambda: sequence_mate)
MateRegistry.register("array", lambda: array_mate)
