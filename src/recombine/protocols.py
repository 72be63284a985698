"""Protocol definitions for crossover in evolutionary algorithms.

This module defines the interfaces the crossover operator depends on. They
enable a pluggable architecture where recombination strategies and
point-count sources can be swapped without touching the pairing algorithm.

There are three protocols:

1. **Mate**: Recombines two parents into offspring. This is the only thing a
   new crossover strategy has to implement.

2. **NumberGenerator**: Supplies the number of crossover points for each
   mating. A fixed count is just a generator that always returns the same
   value.

3. **EvolutionaryOperator**: Transforms a list of selected candidates into a
   new list. ``CrossoverOperator`` satisfies it.

Example usage:
    ```python
    def swap_halves(parent1, parent2, crossover_points, rng):
        mid = len(parent1) // 2
        return [parent1[:mid] + parent2[mid:], parent2[:mid] + parent1[mid:]]

    operator = CrossoverOperator(swap_halves, crossover_points=1)
    offspring = operator.apply(selected, rng)
    ```
"""

from collections.abc import Iterable, Sequence
from typing import Protocol, TypeVar, runtime_checkable

import numpy as np

T = TypeVar("T")


@runtime_checkable
class Mate(Protocol[T]):
    """Protocol for pairwise recombination strategies.

    A mate function receives two parents, the number of crossover points
    requested for this mating, and the random number generator of the current
    crossover pass.

    Parameters:
        parent1: First parent.
        parent2: Second parent.
        crossover_points: Number of recombination points requested. What a
            "point" means (cut index, gene boundary, ...) is up to the
            strategy.
        rng: NumPy random number generator. All randomness must be drawn from
            it so that seeding the caller's generator makes the whole pass
            reproducible.

    Returns:
        A sequence of offspring of the same type as the parents. Conventionally
        two; returning any other number changes the size of the population the
        operator produces.

    Example:
        ```python
        def one_point(parent1, parent2, crossover_points, rng):
            cut = int(rng.integers(1, len(parent1)))
            return [parent1[:cut] + parent2[cut:], parent2[:cut] + parent1[cut:]]
        ```
    """

    def __call__(
        self,
        parent1: T,
        parent2: T,
        crossover_points: int,
        rng: np.random.Generator,
    ) -> Sequence[T]:
        """Recombine two parents.

        Args:
            parent1: First parent.
            parent2: Second parent.
            crossover_points: Number of crossover points to use.
            rng: Random number generator for reproducibility.

        Returns:
            Offspring, conventionally two of them.
        """
        ...


@runtime_checkable
class NumberGenerator(Protocol):
    """Protocol for crossover-point count sources.

    A number generator is a zero-argument callable that returns the next
    integer value. Stateful generators (e.g. random distributions) own their
    state; if one is shared between threads it must synchronise itself.

    Example:
        ```python
        counts = itertools.cycle([1, 2, 3])
        operator = CrossoverOperator(sequence_mate, crossover_points=lambda: next(counts))
        ```
    """

    def __call__(self) -> int:
        """Return the next value."""
        ...


@runtime_checkable
class EvolutionaryOperator(Protocol[T]):
    """Protocol for operators that transform a list of selected candidates.

    Operators are applied once per generation to the candidates chosen by
    parent selection. They must not modify the input and must draw all
    randomness from ``rng``.
    """

    def apply(self, candidates: Iterable[T], rng: np.random.Generator) -> list[T]:
        """Produce a new list of candidates from the selected ones.

        Args:
            candidates: Selected candidates.
            rng: Random number generator for reproducibility.

        Returns:
            New list of candidates.
        """
        ...
