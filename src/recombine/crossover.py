"""Generic crossover operator.

This module provides CrossoverOperator, which turns a list of selected
candidates into offspring by shuffling them, pairing them up, and delegating
each pair to a pluggable mate strategy. Strategy authors only implement the
Mate protocol; the pairing protocol lives here.

Example:
    >>> import numpy as np
    >>> from recombine import CrossoverOperator, sequence_mate
    >>> operator = CrossoverOperator(sequence_mate, crossover_points=1)
    >>> rng = np.random.default_rng(42)
    >>> offspring = operator.apply(["aaaa", "bbbb", "cccc", "dddd"], rng)
    >>> len(offspring)
    4
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Generic, TypeVar

import numpy as np

# Import strategies to trigger mate registration
import recombine.strategies  # noqa: F401
from recombine.generators import as_generator
from recombine.protocols import Mate, NumberGenerator
from recombine.registry import MateRegistry

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class CrossoverOperator(Generic[T]):
    """Pairwise crossover over a list of selected candidates.

    The operator is immutable and keeps no per-call state, so one instance can
    be reused for every generation. In variable mode the point-count generator
    is the only stateful part; if the operator is shared between threads the
    generator must be safe to call concurrently.

    Attributes:
        mate: Recombination strategy, or the name of a strategy registered in
            MateRegistry. Names are resolved on construction.
        crossover_points: Number of crossover points for every mating (fixed
            mode), or a zero-argument callable drawn once per mating (variable
            mode). Normalised to a callable on construction.

    Note:
        The operator concatenates whatever the mate returns. A mate returning
        two offspring per pair keeps the population size; any other count
        grows or shrinks it.

    Example:
        >>> operator = CrossoverOperator("array", crossover_points=2)
        >>> parents = [np.zeros(6), np.ones(6)]
        >>> offspring = operator.apply(parents, np.random.default_rng(42))
        >>> [child.shape for child in offspring]
        [(6,), (6,)]
    """

    mate: Mate[T] | str
    crossover_points: int | NumberGenerator = 1

    def __post_init__(self) -> None:
        """Resolve the mate strategy and normalise the point-count source.

        Raises:
            KeyError: If mate names an unregistered strategy.
            TypeError: If mate is not callable, or crossover_points is neither
                an int nor callable.
            ValueError: If crossover_points is a negative int.
        """
        mate = MateRegistry.get(self.mate) if isinstance(self.mate, str) else self.mate
        if not callable(mate):
            raise TypeError(f"mate must be callable or a registered strategy name, got {type(mate).__name__}")
        object.__setattr__(self, "mate", mate)
        object.__setattr__(self, "crossover_points", as_generator(self.crossover_points))

    def apply(self, candidates: Iterable[T], rng: np.random.Generator) -> list[T]:
        """Apply crossover to the selected candidates.

        The candidates are copied and shuffled so that mating pairs do not
        depend on the order selection produced them in. Consecutive pairs of
        the shuffled list are passed to the mate strategy together with a
        freshly drawn crossover-point count. With an odd number of candidates
        the last one is passed through unmodified.

        Args:
            candidates: Selected candidates. Not modified.
            rng: Random number generator used for the shuffle and passed on to
                the mate strategy.

        Returns:
            New list of offspring. Same length as the input when every mating
            returns two offspring.

        Raises:
            ValueError: If candidates or rng is None, or a drawn point count is
                negative.
            TypeError: If rng is not a NumPy Generator, or a drawn point count
                is not an integer.

        Any exception raised by the mate strategy propagates unchanged.
        """
        if candidates is None:
            raise ValueError("candidates must not be None")
        if rng is None:
            raise ValueError("rng must not be None")
        if not isinstance(rng, np.random.Generator):
            raise TypeError(f"rng must be a numpy Generator, got {type(rng).__name__}")

        pool = list(candidates)
        order = rng.permutation(len(pool))
        shuffled = [pool[i] for i in order]

        offspring: list[T] = []
        n_pairs = 0
        for i in range(0, len(shuffled), 2):
            parent1 = shuffled[i]
            if i + 1 == len(shuffled):
                # Odd one out has no partner
                offspring.append(parent1)
                continue
            parent2 = shuffled[i + 1]
            points = self._draw_points()
            offspring.extend(self.mate(parent1, parent2, points, rng))
            n_pairs += 1

        logger.debug(
            "Crossover mated %d pairs from %d candidates into %d offspring", n_pairs, len(pool), len(offspring)
        )
        if len(offspring) != len(pool):
            logger.debug("Crossover changed population size from %d to %d", len(pool), len(offspring))

        return offspring

    __call__ = apply

    def _draw_points(self) -> int:
        """Draw the crossover-point count for the next mating."""
        points = self.crossover_points()
        if isinstance(points, bool) or not isinstance(points, (int, np.integer)):
            raise TypeError(f"crossover points must be an integer, got {points!r}")
        if points < 0:
            raise ValueError(f"crossover points must be non-negative, got {points}")
        return int(points)

