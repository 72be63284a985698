"""recombine: Pairwise crossover for evolutionary algorithms.

A pure numpy implementation of the crossover stage of a genetic algorithm:
selected candidates are shuffled, paired up, and recombined by a pluggable
mate strategy with a fixed or randomly drawn number of crossover points.

Example (fixed number of crossover points):
    >>> from recombine import CrossoverOperator, sequence_mate
    >>> import numpy as np
    >>> operator = CrossoverOperator(sequence_mate, crossover_points=2)
    >>> offspring = operator.apply([[0] * 6, [1] * 6, [2] * 6], np.random.default_rng(42))
    >>> len(offspring)
    3

Example (variable number of crossover points, strategy by name):
    >>> from recombine import CrossoverOperator, uniform_points
    >>> import numpy as np
    >>> operator = CrossoverOperator("array", crossover_points=uniform_points(1, 3, seed=7))
    >>> offspring = operator.apply([np.zeros(8), np.ones(8)], np.random.default_rng(42))
    >>> len(offspring)
    2
"""

from recombine.crossover import CrossoverOperator
from recombine.generators import as_generator, constant_points, poisson_points, uniform_points
from recombine.protocols import EvolutionaryOperator, Mate, NumberGenerator
from recombine.registry import MateRegistry, list_mates
from recombine.strategies import array_mate, pairwise, sequence_mate

__all__ = [
    # Operator
    "CrossoverOperator",
    # Mate strategies
    "sequence_mate",
    "array_mate",
    "pairwise",
    # Point-count generators
    "constant_points",
    "uniform_points",
    "poisson_points",
    "as_generator",
    # Registry system
    "MateRegistry",
    "list_mates",
    # Protocols
    "Mate",
    "NumberGenerator",
    "EvolutionaryOperator",
]
