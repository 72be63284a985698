"""Registry system for mate strategies.

This module provides a registry pattern for managing recombination strategies.
Instead of hardcoding a strategy, users can register factories that create
configured mate functions and retrieve them by name, e.g. from a config file.

Basic usage:
    ```python
    from recombine.registry import MateRegistry, list_mates

    def blend_factory(weight: float = 0.5):
        def mate(parent1, parent2, crossover_points, rng):
            ...
        return mate

    MateRegistry.register("blend", blend_factory)

    # Get a configured mate function
    mate = MateRegistry.get("blend", weight=0.3)

    # Or let the operator resolve it
    operator = CrossoverOperator("blend", crossover_points=1)

    available = list_mates()  # ["array", "blend", "sequence"]
    ```
"""

from collections.abc import Callable

from recombine.protocols import Mate


class MateRegistry:
    """Registry for mate strategies.

    Strategies are registered by name as factories that accept keyword
    arguments and return a Mate callable.

    Class Attributes:
        _registry: Dictionary mapping strategy names to factory functions.
    """

    _registry: dict[str, Callable[..., Mate]] = {}

    @classmethod
    def register(cls, name: str, factory: Callable[..., Mate]) -> None:
        """Register a mate strategy factory.

        Args:
            name: Unique name for the strategy. Will overwrite if already exists.
            factory: Callable that returns a Mate. Should accept keyword
                arguments for configuration.

        Example:
            ```python
            MateRegistry.register("sequence", lambda: sequence_mate)
            ```
        """
        cls._registry[name] = factory

    @classmethod
    def get(cls, name: str, **kwargs) -> Mate:
        """Get a configured mate function by name.

        Args:
            name: Name of the registered strategy.
            **kwargs: Configuration parameters passed to the factory function.

        Returns:
            A configured Mate callable.

        Raises:
            KeyError: If the strategy name is not registered. Error message
                includes list of available strategies.
        """
        if name not in cls._registry:
            available = ", ".join(sorted(cls._registry.keys())) or "none"
            raise KeyError(f"Mate strategy '{name}' not found. Available strategies: {available}")
        factory = cls._registry[name]
        return factory(**kwargs)

    @classmethod
    def list(cls) -> list[str]:
        """Return sorted list of registered strategy names."""
        return sorted(cls._registry.keys())


def list_mates() -> list[str]:
    """List all registered mate strategies.

    Convenience function that returns MateRegistry.list().
    """
    return MateRegistry.list()
