"""Registry of weight-vector strategies.

An R2 indicator fixes its weight vectors once, at construction. Instead of
hardcoding how those vectors are produced, strategies are registered as
factories and retrieved by name, which lets command-line tools and
experiment configs select a strategy with a string.

Built-in strategies:
- "default": 100 uniform bi-objective vectors
- "uniform": N uniform bi-objective vectors (kwargs: n_vectors, n_obj)
- "file": vectors loaded from a text file (kwargs: path, n_obj)

Basic usage:
    ```python
    from r2_indicator.registry import WeightRegistry, list_weight_strategies

    weights = WeightRegistry.get("uniform", n_vectors=50)
    weights = WeightRegistry.get("file", path="W3D_100.dat", n_obj=3)

    available = list_weight_strategies()  # ["default", "file", "uniform"]
    ```

Custom strategies:
    ```python
    WeightRegistry.register("axes", lambda n_obj=2: np.eye(n_obj))
    weights = WeightRegistry.get("axes", n_obj=3)
    ```
"""

from collections.abc import Callable

import numpy as np

from r2_indicator.exceptions import ConfigurationError
from r2_indicator.weights import default_weights, load_weights, uniform_weights


class WeightRegistry:
    """Registry for weight-vector strategies.

    Factories are stored at class level and called with keyword arguments at
    retrieval time. Each factory returns an array of shape (n_vectors, n_obj).

    Class Attributes:
        _registry: Dictionary mapping strategy names to factory functions.
    """

    _registry: dict[str, Callable[..., np.ndarray]] = {}

    @classmethod
    def register(cls, name: str, factory: Callable[..., np.ndarray]) -> None:
        """Register a weight-vector strategy factory.

        Args:
            name: Unique name for the strategy. Will overwrite if already exists.
            factory: Callable returning a (n_vectors, n_obj) array. Should
                accept keyword arguments for configuration.
        """
        cls._registry[name] = factory

    @classmethod
    def get(cls, name: str, **kwargs) -> np.ndarray:
        """Build the weight vectors of a registered strategy.

        Args:
            name: Name of the registered strategy.
            **kwargs: Configuration parameters passed to the factory function.

        Returns:
            Weight vectors produced by the strategy.

        Raises:
            ConfigurationError: If the strategy name is not registered. The
                message lists the available strategies. Errors raised by the
                factory itself propagate unchanged.

        Example:
            ```python
            weights = WeightRegistry.get("uniform", n_vectors=20)
            ```
        """
        if name not in cls._registry:
            available = ", ".join(sorted(cls._registry.keys())) or "none"
            raise ConfigurationError(
                f"Weight strategy '{name}' not found. Available strategies: {available}",
                details={"strategy": name},
            )
        factory = cls._registry[name]
        return factory(**kwargs)

    @classmethod
    def list(cls) -> list[str]:
        """Return sorted list of registered strategy names."""
        return sorted(cls._registry.keys())


def list_weight_strategies() -> list[str]:
    """List all registered weight-vector strategies.

    Convenience function that returns WeightRegistry.list().
    """
    return WeightRegistry.list()


WeightRegistry.register("default", default_weights)
WeightRegistry.register("uniform", uniform_weights)
WeightRegistry.register("file", load_weights)
