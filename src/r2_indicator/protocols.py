"""Protocol definitions for objects the indicator can score directly.

The indicator works on plain (n_points, n_obj) arrays. Optimizers usually
hold their solutions in a population structure instead; any such structure
that exposes its objective matrix as an ``objectives`` attribute satisfies
ObjectiveSource and can be passed to the population-level methods of R2
(value_of, best_of, worst_of, n_best_of, ...).

Example:
    ```python
    @dataclass(frozen=True)
    class Population:
        x: np.ndarray
        objectives: np.ndarray | None = None

    pop = Population(x=x, objectives=objectives)
    isinstance(pop, ObjectiveSource)  # True
    R2().best_of(pop)
    ```
"""

from typing import Protocol, runtime_checkable

import numpy as np


@runtime_checkable
class ObjectiveSource(Protocol):
    """Protocol for population-like objects carrying an objective matrix.

    Attributes:
        objectives: Objective values of all individuals, shape (n, n_obj),
            or None if the population has not been evaluated yet.
    """

    objectives: np.ndarray | None
