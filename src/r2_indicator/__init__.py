"""r2-indicator: R2 quality indicator for multi-objective optimization.

A pure numpy implementation of the R2 indicator with weighted Tchebycheff
scalarization, including leave-one-out contributions for ranking the points
of a front.

Example (score a front against a reference front):
    >>> from r2_indicator import R2
    >>> import numpy as np
    >>> front = np.array([[1.0, 2.0], [2.0, 1.0]])
    >>> indicator = R2()
    >>> round(indicator.value(front, front), 6)
    0.247475

Example (rank the points of a front):
    >>> front = np.array([[1.0, 5.0], [2.0, 3.0], [5.0, 1.0]])
    >>> indicator.best(front, front)
    2
    >>> indicator.n_best(front, front, 2)
    array([0, 1])
"""

from r2_indicator.exceptions import (
    ArgumentError,
    ConfigurationError,
    FrontFileError,
    InsufficientDataError,
    R2Error,
)
from r2_indicator.fronts import as_front, extract_front, read_front
from r2_indicator.indicator import R2, aggregate, contribution_without, contributions
from r2_indicator.normalization import NormalizationBounds, normalize, normalize_fronts, reference_bounds
from r2_indicator.protocols import ObjectiveSource
from r2_indicator.ranking import best_index, n_best_indices, worst_index
from r2_indicator.registry import WeightRegistry, list_weight_strategies
from r2_indicator.scalarization import tchebycheff_matrix
from r2_indicator.weights import default_weights, load_weights, uniform_weights

__all__ = [
    # Indicator
    "R2",
    "aggregate",
    "contribution_without",
    "contributions",
    # Weight vectors
    "uniform_weights",
    "default_weights",
    "load_weights",
    "WeightRegistry",
    "list_weight_strategies",
    # Normalization and scalarization
    "NormalizationBounds",
    "reference_bounds",
    "normalize",
    "normalize_fronts",
    "tchebycheff_matrix",
    # Ranking
    "best_index",
    "worst_index",
    "n_best_indices",
    # Fronts
    "as_front",
    "read_front",
    "extract_front",
    "ObjectiveSource",
    # Errors
    "R2Error",
    "ConfigurationError",
    "InsufficientDataError",
    "FrontFileError",
    "ArgumentError",
]
