"""R2 quality indicator and leave-one-out contributions.

This module provides the reductions of a Tchebycheff matrix to indicator
values, and the R2 class tying weight vectors, normalization and
scalarization together:

- aggregate: mean over weight vectors of the best (minimum) point utility
- contribution_without: the same reduction with one point left out
- contributions: contribution_without for every point
- R2: indicator with a fixed weight set, evaluating fronts and populations

Lower R2 values mean the front gets closer to the ideal point.

Example:
    >>> indicator = R2()
    >>> front = np.array([[1.0, 2.0], [2.0, 1.0]])
    >>> round(indicator.value(front, front), 6)
    0.247475
    >>> indicator.best(front, front) in (0, 1)
    True
"""

import logging
import os

import numpy as np

from r2_indicator.exceptions import ConfigurationError, InsufficientDataError
from r2_indicator.fronts import as_front, extract_front
from r2_indicator.normalization import normalize, reference_bounds
from r2_indicator.ranking import best_index, n_best_indices, worst_index
from r2_indicator.registry import WeightRegistry
from r2_indicator.scalarization import tchebycheff_matrix
from r2_indicator.weights import default_weights, load_weights, uniform_weights

logger = logging.getLogger(__name__)


def aggregate(matrix: np.ndarray) -> float:
    """Reduce a Tchebycheff matrix to the R2 value.

    For each weight vector (column) take the minimum utility over all points
    (rows), then average these minima over the weight vectors.

    Args:
        matrix: Tchebycheff matrix, shape (n_points, n_vectors).

    Returns:
        The R2 value.

    Raises:
        InsufficientDataError: If the matrix has no rows.
    """
    if matrix.shape[0] == 0:
        raise InsufficientDataError("cannot compute R2 of an empty front")
    return float(matrix.min(axis=0).mean())


def contribution_without(matrix: np.ndarray, index: int) -> float:
    """Reduce a Tchebycheff matrix to the R2 value with one point excluded.

    The column-wise minimum is seeded from row 0, or from row 1 when the
    excluded index is 0, and then taken over every row except ``index``.

    Args:
        matrix: Tchebycheff matrix, shape (n_points, n_vectors).
        index: Row (point) to exclude.

    Returns:
        R2 value of the front without the point at ``index``.

    Raises:
        InsufficientDataError: If the matrix has fewer than two rows, since
            excluding its only point leaves nothing to score.
        IndexError: If index is outside [0, n_points).
    """
    n_points = matrix.shape[0]
    if n_points < 2:
        raise InsufficientDataError(
            f"leave-one-out R2 needs at least 2 points, got {n_points}",
            details={"n_points": n_points, "index": index},
        )
    if not 0 <= index < n_points:
        raise IndexError(f"index {index} is out of bounds for front with {n_points} points")

    seed_row = 1 if index == 0 else 0
    keep = np.ones(n_points, dtype=bool)
    keep[index] = False

    column_min = np.minimum(matrix[seed_row], matrix[keep].min(axis=0))
    return float(column_min.mean())


def contributions(matrix: np.ndarray) -> np.ndarray:
    """Compute contribution_without for every point of the matrix.

    Args:
        matrix: Tchebycheff matrix, shape (n_points, n_vectors).

    Returns:
        Array of shape (n_points,) where entry i is the R2 value without point i.

    Raises:
        InsufficientDataError: If the matrix has fewer than two rows.
    """
    return np.array([contribution_without(matrix, i) for i in range(matrix.shape[0])], dtype=np.float64)


def _validate_weights(weights) -> np.ndarray:
    arr = np.asarray(weights, dtype=np.float64)
    if arr.ndim != 2 or arr.shape[0] == 0 or arr.shape[1] == 0:
        raise ConfigurationError(f"weights must be a non-empty 2D array, got shape {arr.shape}")
    if not np.all(np.isfinite(arr)) or np.any(arr < 0.0):
        raise ConfigurationError("weights must be finite and non-negative")
    return arr


class R2:
    """R2 indicator with a weight-vector set fixed at construction.

    The weight vectors are created once and stored read-only. Every
    evaluation normalizes its fronts and builds its Tchebycheff matrix as
    local values, so one instance can be shared between threads.

    Construction strategies:
        - ``R2()``: 100 uniform bi-objective vectors.
        - ``R2(n_vectors)``: n_vectors uniform bi-objective vectors.
        - ``R2.from_file(path, n_obj)``: vectors read from a text file.
        - ``R2.from_strategy(name, **kwargs)``: any registered strategy.
        - ``R2(weights=array)``: explicit vectors.

    Failures while creating the weights propagate out of the constructor;
    there is no half-built indicator.

    Args:
        n_vectors: Number of uniform bi-objective vectors. Mutually exclusive
            with weights.
        weights: Explicit weight vectors, shape (n_vectors, n_obj).

    Raises:
        ConfigurationError: If the weights are invalid.
        ValueError: If both n_vectors and weights are given.
    """

    def __init__(self, n_vectors: int | None = None, *, weights: np.ndarray | None = None) -> None:
        if n_vectors is not None and weights is not None:
            raise ValueError("pass either n_vectors or weights, not both")

        if weights is not None:
            w = _validate_weights(weights).copy()
        elif n_vectors is not None:
            w = uniform_weights(n_vectors)
        else:
            w = default_weights()

        w.setflags(write=False)
        self._weights = w
        logger.debug("Created R2 indicator with %d weight vectors for %d objectives", *w.shape)

    @classmethod
    def from_file(cls, path: str | os.PathLike, n_obj: int) -> "R2":
        """Create an indicator whose weight vectors are read from a file.

        Args:
            path: Whitespace-delimited weight file, one vector per line.
            n_obj: Number of objectives; the first n_obj tokens of each line
                are used.

        Raises:
            ConfigurationError: If the file cannot be read or is malformed.
        """
        return cls(weights=load_weights(path, n_obj))

    @classmethod
    def from_strategy(cls, name: str, **kwargs) -> "R2":
        """Create an indicator from a registered weight strategy.

        Args:
            name: Strategy name, e.g. "default", "uniform" or "file".
            **kwargs: Strategy configuration.

        Raises:
            ConfigurationError: If the strategy is unknown or fails.
        """
        return cls(weights=WeightRegistry.get(name, **kwargs))

    def __repr__(self) -> str:
        return f"R2(n_vectors={self.n_vectors}, n_obj={self.n_obj})"

    @property
    def weights(self) -> np.ndarray:
        """Read-only weight vectors, shape (n_vectors, n_obj)."""
        return self._weights

    @property
    def n_vectors(self) -> int:
        return self._weights.shape[0]

    @property
    def n_obj(self) -> int:
        return self._weights.shape[1]

    # -------------------------------------------------------------------------
    # Front-level evaluation
    # -------------------------------------------------------------------------

    def matrix(self, approximation, reference) -> np.ndarray:
        """Build the Tchebycheff matrix of an approximation front.

        Both fronts are normalized with the reference front's per-objective
        bounds before scalarization.

        Args:
            approximation: Front being scored, shape (n_points, n_obj).
            reference: Reference front defining the bounds, shape (n_ref, n_obj).

        Returns:
            New array of shape (n_points, n_vectors).

        Raises:
            ValueError: If a front is malformed or its objective count differs
                from the weights'.
            ConfigurationError: If the reference front is constant on an objective.
            InsufficientDataError: If the reference front is empty.
        """
        approx = as_front(approximation, n_obj=self.n_obj, name="approximation front")
        ref = as_front(reference, n_obj=self.n_obj, name="reference front")
        bounds = reference_bounds(ref)
        return tchebycheff_matrix(normalize(approx, bounds), self._weights)

    def value(self, approximation, reference) -> float:
        """Return the R2 value of an approximation front.

        Raises:
            InsufficientDataError: If the approximation front is empty.
            ConfigurationError: If the reference front is constant on an objective.
        """
        return aggregate(self.matrix(approximation, reference))

    def value_without(self, approximation, reference, index: int) -> float:
        """Return the R2 value of an approximation front without one point.

        Raises:
            InsufficientDataError: If the approximation front has fewer than
                two points.
            IndexError: If index is outside the front.
        """
        return contribution_without(self.matrix(approximation, reference), index)

    def contributions(self, approximation, reference) -> np.ndarray:
        """Return value_without for every point of the approximation front."""
        return contributions(self.matrix(approximation, reference))

    def best(self, approximation, reference) -> int:
        """Return the index of the point whose removal hurts the front most."""
        return best_index(self.contributions(approximation, reference))

    def worst(self, approximation, reference) -> int:
        """Return the index of the point whose removal hurts the front least."""
        return worst_index(self.contributions(approximation, reference))

    def n_best(self, approximation, reference, n: int) -> np.ndarray:
        """Return the n indices with the smallest leave-one-out values.

        Indices are sorted by ascending leave-one-out value, ties by index.
        Note that these are the points contributing least to the front.
        """
        return n_best_indices(self.contributions(approximation, reference), n)

    # -------------------------------------------------------------------------
    # Population-level evaluation (population is its own reference)
    # -------------------------------------------------------------------------

    def value_of(self, population) -> float:
        """Return the R2 value of a population, normalized by itself."""
        front = extract_front(population)
        return self.value(front, front)

    def value_without_of(self, population, index: int) -> float:
        """Return the R2 value of a population without the individual at index."""
        front = extract_front(population)
        return self.value_without(front, front, index)

    def contributions_of(self, population) -> np.ndarray:
        front = extract_front(population)
        return self.contributions(front, front)

    def best_of(self, population) -> int:
        front = extract_front(population)
        return self.best(front, front)

    def worst_of(self, population) -> int:
        front = extract_front(population)
        return self.worst(front, front)

    def n_best_of(self, population, n: int) -> np.ndarray:
        front = extract_front(population)
        return self.n_best(front, front, n)
