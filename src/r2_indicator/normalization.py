"""Front normalization against the reference front's extremes.

Every coordinate x of objective n is mapped to (x - min_n) / (max_n - min_n),
where min_n and max_n are taken over the reference front. After this the
reference front spans [0, 1] on every objective and the ideal point sits at
the origin.

An objective on which all reference points agree (max_n == min_n) has no
valid scale. Rather than divide by zero, reference_bounds rejects it with a
ConfigurationError.
"""

from dataclasses import dataclass

import numpy as np

from r2_indicator.exceptions import ConfigurationError, InsufficientDataError
from r2_indicator.fronts import as_front


@dataclass(frozen=True)
class NormalizationBounds:
    """Per-objective bounds of a reference front.

    Attributes:
        minimum: Smallest value of each objective, shape (n_obj,).
        maximum: Largest value of each objective, shape (n_obj,).
    """

    minimum: np.ndarray
    maximum: np.ndarray

    def __post_init__(self) -> None:
        """Validate shapes and copy arrays for immutability.

        Raises:
            ValueError: If the arrays are not 1D or differ in length.
        """
        minimum = np.asarray(self.minimum, dtype=np.float64)
        maximum = np.asarray(self.maximum, dtype=np.float64)
        if minimum.ndim != 1 or maximum.ndim != 1:
            raise ValueError(f"bounds must be 1D, got shapes {minimum.shape} and {maximum.shape}")
        if minimum.shape != maximum.shape:
            raise ValueError(f"minimum has {minimum.shape[0]} objectives, maximum has {maximum.shape[0]}")
        minimum = minimum.copy()
        maximum = maximum.copy()
        minimum.setflags(write=False)
        maximum.setflags(write=False)
        object.__setattr__(self, "minimum", minimum)
        object.__setattr__(self, "maximum", maximum)

    @property
    def n_obj(self) -> int:
        return self.minimum.shape[0]

    @property
    def span(self) -> np.ndarray:
        """Return max - min for every objective."""
        return self.maximum - self.minimum


def reference_bounds(reference_front) -> NormalizationBounds:
    """Compute the normalization bounds of a reference front.

    Args:
        reference_front: Reference objective vectors, shape (n_points, n_obj).

    Returns:
        NormalizationBounds holding the per-objective min and max.

    Raises:
        InsufficientDataError: If the reference front has no points.
        ConfigurationError: If any objective has max == min, which includes
            every single-point reference front, or if max - min overflows.

    Examples:
        >>> bounds = reference_bounds([[1.0, 4.0], [3.0, 2.0]])
        >>> bounds.minimum, bounds.maximum
        (array([1., 2.]), array([3., 4.]))
    """
    ref = as_front(reference_front, name="reference front")
    if ref.shape[0] == 0:
        raise InsufficientDataError("reference front has no points")

    bounds = NormalizationBounds(minimum=ref.min(axis=0), maximum=ref.max(axis=0))

    with np.errstate(over="ignore"):
        span = bounds.span

    degenerate = np.flatnonzero(span <= 0.0)
    if degenerate.size > 0:
        raise ConfigurationError(
            f"reference front is constant on objective(s) {degenerate.tolist()}; cannot normalize",
            suggestion="Use a reference front with at least two distinct values on every objective.",
            details={"objectives": degenerate.tolist()},
        )

    # max - min overflows for extreme finite values
    overflow = np.flatnonzero(~np.isfinite(span))
    if overflow.size > 0:
        raise ConfigurationError(
            f"range of reference front objective(s) {overflow.tolist()} overflows; cannot normalize",
            suggestion="Rescale the objectives so that max - min is representable.",
            details={"objectives": overflow.tolist()},
        )
    return bounds


def normalize(front, bounds: NormalizationBounds) -> np.ndarray:
    """Rescale a front with precomputed bounds.

    Points outside the reference range map outside [0, 1]; they are not
    clipped.

    Args:
        front: Objective vectors, shape (n_points, n_obj).
        bounds: Bounds from reference_bounds.

    Returns:
        Normalized front, shape (n_points, n_obj).

    Raises:
        ValueError: If the front's objective count differs from the bounds'.
    """
    arr = as_front(front, n_obj=bounds.n_obj)
    return (arr - bounds.minimum) / bounds.span


def normalize_fronts(front, reference_front) -> tuple[np.ndarray, np.ndarray]:
    """Normalize a front and its reference front with the reference's bounds.

    Args:
        front: Approximation front, shape (n_points, n_obj).
        reference_front: Reference front, shape (n_ref, n_obj).

    Returns:
        Tuple of (normalized_front, normalized_reference).

    Raises:
        InsufficientDataError: If the reference front has no points.
        ConfigurationError: If the reference front is constant on any objective.
        ValueError: If the fronts disagree on the number of objectives.
    """
    bounds = reference_bounds(reference_front)
    return normalize(front, bounds), normalize(reference_front, bounds)
