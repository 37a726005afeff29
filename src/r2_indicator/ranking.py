"""Ranking of front points by their leave-one-out R2 value.

The leave-one-out value of point i is the R2 of the front with i removed.
Removing a valuable point makes the front worse, so its leave-one-out value
is high; removing a redundant point leaves it unchanged, so its value is low.

- best_index: point with the largest leave-one-out value
- worst_index: point with the smallest leave-one-out value
- n_best_indices: the n points with the SMALLEST leave-one-out values, in
  ascending order. The name is kept for compatibility with existing callers
  even though these are the least valuable points.

Ties resolve to the lowest original index in all three functions.
"""

import numpy as np


def _as_values(values) -> np.ndarray:
    arr = np.asarray(values, dtype=np.float64)
    if arr.ndim != 1:
        raise ValueError(f"values must be 1D, got shape {arr.shape}")
    if arr.shape[0] == 0:
        raise ValueError("values must not be empty")
    return arr


def best_index(values) -> int:
    """Return the index of the largest leave-one-out value.

    Args:
        values: Leave-one-out values, shape (n_points,).

    Returns:
        Index of the maximum. The first one wins on ties.

    Raises:
        ValueError: If values is empty or not 1D.

    Examples:
        >>> best_index([0.2, 0.5, 0.5])
        1
    """
    return int(np.argmax(_as_values(values)))


def worst_index(values) -> int:
    """Return the index of the smallest leave-one-out value.

    Args:
        values: Leave-one-out values, shape (n_points,).

    Returns:
        Index of the minimum. The first one wins on ties.

    Raises:
        ValueError: If values is empty or not 1D.
    """
    return int(np.argmin(_as_values(values)))


def n_best_indices(values, n: int) -> np.ndarray:
    """Return the indices of the n smallest leave-one-out values.

    Indices are ordered by ascending value; equal values keep their original
    index order (stable sort).

    Args:
        values: Leave-one-out values, shape (n_points,).
        n: Number of indices to return, 0 <= n <= n_points.

    Returns:
        Integer array of shape (n,).

    Raises:
        ValueError: If values is empty or not 1D, or n is out of range.

    Examples:
        >>> n_best_indices([0.3, 0.1, 0.3, 0.2], 3)
        array([1, 3, 0])
    """
    arr = _as_values(values)
    if n < 0 or n > arr.shape[0]:
        raise ValueError(f"n must be between 0 and {arr.shape[0]}, got {n}")
    order = np.argsort(arr, kind="stable")
    return order[:n].astype(np.intp)
