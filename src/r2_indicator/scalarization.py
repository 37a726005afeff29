"""Weighted Tchebycheff scalarization of a normalized front.

For point i and weight vector j the Tchebycheff utility is

    M[i, j] = max_n  weights[j, n] * |front[i, n]|

i.e. the weighted distance of the point to the ideal point, which after
normalization is the origin. Sweeping j over many weight directions samples
the achievement scalarizing surface densely enough that the per-direction
minimum over points measures how close the whole front gets to the ideal.
"""

import logging

import numpy as np

logger = logging.getLogger(__name__)


def tchebycheff_matrix(normalized_front: np.ndarray, weights: np.ndarray) -> np.ndarray:
    """Build the (points x weight vectors) Tchebycheff utility matrix.

    Uses broadcasting: (n_points, 1, n_obj) * (1, n_vectors, n_obj) reduced
    with max over the objective axis.

    Args:
        normalized_front: Normalized objective vectors, shape (n_points, n_obj).
        weights: Weight vectors, shape (n_vectors, n_obj).

    Returns:
        Array of shape (n_points, n_vectors). A new array on every call.

    Raises:
        ValueError: If the inputs are not 2D or disagree on n_obj.

    Examples:
        >>> front = np.array([[0.0, 1.0], [1.0, 0.0]])
        >>> weights = np.array([[0.25, 0.75], [0.5, 0.5]])
        >>> tchebycheff_matrix(front, weights)
        array([[0.75, 0.5 ],
               [0.25, 0.5 ]])
    """
    if normalized_front.ndim != 2 or weights.ndim != 2:
        raise ValueError(
            f"front and weights must be 2D, got shapes {normalized_front.shape} and {weights.shape}"
        )
    if normalized_front.shape[1] != weights.shape[1]:
        raise ValueError(
            f"front has {normalized_front.shape[1]} objectives but weights have {weights.shape[1]}"
        )

    # (n_points, 1, n_obj) * (1, n_vectors, n_obj) -> (n_points, n_vectors, n_obj)
    weighted = np.abs(normalized_front)[:, np.newaxis, :] * weights[np.newaxis, :, :]
    matrix = weighted.max(axis=2)

    logger.debug("Built Tchebycheff matrix of shape %s", matrix.shape)
    return matrix
