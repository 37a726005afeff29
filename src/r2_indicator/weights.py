"""Weight (utility) vector generation for the R2 indicator.

This module provides the three ways an indicator obtains its weight vectors:
- uniform_weights: N evenly spaced bi-objective vectors (a, 1 - a)
- default_weights: the 100-vector bi-objective set
- load_weights: arbitrary-dimension vectors read from a text file

All functions return a float array of shape (n_vectors, n_obj).
"""

import logging
import os

import numpy as np

from r2_indicator.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_N_VECTORS: int = 100
DEFAULT_N_OBJ: int = 2


def uniform_weights(n_vectors: int = DEFAULT_N_VECTORS, n_obj: int = DEFAULT_N_OBJ) -> np.ndarray:
    """Generate evenly spaced bi-objective weight vectors.

    Vector n is (a, 1 - a) with a = n / (n_vectors - 1), so the first vector
    is (0, 1), the last is (1, 0) and every vector sums to 1.

    Args:
        n_vectors: Number of weight vectors N. Must be at least 2.
        n_obj: Number of objectives. Only 2 is supported by this strategy;
            use load_weights for other dimensions.

    Returns:
        Array of shape (n_vectors, 2).

    Raises:
        ConfigurationError: If n_obj is not 2 or n_vectors is less than 2.

    Examples:
        >>> uniform_weights(3)
        array([[0. , 1. ],
               [0.5, 0.5],
               [1. , 0. ]])
    """
    if n_obj != 2:
        raise ConfigurationError(
            f"uniform weight generation supports exactly 2 objectives, got {n_obj}",
            suggestion="Load weight vectors from a file for other objective counts.",
            details={"n_obj": n_obj},
        )
    if n_vectors < 2:
        raise ConfigurationError(
            f"n_vectors must be at least 2, got {n_vectors}",
            details={"n_vectors": n_vectors},
        )

    a = np.arange(n_vectors, dtype=np.float64) / (n_vectors - 1)
    return np.column_stack([a, 1.0 - a])


def default_weights() -> np.ndarray:
    """Return the default weight set: 100 uniform bi-objective vectors."""
    return uniform_weights(DEFAULT_N_VECTORS, DEFAULT_N_OBJ)


def load_weights(path: str | os.PathLike, n_obj: int) -> np.ndarray:
    """Read weight vectors from a whitespace-delimited text file.

    Each non-blank line holds one vector. The line is split on whitespace and
    its first n_obj tokens become the vector's components; extra tokens are
    ignored. A line with fewer than n_obj tokens is malformed.

    Args:
        path: Path to the weight file.
        n_obj: Number of objectives (components per vector).

    Returns:
        Array of shape (n_vectors, n_obj).

    Raises:
        ConfigurationError: If the file cannot be read, a line is short or
            holds a non-numeric, negative or non-finite component, or the
            file contains no vectors.

    Examples:
        >>> weights = load_weights("weights/W3D_100.dat", n_obj=3)
        >>> weights.shape
        (100, 3)
    """
    if n_obj < 1:
        raise ConfigurationError(f"n_obj must be positive, got {n_obj}", details={"n_obj": n_obj})

    try:
        with open(path, encoding="utf-8") as f:
            lines = f.readlines()
    except OSError as e:
        raise ConfigurationError(
            f"failed to read weight vectors from '{path}': {e.strerror or e}",
            suggestion="Check that the weight file exists and is readable.",
            details={"path": str(path)},
        ) from e
    except UnicodeDecodeError as e:
        raise ConfigurationError(
            f"weight file '{path}' is not a text file: {e.reason}",
            details={"path": str(path)},
        ) from e

    vectors: list[list[float]] = []
    for line_no, line in enumerate(lines, start=1):
        tokens = line.split()
        if not tokens:
            continue
        if len(tokens) < n_obj:
            raise ConfigurationError(
                f"line {line_no} of '{path}' has {len(tokens)} values, expected at least {n_obj}",
                details={"path": str(path), "line": line_no},
            )
        try:
            vector = [float(token) for token in tokens[:n_obj]]
        except ValueError as e:
            raise ConfigurationError(
                f"line {line_no} of '{path}' is not numeric: {line.strip()!r}",
                details={"path": str(path), "line": line_no},
            ) from e
        if not all(np.isfinite(vector)) or min(vector) < 0.0:
            raise ConfigurationError(
                f"line {line_no} of '{path}' has a negative or non-finite weight",
                details={"path": str(path), "line": line_no},
            )
        vectors.append(vector)

    if not vectors:
        raise ConfigurationError(f"weight file '{path}' contains no vectors", details={"path": str(path)})

    weights = np.array(vectors, dtype=np.float64)
    logger.debug("Loaded %d weight vectors of dimension %d from %s", weights.shape[0], n_obj, path)
    return weights
